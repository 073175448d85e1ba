"""Transient messages shown once on the next rendered page.

There is exactly one slot per kind (error, success) in the session. Writing
to a slot that was not read yet replaces its message.
"""

from .conf import get_setting


def _key(kind: str) -> str:
    return get_setting(f"TODOLISTS_FLASH_{kind.upper()}_KEY")


def set_flash(request, kind: str, message: str) -> None:
    request.session[_key(kind)] = message


def set_error(request, message: str) -> None:
    set_flash(request, "error", message)


def set_success(request, message: str) -> None:
    set_flash(request, "success", message)


def pop_flash(request, kind: str) -> str | None:
    return request.session.pop(_key(kind), None)
