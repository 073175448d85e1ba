"""Name checks for lists and todos.

Both functions return an error message for an invalid name, and ``None`` if
the name is valid, so views can put the result right into the session.
"""

from collections.abc import Iterable
from typing import Any

from .conf import get_setting


def _length_error(name: str, subject: str) -> str | None:
    min_length = get_setting("TODOLISTS_MIN_NAME_LENGTH")
    max_length = get_setting("TODOLISTS_MAX_NAME_LENGTH")
    if not min_length <= len(name) <= max_length:
        return f"{subject} must be between {min_length} and {max_length} characters."
    return None


def error_for_list_name(name: str, lists: Iterable[dict[str, Any]]) -> str | None:
    error = _length_error(name, "The list name")
    if error:
        return error
    if any(lst["name"] == name for lst in lists):
        return "List name must be unique."
    return None


def error_for_todo_name(name: str) -> str | None:
    return _length_error(name, "Todo name")
