from .flash import pop_flash


def flash(request) -> dict:
    """Hands the pending transient messages to the template and clears them."""
    if not hasattr(request, "session"):
        return {}
    return {
        "flash_error": pop_flash(request, "error"),
        "flash_success": pop_flash(request, "success"),
    }
