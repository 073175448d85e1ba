from django.conf import settings
from django.core.checks import Error, Warning, register, Tags

SESSION_MIDDLEWARE = "django.contrib.sessions.middleware.SessionMiddleware"
TODOLISTS_MIDDLEWARE = "todolists.middleware.TodoListsMiddleware"
FLASH_CONTEXT_PROCESSOR = "todolists.context_processors.flash"


@register(Tags.compatibility)
def check_middleware(app_configs, **kwargs):
    """
    Check that the lists can be loaded from the session on each request.

    TodoListsMiddleware needs request.session, so it has to come after
    SessionMiddleware.
    """
    errors = []
    middleware = list(getattr(settings, "MIDDLEWARE", None) or [])

    if SESSION_MIDDLEWARE not in middleware:
        errors.append(
            Error(
                "SessionMiddleware is required to store todo lists.",
                hint=f"Add '{SESSION_MIDDLEWARE}' to MIDDLEWARE.",
                id="todolists.E001",
            )
        )
        return errors

    if TODOLISTS_MIDDLEWARE not in middleware or middleware.index(
        TODOLISTS_MIDDLEWARE
    ) < middleware.index(SESSION_MIDDLEWARE):
        errors.append(
            Error(
                "TodoListsMiddleware is missing or placed before SessionMiddleware.",
                hint=f"Add '{TODOLISTS_MIDDLEWARE}' to MIDDLEWARE, after "
                f"'{SESSION_MIDDLEWARE}'.",
                id="todolists.E002",
            )
        )

    return errors


@register(Tags.templates)
def check_flash_context_processor(app_configs, **kwargs):
    """Check that transient messages reach the templates."""
    for backend in getattr(settings, "TEMPLATES", []):
        processors = backend.get("OPTIONS", {}).get("context_processors", [])
        if FLASH_CONTEXT_PROCESSOR in processors:
            return []
    return [
        Warning(
            "Error and success messages will not be shown.",
            hint=f"Add '{FLASH_CONTEXT_PROCESSOR}' to the context_processors "
            "of your template backend.",
            id="todolists.W001",
        )
    ]
