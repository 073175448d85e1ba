from typing import Any

from django.conf import settings

from . import default_settings


def get_setting(name) -> Any:
    if hasattr(settings, name):
        return getattr(settings, name)
    return getattr(default_settings, name, None)
