"""
WSGI config for todosite project.

It exposes the WSGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.0/howto/deployment/wsgi/
"""

import os
import sys
from pathlib import Path

from django.core.wsgi import get_wsgi_application

# Add the src dir to PYTHONPATH so that 'todolists' is available uninstalled
sys.path.append(str(Path(__file__).resolve().parent.parent.parent / "src"))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "todosite.settings")

application = get_wsgi_application()
