from pathlib import Path

import pytest
from django.conf import settings
from django.contrib.sessions.backends.cache import SessionStore
from django.test import Client, RequestFactory

from todolists.middleware import TodoListsDetails
from todolists.storage import SessionPersistence


BASE_DIR = Path(__file__).resolve().parent


@pytest.fixture
def session():
    session = SessionStore()
    session.create()
    return session


@pytest.fixture
def storage(session) -> SessionPersistence:
    return SessionPersistence(session)


@pytest.fixture
def request_with_session(session):
    """Fixture to provide an Http GET Request with a session."""
    factory = RequestFactory()
    req = factory.get("/")

    req.session = session
    req.todolists = TodoListsDetails(req)
    req.storage = SessionPersistence(req.session)

    return req


@pytest.fixture
def ajax_client() -> Client:
    """A test client that marks every request as sent by a script."""
    return Client(headers={"X-Requested-With": "XMLHttpRequest"})


def pytest_configure(config):
    settings.configure(
        BASE_DIR=BASE_DIR,
        SECRET_KEY="django-insecure1234567890",
        ROOT_URLCONF="todosite.urls",
        INSTALLED_APPS=[
            "django.contrib.sessions",
            "django.contrib.staticfiles",
            "todolists",
        ],
        MIDDLEWARE=[
            "django.middleware.security.SecurityMiddleware",
            "whitenoise.middleware.WhiteNoiseMiddleware",
            "django.contrib.sessions.middleware.SessionMiddleware",
            "django.middleware.common.CommonMiddleware",
            "django.middleware.csrf.CsrfViewMiddleware",
            "django.middleware.clickjacking.XFrameOptionsMiddleware",
            "todolists.middleware.TodoListsMiddleware",
        ],
        DATABASES={
            "default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}
        },
        CACHES={
            "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}
        },
        SESSION_ENGINE="django.contrib.sessions.backends.cache",
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
                "OPTIONS": {
                    "context_processors": [
                        "django.template.context_processors.request",
                        "todolists.context_processors.flash",
                    ],
                },
            },
        ],
        STATIC_URL="/static/",
        DEBUG=True,
        USE_TZ=True,
    )
