import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from todolists.exceptions import ListNotFound, TodoNotFound
from todolists.middleware import TodoListsDetails, TodoListsMiddleware
from todolists.storage import SessionPersistence


@pytest.fixture
def request_factory():
    return RequestFactory()


@pytest.fixture
def middleware():
    return TodoListsMiddleware(lambda request: HttpResponse("ok"))


def test_details_bool_false(request_factory):
    """Should return False when 'X-Requested-With' header is not present"""
    request = request_factory.get("/")
    assert bool(TodoListsDetails(request)) is False


def test_details_bool_true(request_factory):
    """Should return True when 'X-Requested-With' is 'XMLHttpRequest'"""
    request = request_factory.get("/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")
    assert bool(TodoListsDetails(request)) is True


def test_details_bool_false_for_other_values(request_factory):
    request = request_factory.get("/", HTTP_X_REQUESTED_WITH="fetch")
    assert TodoListsDetails(request).is_async is False


def test_details_custom_header(request_factory, settings):
    settings.TODOLISTS_ASYNC_HEADER = "X-Background"
    settings.TODOLISTS_ASYNC_HEADER_VALUE = "yes"
    request = request_factory.get("/", HTTP_X_BACKGROUND="yes")
    assert TodoListsDetails(request).is_async is True


def test_middleware_attaches_storage(middleware, request_factory, session):
    request = request_factory.get("/")
    request.session = session

    response = middleware(request)

    assert response.content == b"ok"
    assert isinstance(request.storage, SessionPersistence)
    assert request.storage.session is session
    assert isinstance(request.todolists, TodoListsDetails)


def test_unknown_list_redirects_to_index(middleware, request_with_session):
    response = middleware.process_exception(request_with_session, ListNotFound(99))

    assert response.status_code == 302
    assert response["Location"] == "/lists"
    assert request_with_session.session["error"] == "That list does not exist."


def test_unknown_todo_redirects_to_list(middleware, request_with_session):
    response = middleware.process_exception(
        request_with_session, TodoNotFound(3, 99)
    )

    assert response.status_code == 302
    assert response["Location"] == "/lists/3"
    assert request_with_session.session["error"] == "That todo does not exist."


def test_not_found_for_async_request(middleware, request_factory, session):
    request = request_factory.post("/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")
    request.session = session
    request.todolists = TodoListsDetails(request)

    response = middleware.process_exception(request, ListNotFound(99))

    assert response.status_code == 302
    assert response["Location"] == "/lists"
    assert session["error"] == "That list does not exist."


def test_other_exceptions_are_not_handled(middleware, request_with_session):
    assert middleware.process_exception(request_with_session, ValueError()) is None
