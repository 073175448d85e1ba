import logging
from typing import Any

from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST, require_http_methods

from .exceptions import ListNotFound, TodoNotFound
from .flash import set_error, set_success
from .middleware import TodoListsHttpRequest
from .validation import error_for_list_name, error_for_todo_name

logger = logging.getLogger(__name__)


def load_list(request: TodoListsHttpRequest, list_id: int) -> dict[str, Any]:
    """Returns the list with the given id, or raises ListNotFound.

    TodoListsMiddleware turns the exception into a redirect to the list index.
    """
    todo_list = request.storage.find_list(list_id)
    if todo_list is None:
        raise ListNotFound(list_id)
    return todo_list


def load_todo(
    request: TodoListsHttpRequest, list_id: int, todo_id: int
) -> dict[str, Any]:
    todo = request.storage.find_todo(list_id, todo_id)
    if todo is None:
        raise TodoNotFound(list_id, todo_id)
    return todo


def _render_list(request, todo_list, todo_name: str = "") -> HttpResponse:
    return render(
        request,
        "todolists/list.html",
        {"list": todo_list, "todos": todo_list["todos"], "todo_name": todo_name},
    )


@require_GET
def home(request) -> HttpResponse:
    return redirect("todolists:lists")


@require_http_methods(["GET", "POST"])
def lists(request: TodoListsHttpRequest) -> HttpResponse:
    if request.method == "POST":
        return _create_list(request)
    return render(
        request, "todolists/lists.html", {"lists": request.storage.all_lists()}
    )


def _create_list(request: TodoListsHttpRequest) -> HttpResponse:
    list_name = request.POST.get("list_name", "").strip()

    error = error_for_list_name(list_name, request.storage.all_lists())
    if error:
        logger.debug(f"Rejected list name {list_name!r}: {error}")
        set_error(request, error)
        return render(request, "todolists/new_list.html", {"list_name": list_name})

    request.storage.create_new_list(list_name)
    set_success(request, "The list has been created.")
    return redirect("todolists:lists")


@require_GET
def new_list(request) -> HttpResponse:
    return render(request, "todolists/new_list.html", {"list_name": ""})


@require_http_methods(["GET", "POST"])
def todo_list(request: TodoListsHttpRequest, list_id: int) -> HttpResponse:
    current = load_list(request, list_id)
    if request.method == "POST":
        return _update_list(request, current)
    return _render_list(request, current)


def _update_list(request: TodoListsHttpRequest, current: dict) -> HttpResponse:
    list_name = request.POST.get("list_name", "").strip()

    error = error_for_list_name(list_name, request.storage.all_lists())
    if error:
        logger.debug(f"Rejected list name {list_name!r}: {error}")
        set_error(request, error)
        return render(
            request,
            "todolists/edit_list.html",
            {"list": current, "list_name": list_name},
        )

    request.storage.update_list_name(current["id"], list_name)
    set_success(request, "The list name has been updated.")
    return redirect("todolists:list", current["id"])


@require_GET
def edit_list(request: TodoListsHttpRequest, list_id: int) -> HttpResponse:
    current = load_list(request, list_id)
    return render(
        request,
        "todolists/edit_list.html",
        {"list": current, "list_name": current["name"]},
    )


@require_POST
def delete_list(request: TodoListsHttpRequest, list_id: int) -> HttpResponse:
    load_list(request, list_id)
    request.storage.delete_list(list_id)

    if request.todolists:
        # the script navigates to the returned path by itself
        return HttpResponse(reverse("todolists:lists"), content_type="text/plain")

    set_success(request, "The list has been deleted.")
    return redirect("todolists:lists")


@require_POST
def create_todo(request: TodoListsHttpRequest, list_id: int) -> HttpResponse:
    current = load_list(request, list_id)
    todo_name = request.POST.get("todo", "").strip()

    error = error_for_todo_name(todo_name)
    if error:
        logger.debug(f"Rejected todo name {todo_name!r}: {error}")
        set_error(request, error)
        return _render_list(request, current, todo_name)

    request.storage.create_new_todo(list_id, todo_name)
    set_success(request, "The todo has been added.")
    return redirect("todolists:list", list_id)


@require_POST
def delete_todo(
    request: TodoListsHttpRequest, list_id: int, todo_id: int
) -> HttpResponse:
    load_list(request, list_id)
    load_todo(request, list_id, todo_id)
    request.storage.delete_todo_from_list(list_id, todo_id)

    if request.todolists:
        return HttpResponse(status=204)

    set_success(request, "The todo has been deleted.")
    return redirect("todolists:list", list_id)


@require_POST
def update_todo(
    request: TodoListsHttpRequest, list_id: int, todo_id: int
) -> HttpResponse:
    load_list(request, list_id)
    load_todo(request, list_id, todo_id)

    completed = request.POST.get("completed") == "true"
    request.storage.update_todo_status(list_id, todo_id, completed)

    set_success(request, "The todo has been updated.")
    return redirect("todolists:list", list_id)


@require_POST
def complete_all(request: TodoListsHttpRequest, list_id: int) -> HttpResponse:
    load_list(request, list_id)
    request.storage.mark_all_todos_as_completed(list_id)

    set_success(request, "All todos have been completed.")
    return redirect("todolists:list", list_id)
