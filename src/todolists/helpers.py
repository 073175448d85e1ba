from typing import Any


def todos_count(todo_list: dict[str, Any]) -> int:
    return len(todo_list["todos"])


def remaining_todos_count(todo_list: dict[str, Any]) -> int:
    return sum(1 for todo in todo_list["todos"] if not todo["completed"])


def list_completed(todo_list: dict[str, Any]) -> bool:
    """A list is complete if it has todos and all of them are done.

    Empty lists are never complete.
    """
    return todos_count(todo_list) > 0 and remaining_todos_count(todo_list) == 0


def list_class(todo_list: dict[str, Any]) -> str:
    return "complete" if list_completed(todo_list) else ""


def sort_lists(lists: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Returns the lists with the completed ones last, keeping the order otherwise."""
    return sorted(lists, key=lambda lst: 1 if list_completed(lst) else 0)


def sort_todos(todos: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(todos, key=lambda todo: 1 if todo["completed"] else 0)
