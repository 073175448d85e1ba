import logging
from typing import Any

from .conf import get_setting
from .exceptions import ListNotFound, TodoNotFound

logger = logging.getLogger(__name__)


class SessionPersistence:
    """Keeps the todo lists of one browser session inside the Django session.

    Lists and todos are plain dicts, so every session serializer can store them:

        {"id": 1, "name": "Groceries", "todos": [
            {"id": 1, "name": "Milk", "completed": False},
        ]}

    Ids are handed out per collection and are never reused, even after the item
    holding the highest id was deleted. For this, the last id given out is
    remembered next to the lists in the session.

    No business rules (name length, uniqueness) are checked here; callers
    validate before they mutate.
    """

    def __init__(self, session) -> None:
        self.session = session
        self.key = get_setting("TODOLISTS_SESSION_KEY")
        self.sequence_key = f"{self.key}_sequence"
        if self.key not in session:
            session[self.key] = []
        if self.sequence_key not in session:
            session[self.sequence_key] = {"lists": 0, "todos": {}}

    @property
    def _lists(self) -> list[dict[str, Any]]:
        return self.session[self.key]

    @property
    def _sequence(self) -> dict[str, Any]:
        return self.session[self.sequence_key]

    def _changed(self) -> None:
        # lists are mutated in place, which the session can't notice by itself
        self.session.modified = True

    @staticmethod
    def _next_id(collection: list[dict[str, Any]], last_id: int) -> int:
        highest = max((item["id"] for item in collection), default=0)
        return max(highest, last_id) + 1

    def _get_list(self, list_id: int) -> dict[str, Any]:
        todo_list = self.find_list(list_id)
        if todo_list is None:
            raise ListNotFound(list_id)
        return todo_list

    def all_lists(self) -> list[dict[str, Any]]:
        return self._lists

    def find_list(self, list_id: int) -> dict[str, Any] | None:
        return next((lst for lst in self._lists if lst["id"] == list_id), None)

    def create_new_list(self, name: str) -> dict[str, Any]:
        list_id = self._next_id(self._lists, self._sequence["lists"])
        todo_list = {"id": list_id, "name": name, "todos": []}
        self._lists.append(todo_list)
        self._sequence["lists"] = list_id
        self._changed()
        logger.debug(f"Created list {list_id}: {name!r}")
        return todo_list

    def delete_list(self, list_id: int) -> None:
        remaining = [lst for lst in self._lists if lst["id"] != list_id]
        if len(remaining) == len(self._lists):
            return
        self._lists[:] = remaining
        self._sequence["todos"].pop(str(list_id), None)
        self._changed()
        logger.debug(f"Deleted list {list_id}")

    def update_list_name(self, list_id: int, name: str) -> None:
        todo_list = self._get_list(list_id)
        todo_list["name"] = name
        self._changed()
        logger.debug(f"Renamed list {list_id} to {name!r}")

    def find_todo(self, list_id: int, todo_id: int) -> dict[str, Any] | None:
        todo_list = self.find_list(list_id)
        if todo_list is None:
            return None
        return next((t for t in todo_list["todos"] if t["id"] == todo_id), None)

    def create_new_todo(self, list_id: int, name: str) -> dict[str, Any]:
        todo_list = self._get_list(list_id)
        # JSON turns integer keys into strings, so store them as such right away
        sequence_key = str(list_id)
        todo_id = self._next_id(
            todo_list["todos"], self._sequence["todos"].get(sequence_key, 0)
        )
        todo = {"id": todo_id, "name": name, "completed": False}
        todo_list["todos"].append(todo)
        self._sequence["todos"][sequence_key] = todo_id
        self._changed()
        logger.debug(f"Added todo {todo_id} to list {list_id}: {name!r}")
        return todo

    def delete_todo_from_list(self, list_id: int, todo_id: int) -> None:
        todo_list = self._get_list(list_id)
        todo_list["todos"][:] = [t for t in todo_list["todos"] if t["id"] != todo_id]
        self._changed()
        logger.debug(f"Deleted todo {todo_id} from list {list_id}")

    def update_todo_status(self, list_id: int, todo_id: int, completed: bool) -> None:
        todo = self.find_todo(list_id, todo_id)
        if todo is None:
            self._get_list(list_id)
            raise TodoNotFound(list_id, todo_id)
        todo["completed"] = completed
        self._changed()
        logger.debug(f"Set todo {todo_id} of list {list_id} completed={completed}")

    def mark_all_todos_as_completed(self, list_id: int) -> None:
        todo_list = self._get_list(list_id)
        for todo in todo_list["todos"]:
            todo["completed"] = True
        self._changed()
        logger.debug(f"Completed all todos of list {list_id}")
