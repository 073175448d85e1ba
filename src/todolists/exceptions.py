class TodoListsError(Exception):
    pass


class NotFoundError(TodoListsError):
    """A list or todo id from the request does not resolve."""

    message = ""


class ListNotFound(NotFoundError):
    message = "That list does not exist."

    def __init__(self, list_id):
        self.list_id = list_id
        super().__init__(f"List {list_id} does not exist.")


class TodoNotFound(NotFoundError):
    message = "That todo does not exist."

    def __init__(self, list_id, todo_id):
        self.list_id = list_id
        self.todo_id = todo_id
        super().__init__(f"Todo {todo_id} does not exist in list {list_id}.")
