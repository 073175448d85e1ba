from django import template

import todolists
from todolists import helpers

register = template.Library()


@register.simple_tag
def todolists_version() -> str:
    return todolists.__version__


register.filter("todos_count", helpers.todos_count)
register.filter("remaining_todos_count", helpers.remaining_todos_count)
register.filter("list_completed", helpers.list_completed)
register.filter("list_class", helpers.list_class)
register.filter("sort_lists", helpers.sort_lists)
register.filter("sort_todos", helpers.sort_todos)
