from django.urls import path, register_converter

from . import converters, views

register_converter(converters.IdConverter, "id")

app_name = "todolists"

urlpatterns = [
    path("", views.home, name="home"),
    path("lists", views.lists, name="lists"),
    path("lists/new", views.new_list, name="new_list"),
    path("lists/<id:list_id>", views.todo_list, name="list"),
    path("lists/<id:list_id>/edit", views.edit_list, name="edit_list"),
    path("lists/<id:list_id>/delete", views.delete_list, name="delete_list"),
    path("lists/<id:list_id>/complete_all", views.complete_all, name="complete_all"),
    path("lists/<id:list_id>/todos", views.create_todo, name="create_todo"),
    path(
        "lists/<id:list_id>/todos/<id:todo_id>",
        views.update_todo,
        name="update_todo",
    ),
    path(
        "lists/<id:list_id>/todos/<id:todo_id>/delete",
        views.delete_todo,
        name="delete_todo",
    ),
]
