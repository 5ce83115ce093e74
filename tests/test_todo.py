from datetime import datetime

import pytest

from mia.todo import TodoFilter, TodoItem, TodoList

FIXED = datetime(2024, 3, 4, 8, 15)


@pytest.fixture
def todos():
    return TodoList(clock=lambda: FIXED)


def test_initial_items(todos):
    assert todos.todos == [
        TodoItem(1, "Learn Dioxus", False, FIXED),
        TodoItem(2, "Build a To-Do app", True, FIXED),
    ]
    assert todos.filter is TodoFilter.ALL


def test_add_uses_next_id_and_clears_input(todos):
    todos.new_todo_text = "Write tests"
    item = todos.add()
    assert item == TodoItem(3, "Write tests", False, FIXED)
    assert todos.todos[-1] is item
    assert todos.new_todo_text == ""


def test_add_empty_does_nothing(todos):
    assert todos.add() is None
    assert len(todos.todos) == 2


def test_id_follows_highest_after_delete(todos):
    todos.delete(1)
    todos.new_todo_text = "again"
    assert todos.add().id == 3


def test_id_restarts_when_list_empty(todos):
    todos.delete(1)
    todos.delete(2)
    todos.new_todo_text = "first"
    assert todos.add().id == 1


def test_enter_adds(todos):
    todos.new_todo_text = "via key"
    assert todos.press_key("Enter") is True
    assert todos.todos[-1].text == "via key"
    assert todos.press_key("Enter") is False
    assert len(todos.todos) == 3


def test_other_key_does_not_add(todos):
    todos.new_todo_text = "x"
    assert todos.press_key("Tab") is False
    assert len(todos.todos) == 2


def test_toggle(todos):
    assert todos.toggle(1).completed is True
    assert todos.toggle(1).completed is False
    assert todos.toggle(99) is None


def test_delete_unknown_keeps_list(todos):
    todos.delete(99)
    assert [t.id for t in todos.todos] == [1, 2]


def test_filters(todos):
    todos.filter = TodoFilter.ACTIVE
    assert [t.id for t in todos.visible()] == [1]
    todos.filter = TodoFilter.COMPLETED
    assert [t.id for t in todos.visible()] == [2]
    todos.filter = TodoFilter.ALL
    assert [t.id for t in todos.visible()] == [1, 2]


def test_items_left_tracks_toggles(todos):
    assert todos.items_left() == 1
    todos.toggle(1)
    assert todos.items_left() == 0
    todos.toggle(2)
    assert todos.items_left() == 1


def test_render(todos):
    todos.filter = TodoFilter.ACTIVE
    html = todos.render()
    assert "1 items left" in html
    assert "Learn Dioxus" in html
    assert "Build a To-Do app" not in html
    assert '<button class="filter-button active">Active</button>' in html
    assert '<button class="add-button" disabled>Add</button>' in html
    assert FIXED.strftime("%Y-%m-%d %H:%M") in html


def test_render_completed_item_class(todos):
    todos.filter = TodoFilter.COMPLETED
    html = todos.render()
    assert 'class="todo-item completed"' in html
    assert "<polyline" in html