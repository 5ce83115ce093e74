"""To-do view: a task list with filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from html import escape
from typing import Callable

from mia.styles import todo_styles

ENTER = "Enter"

_CHECK_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="18" '
    'height="18" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">'
    '<polyline points="20 6 9 17 4 12"></polyline></svg>'
)
_DELETE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="18" '
    'height="18" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">'
    '<line x1="18" y1="6" x2="6" y2="18"></line>'
    '<line x1="6" y1="6" x2="18" y2="18"></line></svg>'
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class TodoItem:
    """One task."""

    id: int
    text: str
    completed: bool
    created_at: datetime


class TodoFilter(Enum):
    """Which tasks the list shows."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def matches(self, item: TodoItem) -> bool:
        if self is TodoFilter.ACTIVE:
            return not item.completed
        if self is TodoFilter.COMPLETED:
            return item.completed
        return True


class TodoList:
    """State of the to-do view: the tasks, the text being typed and the filter."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _local_now
        self.todos: list[TodoItem] = [
            TodoItem(1, "Learn Dioxus", False, self._clock()),
            TodoItem(2, "Build a To-Do app", True, self._clock()),
        ]
        self.new_todo_text = ""
        self.filter = TodoFilter.ALL

    def press_key(self, key: str) -> bool:
        """Handle a key press in the input; Enter adds. Return whether a task was added."""
        if key == ENTER and self.new_todo_text:
            self.add()
            return True
        return False

    def add(self) -> TodoItem | None:
        """Add the typed text as a new task; return it, or None if nothing was typed."""
        if not self.new_todo_text:
            return None
        new_id = max((t.id for t in self.todos), default=0) + 1
        item = TodoItem(new_id, self.new_todo_text, False, self._clock())
        self.todos.append(item)
        self.new_todo_text = ""
        return item

    def _find(self, todo_id: int) -> TodoItem | None:
        return next((t for t in self.todos if t.id == todo_id), None)

    def toggle(self, todo_id: int) -> TodoItem | None:
        """Flip a task's completed state; return the task, or None if there is no such id."""
        item = self._find(todo_id)
        if item is not None:
            item.completed = not item.completed
        return item

    def delete(self, todo_id: int) -> None:
        """Remove every task with this id."""
        self.todos = [t for t in self.todos if t.id != todo_id]

    def visible(self) -> list[TodoItem]:
        """Return the tasks the current filter shows."""
        return [t for t in self.todos if self.filter.matches(t)]

    def items_left(self) -> int:
        """Return the number of tasks not yet completed."""
        return sum(1 for t in self.todos if not t.completed)

    @staticmethod
    def _render_item(item: TodoItem) -> str:
        css = "todo-item completed" if item.completed else "todo-item"
        check = _CHECK_ICON if item.completed else ""
        return (
            f'<div key="{item.id}" class="{css}">'
            f'<div class="todo-checkbox">{check}</div>'
            f'<div class="todo-text">{escape(item.text)}</div>'
            f'<div class="todo-delete">{_DELETE_ICON}</div>'
            f'<div class="todo-time">{item.created_at.strftime("%Y-%m-%d %H:%M")}</div>'
            "</div>"
        )

    def render(self) -> str:
        """Return the view as HTML."""
        disabled = " disabled" if not self.new_todo_text else ""
        filters = "".join(
            f'<button class="{"filter-button active" if f is self.filter else "filter-button"}">'
            f"{f.value}</button>"
            for f in TodoFilter
        )
        items = "".join(self._render_item(t) for t in self.visible())
        return (
            f"<style>{todo_styles()}</style>"
            '<div class="todo-container">'
            '<div class="todo-header">To-Do List</div>'
            '<div class="todo-input-container">'
            f'<input type="text" value="{escape(self.new_todo_text)}" '
            'placeholder="Add a new task...">'
            f'<button class="add-button"{disabled}>Add</button>'
            "</div>"
            f'<div class="todo-filters">{filters}</div>'
            f'<div class="todo-items">{items}</div>'
            f'<div class="todo-stats">{self.items_left()} items left</div>'
            "</div>"
        )