"""Rendering helpers: turn a controller Snapshot into prompt_toolkit fragments."""

from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Todo
from core.desktop.devtools.interface.constants import (
    COMPOSE_HELP_TEXT,
    DONE_MARKER,
    EMPTY_LIST_HINT,
    HELP_TEXT,
    OPEN_MARKER,
)
from core.desktop.devtools.interface.tui_display import pad_display, trim_display
from core.desktop.devtools.interface.tui_input import InputMode, Snapshot


def row_style(todo: Todo, selected: bool) -> str:
    if selected:
        return "class:selected.done" if todo.is_completed else "class:selected"
    return "class:done" if todo.is_completed else "class:text"


def row_text(todo: Todo) -> str:
    marker = DONE_MARKER if todo.is_completed else OPEN_MARKER
    return f"{marker}{todo.title}"


def list_view_offset(selected: Optional[int], offset: int, total: int, visible: int) -> int:
    """Return a scroll offset that keeps ``selected`` inside the visible window."""
    visible = max(1, visible)
    if total <= visible:
        return 0
    max_offset = total - visible
    if selected is not None:
        if selected < offset:
            offset = selected
        elif selected >= offset + visible:
            offset = selected - visible + 1
    return max(0, min(offset, max_offset))


def render_task_list(snapshot: Snapshot, offset: int = 0, visible_rows: Optional[int] = None, width: int = 80) -> FormattedText:
    todos = snapshot.todos
    if not todos:
        return FormattedText([("class:text.dim", trim_display(EMPTY_LIST_HINT, width))])
    total = len(todos)
    rows = total if visible_rows is None else max(1, visible_rows)
    start = list_view_offset(snapshot.selected, offset, total, rows)
    end = min(total, start + rows)
    parts: List[Tuple[str, str]] = []
    for idx in range(start, end):
        todo = todos[idx]
        is_selected = idx == snapshot.selected
        parts.append((row_style(todo, is_selected), pad_display(row_text(todo), width, "…")))
        if idx < end - 1:
            parts.append(("", "\n"))
    return FormattedText(parts)


def render_help(snapshot: Optional[Snapshot] = None) -> FormattedText:
    text = COMPOSE_HELP_TEXT if snapshot and snapshot.mode is InputMode.COMPOSE else HELP_TEXT
    return FormattedText([("class:help", text)])


def render_input(snapshot: Snapshot) -> FormattedText:
    if snapshot.mode is not InputMode.COMPOSE:
        return FormattedText([])
    return FormattedText([
        ("class:input", snapshot.buffer),
        ("class:input.caret", " "),
    ])


__all__ = [
    "row_style",
    "row_text",
    "list_view_offset",
    "render_task_list",
    "render_help",
    "render_input",
]
