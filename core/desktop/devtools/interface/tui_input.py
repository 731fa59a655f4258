"""Two-mode input controller: Navigate keys drive the list, Compose keys edit a title."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from core import SelectionCursor, Todo
from core.desktop.devtools.application.todo_store import TodoStore
from core.desktop.devtools.interface.constants import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
)

logger = logging.getLogger("todo_tui.tui")


class InputMode(Enum):
    NAVIGATE = "navigate"
    COMPOSE = "compose"


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer needs for one frame."""

    todos: Tuple[Todo, ...]
    selected: Optional[int]
    mode: InputMode
    buffer: str


class InputController:
    def __init__(self, store: TodoStore, cursor: Optional[SelectionCursor] = None):
        self.store = store
        self.cursor = cursor or SelectionCursor(len(store))
        self.mode = InputMode.NAVIGATE
        self.buffer = ""
        self.running = True
        self._navigate_keys: Dict[str, Callable[[], bool]] = {
            "a": self.begin_compose,
            KEY_ENTER: self.toggle_selected,
            " ": self.toggle_selected,
            "d": self.delete_selected,
            KEY_DOWN: self.select_next,
            "j": self.select_next,
            KEY_UP: self.select_previous,
            "k": self.select_previous,
            "q": self.quit,
        }

    # -------------------- dispatch --------------------
    def press(self, key: str) -> bool:
        """Feed one normalized key; return True when it changed anything."""
        if not key:
            return False
        if self.mode is InputMode.COMPOSE:
            return self._press_compose(key)
        handler = self._navigate_keys.get(key)
        if handler is None:
            return False
        return handler()

    def _press_compose(self, key: str) -> bool:
        if key == KEY_ENTER:
            return self.confirm_compose()
        if key == KEY_ESCAPE:
            return self.cancel_compose()
        if key == KEY_BACKSPACE:
            if not self.buffer:
                return False
            self.buffer = self.buffer[:-1]
            return True
        if len(key) == 1 and key.isprintable():
            self.buffer += key
            return True
        return False

    # -------------------- navigate actions --------------------
    def begin_compose(self) -> bool:
        self.mode = InputMode.COMPOSE
        self.buffer = ""
        return True

    def toggle_selected(self) -> bool:
        return self.store.toggle(self.cursor.selected)

    def delete_selected(self) -> bool:
        changed = self.store.delete(self.cursor.selected)
        if changed:
            self.cursor.reconcile(len(self.store))
        return changed

    def select_next(self) -> bool:
        before = self.cursor.selected
        self.cursor.next()
        return self.cursor.selected != before

    def select_previous(self) -> bool:
        before = self.cursor.selected
        self.cursor.previous()
        return self.cursor.selected != before

    def quit(self) -> bool:
        self.running = False
        return True

    # -------------------- compose actions --------------------
    def confirm_compose(self) -> bool:
        title = self.buffer
        self.buffer = ""
        self.mode = InputMode.NAVIGATE
        if self.store.add(title):
            self.cursor.reconcile(len(self.store))
        else:
            logger.debug("empty title discarded")
        return True

    def cancel_compose(self) -> bool:
        self.buffer = ""
        self.mode = InputMode.NAVIGATE
        return True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            todos=tuple(self.store.items),
            selected=self.cursor.selected,
            mode=self.mode,
            buffer=self.buffer,
        )


__all__ = ["InputMode", "Snapshot", "InputController"]
