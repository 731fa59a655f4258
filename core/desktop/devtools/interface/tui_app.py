#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import logging
import os
import shutil
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import ConditionalContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import Frame

from application.ports import StorageError
from core.desktop.devtools.application.todo_store import TodoStore
from core.desktop.devtools.interface.constants import (
    INPUT_TITLE,
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
    LIST_TITLE,
    REFRESH_INTERVAL,
    TTIMEOUTLEN,
)
from core.desktop.devtools.interface.tui_input import InputController, InputMode
from core.desktop.devtools.interface.tui_render import (
    list_view_offset,
    render_help,
    render_input,
    render_task_list,
)
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("todo_tui.tui")

# Frame borders around the list plus the help line.
_LIST_CHROME_ROWS = 3
# Framed single-line input box shown while composing.
_INPUT_BOX_ROWS = 3


class TodoTUI:
    def __init__(self, store: TodoStore, theme: str = DEFAULT_THEME, controller: Optional[InputController] = None):
        self.store = store
        self.controller = controller or InputController(store)
        self.theme_name = theme
        self.list_view_offset = 0
        self.style = build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0
        composing = Condition(lambda: self.controller.mode is InputMode.COMPOSE)

        @kb.add("up")
        def _(event):
            self._dispatch(event, KEY_UP)

        @kb.add("down")
        def _(event):
            self._dispatch(event, KEY_DOWN)

        @kb.add("enter")
        def _(event):
            self._dispatch(event, KEY_ENTER)

        @kb.add("escape", eager=True)
        def _(event):
            self._dispatch(event, KEY_ESCAPE)

        @kb.add("backspace")
        def _(event):
            self._dispatch(event, KEY_BACKSPACE)

        @kb.add(Keys.Any)
        def _(event):
            data = event.data or ""
            if len(data) == 1 and data.isprintable():
                self._dispatch(event, data)

        @kb.add(Keys.BracketedPaste, filter=composing)
        def _(event):
            for ch in (event.data or "").replace("\r", " ").replace("\n", " "):
                if ch.isprintable():
                    self._dispatch(event, ch)

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        self.list_window = Window(
            content=FormattedTextControl(self.get_task_list_text),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.help_bar = Window(content=FormattedTextControl(self.get_help_text), height=1, always_hide_cursor=True)
        self.input_window = Window(
            content=FormattedTextControl(self.get_input_text),
            height=1,
            always_hide_cursor=True,
            wrap_lines=False,
        )

        root = HSplit(
            [
                Frame(self.list_window, title=LIST_TITLE, style="class:border"),
                self.help_bar,
                ConditionalContainer(Frame(self.input_window, title=INPUT_TITLE, style="class:border"), filter=composing),
            ]
        )

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=False,
            refresh_interval=REFRESH_INTERVAL,
        )
        self.app.ttimeoutlen = TTIMEOUTLEN

    @staticmethod
    def terminal_size() -> os.terminal_size:
        return shutil.get_terminal_size((80, 24))

    def _visible_row_limit(self) -> int:
        chrome = _LIST_CHROME_ROWS
        if self.controller.mode is InputMode.COMPOSE:
            chrome += _INPUT_BOX_ROWS
        return max(1, self.terminal_size().lines - chrome)

    def _list_width(self) -> int:
        return max(1, self.terminal_size().columns - 2)

    def _ensure_selection_visible(self) -> None:
        self.list_view_offset = list_view_offset(
            self.controller.cursor.selected,
            self.list_view_offset,
            len(self.store),
            self._visible_row_limit(),
        )

    def _dispatch(self, event, key: str) -> None:
        try:
            self.controller.press(key)
        except StorageError as exc:
            logger.error("Storage failure, leaving TUI: %s", exc)
            event.app.exit(exception=exc)
            return
        if not self.controller.running:
            event.app.exit()
            return
        self._ensure_selection_visible()

    def get_task_list_text(self) -> FormattedText:
        self._ensure_selection_visible()
        return render_task_list(
            self.controller.snapshot(),
            offset=self.list_view_offset,
            visible_rows=self._visible_row_limit(),
            width=self._list_width(),
        )

    def get_help_text(self) -> FormattedText:
        return render_help(self.controller.snapshot())

    def get_input_text(self) -> FormattedText:
        return render_input(self.controller.snapshot())

    def run(self):
        """Run the event loop; the terminal is restored on every exit path."""
        return self.app.run()


def cmd_tui(args) -> int:
    store = TodoStore.open(args.path)
    tui = TodoTUI(store, theme=getattr(args, "theme", DEFAULT_THEME))
    tui.run()
    return 0
