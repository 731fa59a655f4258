#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "done": "#9ad974 strike",
        "selected": "bg:#3b3b3b #e5c07b bold",
        "selected.done": "bg:#3b3b3b #9ad974 bold strike",
        "border": "#4b525a",
        "frame.label": "#ffb347 bold",
        "help": "#56b6c2",
        "input": "#d7dfe6",
        "input.caret": "reverse",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "done": "#b8f171 strike",
        "selected": "bg:#3d4047 #f0c674 bold",
        "selected.done": "bg:#3d4047 #b8f171 bold strike",
        "border": "#5a6169",
        "frame.label": "#ffb347 bold",
        "help": "#7fdbff",
        "input": "#e8eaec",
        "input.caret": "reverse",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
