from .todo import MAX_TITLE_LENGTH, Todo
from .selection import SelectionCursor

__all__ = [
    "MAX_TITLE_LENGTH",
    "Todo",
    "SelectionCursor",
]
