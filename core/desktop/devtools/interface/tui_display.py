"""Display-width helpers: trim and pad text by terminal cells, not code points."""

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    return sum(char_width(ch) for ch in text)


def trim_display(text: str, width: int, ellipsis: str = "") -> str:
    """Trim text so its visible width doesn't exceed ``width``.

    When trimming happens and ``ellipsis`` is given, it replaces the tail.
    """
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    budget = width - display_width(ellipsis)
    if budget < 0:
        return ""
    acc = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ellipsis


def pad_display(text: str, width: int, ellipsis: str = "") -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width, ellipsis)
    missing = width - display_width(trimmed)
    if missing > 0:
        trimmed += " " * missing
    return trimmed


__all__ = ["char_width", "display_width", "trim_display", "pad_display"]
