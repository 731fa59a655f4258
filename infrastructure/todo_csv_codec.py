import csv
import io
import logging
from typing import Iterable, List, Optional, Sequence

from core import Todo

logger = logging.getLogger("todo_tui.storage")


class TodoCsvCodec:
    """Flat CSV mirror of the task list: ``id,title,is_completed`` per row."""

    HEADER = ("id", "title", "is_completed")
    TRUE_VALUES = frozenset({"true"})
    FALSE_VALUES = frozenset({"false"})

    @staticmethod
    def _format_bool(value: bool) -> str:
        return "true" if value else "false"

    @classmethod
    def _parse_bool(cls, raw: str) -> Optional[bool]:
        token = (raw or "").strip().lower()
        if token in cls.TRUE_VALUES:
            return True
        if token in cls.FALSE_VALUES:
            return False
        return None

    @classmethod
    def parse_row(cls, row: Sequence[str]) -> Optional[Todo]:
        """Return a Todo for a well-formed row, or None."""
        if len(row) != len(cls.HEADER):
            return None
        raw_id, title, raw_done = row
        try:
            todo_id = int(raw_id.strip())
        except ValueError:
            return None
        if todo_id < 0 or not title.strip():
            return None
        done = cls._parse_bool(raw_done)
        if done is None:
            return None
        return Todo(id=todo_id, title=title, is_completed=done)

    @classmethod
    def decode(cls, content: str) -> List[Todo]:
        """Parse file content; malformed rows are skipped and logged."""
        reader = csv.reader(io.StringIO(content))
        try:
            header = next(reader, None)
        except csv.Error as exc:
            logger.warning("Unreadable header: %s; no rows loaded", exc)
            return []
        if header is None:
            return []
        if tuple(field.strip() for field in header) != cls.HEADER:
            logger.warning("Unexpected header %r; no rows loaded", header)
            return []
        todos: List[Todo] = []
        while True:
            # Each failed read has consumed at least one line, so this terminates.
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                logger.warning("Skipping malformed row at line %d: %s", reader.line_num, exc)
                continue
            if not row:
                continue
            todo = cls.parse_row(row)
            if todo is None:
                logger.warning("Skipping malformed row at line %d: %r", reader.line_num, row)
                continue
            todos.append(todo)
        return todos

    @classmethod
    def encode(cls, todos: Iterable[Todo]) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(cls.HEADER)
        for todo in todos:
            writer.writerow([str(todo.id), todo.title, cls._format_bool(todo.is_completed)])
        return buf.getvalue()


__all__ = ["TodoCsvCodec"]
