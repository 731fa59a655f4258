from pathlib import Path
from typing import List, Protocol

from core import Todo


class StorageError(Exception):
    """The backing file could not be read, created or written."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{self.path}: {reason}")


class TodoRepository(Protocol):
    path: Path

    def load(self) -> List[Todo]:
        ...

    def save(self, todos: List[Todo]) -> None:
        ...
