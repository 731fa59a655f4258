"""Application-level todo store: ordered list + full-rewrite persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from application.ports import StorageError, TodoRepository
from core import MAX_TITLE_LENGTH, Todo
from infrastructure.file_repository import FileTodoRepository

logger = logging.getLogger("todo_tui.store")


class TodoStore:
    """Owns the in-memory task list and mirrors it to the repository.

    Every mutating operation ends with ``persist()``. Operations return False
    for a no-op (nothing to do, nothing wrong); storage failures raise
    ``StorageError`` instead.
    """

    def __init__(self, repository: TodoRepository, todos: Optional[List[Todo]] = None):
        self.repo = repository
        self.items: List[Todo] = list(todos or [])
        self._next_id = max((t.id for t in self.items), default=0) + 1

    @classmethod
    def open(cls, path: Path | str, repository: Optional[TodoRepository] = None) -> "TodoStore":
        """Load the store from ``path``, creating an empty backing file if missing."""
        repo = repository or FileTodoRepository(path)
        ensure = getattr(repo, "ensure_exists", None)
        if callable(ensure):
            ensure()
        return cls(repo, repo.load())

    load = open

    @property
    def path(self) -> Path:
        return self.repo.path

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self.items)

    def _in_range(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self.items)

    def add(self, title: str) -> bool:
        text = (title or "").strip()
        if not text:
            return False
        if len(text) > MAX_TITLE_LENGTH:
            logger.warning("Title of %d chars cut to %d", len(text), MAX_TITLE_LENGTH)
            text = text[:MAX_TITLE_LENGTH].rstrip()
        todo = Todo(id=self._next_id, title=text, is_completed=False)
        self._next_id += 1
        self.items.append(todo)
        logger.debug("add id=%s title=%r", todo.id, todo.title)
        self.persist()
        return True

    def toggle(self, index: Optional[int]) -> bool:
        if not self._in_range(index):
            return False
        todo = self.items[index]
        todo.toggle()
        logger.debug("toggle id=%s -> %s", todo.id, todo.is_completed)
        self.persist()
        return True

    def delete(self, index: Optional[int]) -> bool:
        if not self._in_range(index):
            return False
        removed = self.items.pop(index)
        logger.debug("delete id=%s at %d", removed.id, index)
        self.persist()
        return True

    def persist(self) -> None:
        try:
            self.repo.save(self.items)
        except StorageError:
            logger.error("Failed to persist %d todos to %s", len(self.items), self.path)
            raise


__all__ = ["TodoStore"]
