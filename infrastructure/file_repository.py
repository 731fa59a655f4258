import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List

from core import Todo
from application.ports import StorageError, TodoRepository
from infrastructure.todo_csv_codec import TodoCsvCodec

logger = logging.getLogger("todo_tui.storage")


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileTodoRepository(TodoRepository):
    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _exists(self) -> bool:
        try:
            return self.path.exists()
        except OSError as exc:
            raise StorageError(self.path, exc) from exc

    def ensure_exists(self) -> bool:
        """Create the backing file with a header row if it is missing.

        Returns True when a new file was written.
        """
        if self._exists():
            return False
        self.save([])
        logger.info("Created %s", self.path)
        return True

    def load(self) -> List[Todo]:
        if not self._exists():
            return []
        try:
            with self.path.open("r", newline="", encoding="utf-8") as fh:
                content = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(self.path, exc) from exc
        todos = TodoCsvCodec.decode(content)
        logger.debug("Loaded %d todos from %s", len(todos), self.path)
        return todos

    def save(self, todos: List[Todo]) -> None:
        """Rewrite the whole file (header + every row) atomically.

        The replacement keeps the permission bits of the file it replaces; a
        new file gets the usual umask-derived mode.
        """
        content = TodoCsvCodec.encode(todos)
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            try:
                mode = stat.S_IMODE(self.path.stat().st_mode)
            except FileNotFoundError:
                mode = _default_file_mode()
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                delete=False,
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_path, mode)
            os.replace(str(tmp_path), str(self.path))
        except OSError as exc:
            raise StorageError(self.path, exc) from exc
        finally:
            if tmp_path and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError as exc:
                    logger.warning("Could not remove temp file %s: %s", tmp_path, exc)
        logger.debug("Wrote %d todos to %s", len(todos), self.path)
