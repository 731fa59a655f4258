from pathlib import Path
from typing import List

import pytest

from application.ports import StorageError
from core import MAX_TITLE_LENGTH, Todo
from core.desktop.devtools.application.todo_store import TodoStore
from infrastructure.file_repository import FileTodoRepository


class MemoryRepo:
    def __init__(self, todos=None, fail=False):
        self.path = Path("memory.csv")
        self.saved: List[List[tuple]] = []
        self._todos = list(todos or [])
        self.fail = fail

    def load(self):
        return [Todo(*t.as_tuple()) for t in self._todos]

    def save(self, todos):
        if self.fail:
            raise StorageError(self.path, OSError(28, "No space left on device"))
        self.saved.append([t.as_tuple() for t in todos])


def _rows(path: Path) -> List[str]:
    return path.read_text(encoding="utf-8").splitlines()[1:]


def test_open_missing_file_creates_header(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    assert len(store) == 0
    assert path.read_text(encoding="utf-8") == "id,title,is_completed\n"
    assert store.path == path


def test_open_reads_existing_rows(tmp_path: Path):
    path = tmp_path / "todo.csv"
    path.write_text("id,title,is_completed\n1,A,false\n3,C,true\n", encoding="utf-8")
    store = TodoStore.load(path)
    assert [t.as_tuple() for t in store.items] == [(1, "A", False), (3, "C", True)]
    assert store.next_id == 4


def test_add_appends_with_next_id_and_persists(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    store.add("A")
    store.add("B")
    n = len(store)
    assert store.add("X") is True
    assert len(store) == n + 1
    assert store.items[-1].as_tuple() == (n + 1, "X", False)
    assert _rows(path) == ["1,A,false", "2,B,false", "3,X,false"]


def test_add_strips_title():
    repo = MemoryRepo()
    store = TodoStore(repo)
    store.add("  padded  ")
    assert store.items[0].title == "padded"


@pytest.mark.parametrize("title", ["", "   ", "\t"])
def test_add_rejects_blank_titles_without_writing(title):
    repo = MemoryRepo([Todo(1, "A", False)])
    store = TodoStore(repo, repo.load())
    assert store.add(title) is False
    assert [t.as_tuple() for t in store.items] == [(1, "A", False)]
    assert repo.saved == []


def test_ids_are_not_reused_after_deleting_the_last_task():
    repo = MemoryRepo([Todo(1, "A", False), Todo(2, "B", False)])
    store = TodoStore(repo, repo.load())
    store.delete(1)
    store.add("C")
    assert [t.id for t in store.items] == [1, 3]


def test_toggle_flips_and_persists(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    store.add("A")
    assert store.toggle(0) is True
    assert store.items[0].is_completed is True
    assert _rows(path) == ["1,A,true"]
    store.toggle(0)
    assert _rows(path) == ["1,A,false"]


@pytest.mark.parametrize("index", [None, -1, 1, 99])
def test_toggle_out_of_range_is_noop(index):
    repo = MemoryRepo([Todo(1, "A", False)])
    store = TodoStore(repo, repo.load())
    assert store.toggle(index) is False
    assert store.items[0].is_completed is False
    assert repo.saved == []


def test_delete_shifts_later_items_down(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    for title in "ABCD":
        store.add(title)
    assert store.delete(1) is True
    assert [t.title for t in store.items] == ["A", "C", "D"]
    assert _rows(path) == ["1,A,false", "3,C,false", "4,D,false"]


@pytest.mark.parametrize("index", [None, -1, 3])
def test_delete_out_of_range_is_noop(index):
    repo = MemoryRepo([Todo(1, "A", False)])
    store = TodoStore(repo, repo.load())
    assert store.delete(index) is False
    assert len(store) == 1
    assert repo.saved == []


def test_every_mutation_rewrites_the_whole_list():
    repo = MemoryRepo()
    store = TodoStore(repo)
    store.add("A")
    store.add("B")
    store.toggle(0)
    store.delete(1)
    assert repo.saved == [
        [(1, "A", False)],
        [(1, "A", False), (2, "B", False)],
        [(1, "A", True), (2, "B", False)],
        [(1, "A", True)],
    ]


def test_persist_failure_propagates(caplog):
    repo = MemoryRepo(fail=True)
    store = TodoStore(repo)
    with caplog.at_level("ERROR", logger="todo_tui.store"):
        with pytest.raises(StorageError):
            store.add("A")
    assert any("Failed to persist" in r.getMessage() for r in caplog.records)


def test_reload_after_mutations_matches_memory(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    store.add("A")
    store.add("B")
    store.toggle(1)
    reloaded = FileTodoRepository(path).load()
    assert [t.as_tuple() for t in reloaded] == [t.as_tuple() for t in store.items]


def test_long_title_is_cut_and_loads_back(tmp_path: Path):
    path = tmp_path / "todo.csv"
    store = TodoStore.open(path)
    assert store.add("x" * 200_000) is True
    assert len(store.items[0].title) == MAX_TITLE_LENGTH
    reopened = TodoStore.open(path)
    assert [t.as_tuple() for t in reopened.items] == [(1, "x" * MAX_TITLE_LENGTH, False)]
