from pathlib import Path

import pytest

import config
from core.desktop.devtools.interface import todo_app


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "cfg.yaml")
    monkeypatch.setattr(todo_app, "setup_logging", lambda log_file: None)


def test_parser_accepts_single_optional_path():
    parser = todo_app.build_parser()
    assert parser.parse_args([]).path is None
    assert parser.parse_args(["x.csv"]).path == "x.csv"
    with pytest.raises(SystemExit):
        parser.parse_args(["a.csv", "b.csv"])


def test_main_runs_and_exits_zero(tmp_path: Path, pipe_input):
    path = tmp_path / "todo.csv"
    pipe_input.send_text("aMilk\rq")
    assert todo_app.main([str(path)]) == 0
    assert path.read_text(encoding="utf-8").splitlines() == ["id,title,is_completed", "1,Milk,false"]


def test_main_uses_configured_db_path(tmp_path: Path, pipe_input):
    db = tmp_path / "from_config.csv"
    config.USER_CONFIG_PATH.write_text(f"db_path: {db}\n", encoding="utf-8")
    pipe_input.send_text("q")
    assert todo_app.main([]) == 0
    assert db.read_text(encoding="utf-8") == "id,title,is_completed\n"


def test_main_reports_unusable_path(tmp_path: Path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file", encoding="utf-8")
    assert todo_app.main([str(blocker / "todo.csv")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: cannot access")
    assert str(blocker / "todo.csv") in err


def test_main_reports_directory_as_backing_file(tmp_path: Path, capsys):
    assert todo_app.main([str(tmp_path)]) == 1
    assert "error: cannot access" in capsys.readouterr().err


def test_main_reports_permission_error_on_lookup(tmp_path: Path, capsys, monkeypatch: pytest.MonkeyPatch):
    target = tmp_path / "locked" / "todo.csv"
    original = Path.exists

    def exists(self, *args, **kwargs):
        if self == target:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, "exists", exists)
    assert todo_app.main([str(target)]) == 1
    assert capsys.readouterr().err.strip() == f"error: cannot access {target}: Permission denied"
