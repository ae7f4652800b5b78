"""Database bootstrap safety checks."""

from agent_platform.db import _connect_args, _ensure_sqlite_parent_dir


def test_ensure_sqlite_parent_dir_creates_nested_parent(tmp_path):
    db_file = tmp_path / "nested" / "db" / "test.db"
    assert not db_file.parent.exists()

    _ensure_sqlite_parent_dir(f"sqlite:///{db_file.as_posix()}")

    assert db_file.parent.exists()


def test_ensure_sqlite_parent_dir_ignores_memory_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _ensure_sqlite_parent_dir("sqlite:///:memory:")
    assert list(tmp_path.iterdir()) == []


def test_sqlite_connections_allow_worker_threads():
    assert _connect_args("sqlite:///./data/dev.db") == {"check_same_thread": False}
    assert _connect_args("postgresql://localhost/db") == {}
