from pathlib import Path

from sqlalchemy import inspect, text
from sqlmodel import Session

from app.db.repositories.tasks import TaskRepository
from app.db.session import build_engine, init_db

LEGACY_SCHEMA = """
CREATE TABLE tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    completed BOOLEAN DEFAULT FALSE,
    day_of_week TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""


def _legacy_engine(tmp_path: Path):
    engine = build_engine(f"sqlite:///{tmp_path / 'legacy.db'}")
    with engine.begin() as conn:
        conn.execute(text(LEGACY_SCHEMA))
        conn.execute(text("INSERT INTO tasks (title, day_of_week) VALUES ('old 1', 'monday')"))
        conn.execute(text("INSERT INTO tasks (title, day_of_week) VALUES ('old 2', 'friday')"))
    return engine


def test_fresh_database_has_full_schema(tmp_path: Path, tz, frozen_now) -> None:
    engine = build_engine(f"sqlite:///{tmp_path / 'nested' / 'dir' / 'tasks.db'}")
    init_db(engine, tz, now=frozen_now)

    cols = {c["name"] for c in inspect(engine).get_columns("tasks")}
    assert cols == {"id", "title", "completed", "day_of_week", "week_date", "tags", "created_at", "updated_at"}
    assert (tmp_path / "nested" / "dir" / "tasks.db").exists()


def test_legacy_rows_are_backfilled(tmp_path: Path, tz, frozen_now) -> None:
    engine = _legacy_engine(tmp_path)

    init_db(engine, tz, now=frozen_now)

    with engine.connect() as conn:
        rows = conn.execute(text("SELECT title, week_date, tags FROM tasks ORDER BY id")).all()
    assert [tuple(r) for r in rows] == [("old 1", "2024-01-07", ""), ("old 2", "2024-01-07", "")]


def test_migration_is_idempotent(tmp_path: Path, tz, frozen_now) -> None:
    engine = _legacy_engine(tmp_path)
    init_db(engine, tz, now=frozen_now)

    with engine.begin() as conn:
        conn.execute(text("UPDATE tasks SET week_date = '2023-12-31', tags = 'kept' WHERE title = 'old 1'"))

    # second startup, a week later: nothing is rewritten
    init_db(engine, tz, now=frozen_now.replace(day=15))

    with engine.connect() as conn:
        row = conn.execute(text("SELECT week_date, tags FROM tasks WHERE title = 'old 1'")).one()
    assert tuple(row) == ("2023-12-31", "kept")


def test_migrated_table_accepts_new_tasks(tmp_path: Path, tz, frozen_now) -> None:
    engine = _legacy_engine(tmp_path)
    init_db(engine, tz, now=frozen_now)

    with Session(engine) as session:
        repo = TaskRepository(session)
        task = repo.create(title="new", day_of_week="monday", week_date="2024-01-07", tags="a,b")
        assert task.id == 3
        assert [t.title for t in repo.list_by_week("2024-01-07")] == ["old 2", "old 1", "new"]
