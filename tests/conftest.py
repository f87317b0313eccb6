# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.api.dependencies import get_now
from app.core.config import Settings
from app.db.repositories.tasks import TaskRepository
from app.db.session import build_engine, init_db
from app.main import create_app
from app.utils.weeks import load_timezone

# Monday 2024-01-08, 10:00 in Los Angeles; its week bucket is Sunday 2024-01-07.
FROZEN_NOW = datetime(2024, 1, 8, 18, 0, tzinfo=timezone.utc)

APP_URL = "https://tasks.example.com"


def make_settings(tmp_path: Path, **overrides) -> Settings:
    static = tmp_path / "static"
    static.mkdir(exist_ok=True)
    (static / "index.html").write_text("<html><body>weekly tasks spa</body></html>", encoding="utf-8")
    (static / "app.js").write_text("console.log('app');", encoding="utf-8")

    db_path = tmp_path / "storage" / "tasks.db"
    values = dict(
        ENV="test",
        SQLITE_PATH=str(db_path),
        DATABASE_URL=f"sqlite:///{db_path}",
        STATIC_DIR=str(static),
        TIMEZONE="America/Los_Angeles",
        APP_URL=APP_URL,
        LOG_LEVEL="WARNING",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings_factory(tmp_path: Path):
    return lambda **overrides: make_settings(tmp_path, **overrides)


@pytest.fixture()
def settings(settings_factory) -> Settings:
    return settings_factory()


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_now] = lambda: FROZEN_NOW
    return app


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    # the context manager runs the lifespan (tables + migrations)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def frozen_now() -> datetime:
    return FROZEN_NOW


@pytest.fixture()
def tz():
    return load_timezone("America/Los_Angeles")


@pytest.fixture()
def engine(tmp_path: Path, tz):
    engine = build_engine(f"sqlite:///{tmp_path / 'repo' / 'tasks.db'}")
    init_db(engine, tz, now=FROZEN_NOW)
    yield engine
    engine.dispose()


@pytest.fixture()
def repo(engine) -> Iterator[TaskRepository]:
    with Session(engine) as session:
        yield TaskRepository(session)
