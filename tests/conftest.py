"""
Pytest configuration for the Domain Registry service.

Provides fixtures for:
- An isolated in-memory SQLite database per test
- A TestClient wired to that database
- Workbook files shaped like the spreadsheet export
- Authenticated request headers
"""

from __future__ import annotations

import os

# Settings are read at import time; JWT_SECRET has no default
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "INFO")

from pathlib import Path
from typing import Callable, Generator

import pandas as pd
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from domain_registry.core import database
from domain_registry.core.schema import create_schema
from domain_registry.ingest.tasks import TaskRegistry
from settings import SpreadsheetConfig, UploadFiles


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """
    Fresh in-memory database with the schema applied.

    StaticPool keeps the single connection alive across threads so the
    TestClient threadpool sees the same database.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def upload_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "upload"
    monkeypatch.setattr(UploadFiles, "UPLOAD_DIR", path)
    return path


@pytest.fixture
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture
def client(engine: Engine, upload_dir: Path, registry: TaskRegistry) -> Generator[TestClient, None, None]:
    """
    TestClient bound to the per-test database.

    The shared session factory is pointed at the test engine for the
    duration of the test so background imports write to it as well.
    """
    from domain_registry.api.routes.upload import get_task_registry
    from domain_registry.main import app

    database.SessionLocal.configure(bind=engine)
    app.dependency_overrides[get_task_registry] = lambda: registry
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        database.SessionLocal.configure(bind=database.engine)


@pytest.fixture
def auth_headers(client: TestClient) -> dict:
    client.post("/api/register", json={"username": "alice", "password": "s3cret"})
    response = client.post("/api/login", json={"username": "alice", "password": "s3cret"})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """
    Write rows (dicts keyed by export header) to an .xlsx file.

    Every export header is present as a column unless ``headers`` narrows it.
    """

    def _make(rows: list[dict], name: str = "domains.xlsx", headers: list[str] | None = None) -> Path:
        columns = headers if headers is not None else SpreadsheetConfig.HEADERS
        df = pd.DataFrame(rows, columns=columns)
        path = tmp_path / name
        df.to_excel(path, index=False, engine="openpyxl")
        return path

    return _make
