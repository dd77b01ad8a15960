"""Shared pytest fixtures."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import settings
from employee_api.app.core.db import init_db
from employee_api.app.main import app
from employee_api.app.repositories.employee_repository import SQLiteEmployeeRepository


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the application at a fresh SQLite file for each test."""
    path = str(tmp_path / "employees.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db(path)
    return path


@pytest.fixture
def repository(db_path: str) -> SQLiteEmployeeRepository:
    return SQLiteEmployeeRepository(db_path)


@pytest.fixture
def client(db_path: str) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item: pytest.Item) -> Iterator[None]:
    """Keep the root logger bare for tests using ``bare_root``.

    Pytest's logging plugin attaches its capture handlers to the root
    logger when the test body starts, after fixture setup; this wrapper
    runs inside that one and clears them again.
    """
    if "bare_root" in getattr(item, "fixturenames", ()):
        logging.getLogger().handlers.clear()
    yield
