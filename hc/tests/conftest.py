"""Shared fixtures: a store on a fresh SQLite file and an API test client."""

import logging

import pytest
from fastapi.testclient import TestClient

from hc.config import Settings
from hc.database import build_engine, init_db, make_session_factory
from hc.main import create_app
from hc.services.store import PersistenceStore


@pytest.fixture
def store(tmp_path):
    """Create a store on a fresh database file for each test."""
    engine = build_engine(tmp_path / "test.db")
    init_db(engine)
    try:
        yield PersistenceStore(make_session_factory(engine), logging.getLogger("hc.tests"))
    finally:
        engine.dispose()


@pytest.fixture
def app(tmp_path):
    return create_app(Settings(db_path=tmp_path / "api.db"))


@pytest.fixture
def client(app):
    """Create a test client with a fresh database for each test."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
