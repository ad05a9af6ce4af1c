"""Shared fixtures: in-memory SQLite store, seeded on every app start-up."""

import os
import tempfile

# Must be set before app.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DROP_TABLES_IF_EXIST"] = "true"
os.environ["INITIALIZE_WITH_SAMPLE_DATA"] = "true"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "coursereview-test-logs"))

import pytest
from fastapi.testclient import TestClient

from app.database import SessionLocal, init_db
from app.main import app


@pytest.fixture
def client():
    # lifespan drops, recreates and seeds the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    """Fresh, empty schema and a session bound to it."""
    init_db(drop=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
