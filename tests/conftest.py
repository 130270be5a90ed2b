# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import auth.passwords
from db.database import get_db, init_db
from main import app


@pytest.fixture()
def engine():
    """
    In-memory SQLite shared by every session of one test (StaticPool keeps
    a single connection alive, so the tables survive between requests).
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    # minimum cost keeps the auth tests fast
    monkeypatch.setattr(auth.passwords, "BCRYPT_ROUNDS", 4)


@pytest.fixture()
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    # not used as a context manager: the lifespan would create ./tasks.db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def task_payload() -> dict:
    return {
        "task": "Inspect pallets",
        "measure": "pallets inspected",
        "target": 40,
        "unit": "pcs",
        "assignedTo": "bob",
        "assignedBy": "alice",
        "status": "pending",
    }
