# tests/test_main.py

from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

import main
from db.database import init_db, make_engine
from services.exceptions import (
    AuthenticationError,
    ConflictError,
    ServiceError,
    StorageError,
    ValidationError,
)


def test_startup_aborts_when_database_cannot_be_initialized(monkeypatch) -> None:
    bad_engine = make_engine("sqlite:////nonexistent_dir/x/y.db")
    monkeypatch.setattr(main, "init_db", lambda: init_db(bad_engine))

    with pytest.raises(SQLAlchemyError):
        with TestClient(main.app):
            pass
    bad_engine.dispose()


@pytest.mark.parametrize(
    "exc_cls, expected",
    [
        (ValidationError, status.HTTP_400_BAD_REQUEST),
        (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
        (ConflictError, status.HTTP_400_BAD_REQUEST),
        (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
        (ServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    ],
)
def test_service_errors_carry_their_status(exc_cls, expected) -> None:
    err = exc_cls("boom")
    assert err.status_code == expected
    assert err.message == "boom"
    assert str(err) == "boom"
