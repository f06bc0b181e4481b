# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.main import app
from app.models.feedback import Feedback  # noqa: F401  (registers the table)


@pytest.fixture(scope="function")
def engine(monkeypatch):
    """
    In-memory SQLite engine that replaces the application's engine.
    StaticPool keeps every session on the same connection, and so on the same database.
    """
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    from app.database import connection
    monkeypatch.setattr(connection, "engine", test_engine)

    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture(scope="function")
def client(engine):
    with TestClient(app) as c:
        yield c
