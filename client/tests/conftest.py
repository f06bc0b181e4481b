# client/tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from app.main import app
from feedback_ui.api import FeedbackApiClient


@pytest.fixture(scope="function")
def backend(monkeypatch):
    """The real feedback backend on an in-memory database, reached through TestClient."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    from app.database import connection
    monkeypatch.setattr(connection, "engine", test_engine)
    SQLModel.metadata.create_all(test_engine)

    with TestClient(app) as c:
        yield c
    test_engine.dispose()


@pytest.fixture(scope="function")
def api(backend):
    return FeedbackApiClient(http=backend)


class ManualScheduler:
    """Collects scheduled callbacks instead of starting timers."""

    def __init__(self):
        self.calls = []

    def __call__(self, delay, callback):
        self.calls.append((delay, callback))
        return None

    def fire_all(self):
        calls, self.calls = self.calls, []
        for _, callback in calls:
            callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()
