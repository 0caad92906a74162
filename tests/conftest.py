"""Pytest fixtures and configuration for focusdeck tests."""

import os

# Keep the app's module-level engine off the working directory.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
import uuid

from focusdeck.config import EngineConfig
from focusdeck.database.database import Base
from focusdeck.database import models  # noqa: F401
from focusdeck.database.repository import TaskRepository
from focusdeck.database.project_repository import ProjectRepository
from focusdeck.models.task import Task, TaskStatus, Priority, Effort


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def task_repository(db_session: Session):
    """Create a TaskRepository instance for testing."""
    return TaskRepository(db_session)


@pytest.fixture
def project_repository(db_session: Session):
    """Create a ProjectRepository instance for testing."""
    return ProjectRepository(db_session)


@pytest.fixture
def now():
    """Fixed reference time (a Wednesday)."""
    return datetime(2024, 10, 16, 10, 30, 0)


@pytest.fixture
def engine_config():
    """Engine configuration with the stock defaults, independent of the environment."""
    return EngineConfig()


@pytest.fixture
def sample_task_base(now):
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "project_id": None,
        "priority": Priority.P2,
        "effort": Effort.M,
        "status": TaskStatus.INBOX,
        "due_date": None,
        "is_must_do": False,
        "labels": [],
        "impact": None,
        "rice_score": None,
        "created_at": now - timedelta(days=3),
        "last_touched_at": now - timedelta(days=1),
    }


@pytest.fixture
def make_task(sample_task_base):
    """Factory fixture: build a Task with a fresh id and field overrides."""
    def _make(**overrides) -> Task:
        return Task(**{**sample_task_base, "id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def sample_task(make_task):
    """Create a sample Task object for testing."""
    return make_task()


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from focusdeck.api.app import app
    from focusdeck.database.database import get_db

    # Override the get_db dependency to use our test database session
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
