"""
Pytest configuration for the feedback service tests.
Points the app at a throwaway SQLite database before anything is imported.
"""
import os
import tempfile
from datetime import date

_test_data_dir = tempfile.mkdtemp(prefix="feedback_api_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_data_dir}/test.db"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from feedback_api.core.database import Base, SessionLocal, engine
from feedback_api.core.dependencies import get_today
from feedback_api.models import Feedback
from feedback_api.repositories import FeedbackRepository
from feedback_api.services import FeedbackService
from main import app

Base.metadata.create_all(bind=engine)

# Wednesday of ISO week 43, 2026
TODAY = date(2026, 10, 21)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    db = SessionLocal()
    try:
        db.query(Feedback).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def repository(db_session):
    return FeedbackRepository(db_session)


@pytest.fixture
def service(repository):
    return FeedbackService(repository)


@pytest.fixture
def client():
    app.dependency_overrides[get_today] = lambda: TODAY
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
