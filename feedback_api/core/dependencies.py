"""
FastAPI dependency providers

Each request builds its own repository and service on top of its own session.
"""
from datetime import date

from fastapi import Depends
from sqlalchemy.orm import Session

from feedback_api.core.database import get_db
from feedback_api.repositories.feedback_repository import FeedbackRepository
from feedback_api.services.feedback_service import FeedbackService


def get_feedback_repository(db: Session = Depends(get_db)) -> FeedbackRepository:
    return FeedbackRepository(db)


def get_feedback_service(
    repository: FeedbackRepository = Depends(get_feedback_repository),
) -> FeedbackService:
    return FeedbackService(repository)


def get_today() -> date:
    """Current local date, resolved per request"""
    return date.today()
