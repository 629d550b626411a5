"""Repositories package - database access"""
from feedback_api.repositories.feedback_repository import FeedbackRepository

__all__ = ["FeedbackRepository"]
