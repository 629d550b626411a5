"""
Database models for the feedback service
"""
from feedback_api.models.feedback import Feedback, FeedbackType

__all__ = [
    "Feedback",
    "FeedbackType",
]
