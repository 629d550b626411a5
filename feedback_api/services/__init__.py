"""
Services package - reporting logic
"""
from feedback_api.services.feedback_service import FeedbackService, FeedbackSummary, WeekBucket

__all__ = [
    "FeedbackService",
    "FeedbackSummary",
    "WeekBucket",
]
