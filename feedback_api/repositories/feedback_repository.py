"""
Database access for feedback records
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import String, cast, literal
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Session

from feedback_api.models.feedback import Feedback

logger = logging.getLogger(__name__)


def type_equals(feedback_type: str, dialect_name: str):
    """
    Exact type filter for the given SQL dialect

    MySQL pads trailing spaces even under a binary collation, so the column
    is compared byte by byte there.
    """
    if dialect_name == "mysql":
        return cast(Feedback.type, mysql.BINARY) == literal(feedback_type, String())
    return Feedback.type == feedback_type


class FeedbackRepository:
    """Queries against the feedback table, bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def count_total(self) -> int:
        """Number of feedback records of any type"""
        return self.db.query(Feedback).count()

    def count_by_type(self, feedback_type: str) -> int:
        """
        Count records whose type matches exactly

        Matching is case-sensitive; an unknown type counts 0.
        """
        return self.db.query(Feedback)\
            .filter(type_equals(feedback_type, self.db.get_bind().dialect.name))\
            .count()

    def find_by_created_at_between(self, start: datetime, end: datetime) -> List[Feedback]:
        """
        Records created within [start, end], both ends inclusive

        Returns an empty list when start is after end.
        """
        return self.db.query(Feedback)\
            .filter(Feedback.created_at.between(start, end))\
            .order_by(Feedback.created_at)\
            .all()

    def add(self, feedback_type: str, created_at: Optional[datetime] = None) -> Feedback:
        """
        Insert a feedback record

        Args:
            feedback_type: Feedback type label
            created_at: Creation time; defaults to now

        Returns:
            Stored Feedback object

        Raises:
            ValueError: If the insert fails
        """
        try:
            feedback = Feedback(type=feedback_type)
            if created_at is not None:
                feedback.created_at = created_at
            self.db.add(feedback)
            self.db.commit()
            self.db.refresh(feedback)
            logger.info("Stored feedback id=%s type=%s", feedback.id, feedback.type)
            return feedback
        except Exception as e:
            self.db.rollback()
            raise ValueError(f"Failed to store feedback: {str(e)}")
