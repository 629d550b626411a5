"""
Database model for Feedback
"""
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.dialects import mysql

from feedback_api.core.database import Base


class FeedbackType(str, Enum):
    """Feedback categories that reports count"""
    COMPLAINT = "complaint"
    SUGGESTION = "suggestion"
    COMPLIMENT = "compliment"


# MySQL's default collations fold case; keep type comparisons case-sensitive there
FEEDBACK_TYPE_COLUMN = String(50).with_variant(
    mysql.VARCHAR(50, charset="utf8mb4", collation="utf8mb4_bin"), "mysql"
)


class Feedback(Base):
    """Feedback model - one piece of user feedback"""
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    type = Column(FEEDBACK_TYPE_COLUMN, nullable=False, index=True)  # not constrained to FeedbackType
    created_at = Column(DateTime, default=datetime.now, nullable=False, index=True)

    def __repr__(self):
        return f"<Feedback(id={self.id}, type='{self.type}', created_at={self.created_at})>"
