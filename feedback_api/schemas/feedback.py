"""
Pydantic schemas for Feedback
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from feedback_api.models.feedback import FeedbackType


class FeedbackCreate(BaseModel):
    """Schema for submitting feedback"""
    type: FeedbackType = Field(..., description="Feedback type (complaint, suggestion, compliment)")


class FeedbackResponse(BaseModel):
    """Schema for a stored feedback record"""
    id: int
    type: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(
        from_attributes=True,  # ORM mode
        populate_by_name=True,  # Allow both 'created_at' and 'createdAt'
    )


class FeedbackTypeCount(BaseModel):
    """Per-type feedback counts"""
    complaints: int = Field(0, ge=0)
    suggestions: int = Field(0, ge=0)
    compliments: int = Field(0, ge=0)


class FeedbackSummaryResponse(BaseModel):
    """Schema for the feedback summary"""
    total: int = Field(..., ge=0, description="Total number of feedback records")
    by_type: FeedbackTypeCount = Field(..., alias="byType", description="Counts per feedback type")

    model_config = ConfigDict(populate_by_name=True)


class ChartDataPoint(BaseModel):
    """One week of the feedback chart"""
    week: int = Field(..., description="ISO-8601 week number")
    complaints: int = Field(0, ge=0)
    suggestions: int = Field(0, ge=0)
    compliments: int = Field(0, ge=0)

    model_config = ConfigDict(from_attributes=True)
