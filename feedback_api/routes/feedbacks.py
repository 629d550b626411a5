"""
Feedback reporting routes
"""
import logging
from datetime import date, timedelta
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from feedback_api.core.config import settings
from feedback_api.core.dependencies import get_feedback_repository, get_feedback_service, get_today
from feedback_api.repositories.feedback_repository import FeedbackRepository
from feedback_api.services.feedback_service import FeedbackService
from feedback_api.schemas.feedback import (
    ChartDataPoint,
    FeedbackCreate,
    FeedbackResponse,
    FeedbackSummaryResponse,
    FeedbackTypeCount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedbacks", tags=["feedbacks"])


@router.post(
    "",
    response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit feedback",
    description="Store a new feedback record"
)
def create_feedback(
    feedback_data: FeedbackCreate,
    repository: FeedbackRepository = Depends(get_feedback_repository)
):
    """
    Submit feedback

    - **type**: One of complaint, suggestion, compliment
    """
    try:
        return repository.add(feedback_data.type.value)
    except ValueError as e:
        logger.exception("Feedback creation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get(
    "/total",
    response_model=int,
    summary="Get total feedback count",
    description="Number of feedback records of any type"
)
def get_total_feedback(service: FeedbackService = Depends(get_feedback_service)):
    try:
        return service.get_total_feedback()
    except Exception as e:
        logger.exception("Failed to count feedback")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to count feedback: {str(e)}"
        )


@router.get(
    "/summary",
    response_model=FeedbackSummaryResponse,
    summary="Get feedback summary",
    description="Total feedback count and counts per feedback type"
)
def get_feedback_summary(service: FeedbackService = Depends(get_feedback_service)):
    """
    Get feedback summary

    Records with a type other than complaint, suggestion or compliment count
    toward the total only.
    """
    try:
        summary = service.get_feedback_summary()
        return FeedbackSummaryResponse(
            total=summary.total,
            by_type=FeedbackTypeCount(
                complaints=summary.complaints,
                suggestions=summary.suggestions,
                compliments=summary.compliments
            )
        )
    except Exception as e:
        logger.exception("Failed to summarize feedback")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to summarize feedback: {str(e)}"
        )


@router.get(
    "/chart-data",
    response_model=List[ChartDataPoint],
    summary="Get weekly chart data",
    description="Per-type feedback counts for the current ISO week and the weeks before it"
)
def get_chart_data(
    service: FeedbackService = Depends(get_feedback_service),
    today: date = Depends(get_today)
):
    """
    Get weekly chart data

    Covers the trailing CHART_WEEKS weeks ending today, oldest first.
    """
    try:
        start_date = today - timedelta(weeks=settings.CHART_WEEKS - 1)
        return service.get_feedback_by_week(start_date, today)
    except Exception as e:
        logger.exception("Failed to build chart data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build chart data: {str(e)}"
        )
