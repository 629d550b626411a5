"""
Feedback reporting service - totals, type summary and weekly breakdown
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Tuple

from feedback_api.models.feedback import Feedback, FeedbackType
from feedback_api.repositories.feedback_repository import FeedbackRepository

logger = logging.getLogger(__name__)


@dataclass
class WeekBucket:
    """Per-type feedback counts for one ISO week"""
    year: int
    week: int
    complaints: int = 0
    suggestions: int = 0
    compliments: int = 0


@dataclass
class FeedbackSummary:
    """Total feedback count plus the count of each tracked type"""
    total: int
    complaints: int
    suggestions: int
    compliments: int


def week_key(day: date) -> Tuple[int, int]:
    """ISO-8601 (week-based year, week number) of a date or datetime"""
    iso = day.isocalendar()
    return iso[0], iso[1]


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``"""
    return day - timedelta(days=day.weekday())


def count_type(feedbacks: List[Feedback], feedback_type: FeedbackType) -> int:
    return sum(1 for f in feedbacks if f.type == feedback_type.value)


class FeedbackService:
    """
    Read-side feedback reporting

    Week numbering is always ISO-8601 (weeks start on Monday, week 1 holds the
    first Thursday of the year) regardless of the host locale.
    """

    def __init__(self, repository: FeedbackRepository):
        self.repository = repository

    def get_total_feedback(self) -> int:
        return self.repository.count_total()

    def get_feedback_count_by_type(self, feedback_type: str) -> int:
        return self.repository.count_by_type(feedback_type)

    def get_feedback_summary(self) -> FeedbackSummary:
        return FeedbackSummary(
            total=self.get_total_feedback(),
            complaints=self.get_feedback_count_by_type(FeedbackType.COMPLAINT.value),
            suggestions=self.get_feedback_count_by_type(FeedbackType.SUGGESTION.value),
            compliments=self.get_feedback_count_by_type(FeedbackType.COMPLIMENT.value),
        )

    def get_feedback_by_week(self, start_date: date, end_date: date) -> List[WeekBucket]:
        """
        Count feedback per type for every ISO week from start_date to end_date

        Args:
            start_date: First day of the range (from its start of day)
            end_date: Last day of the range (through its end of day)

        Returns:
            One WeekBucket per calendar week touched by the range, in
            ascending order. Weeks without feedback are included with zero
            counts. Empty when start_date is after end_date.
        """
        if start_date > end_date:
            return []

        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date, time.max)
        logger.debug("Weekly feedback breakdown from %s to %s", start, end)

        feedbacks = self.repository.find_by_created_at_between(start, end)

        by_week: Dict[Tuple[int, int], List[Feedback]] = defaultdict(list)
        for feedback in feedbacks:
            by_week[week_key(feedback.created_at)].append(feedback)

        # Step by whole weeks so ranges crossing a year boundary keep every week
        buckets = []
        monday = week_start(start_date)
        while monday <= end_date:
            year, week = week_key(monday)
            week_feedbacks = by_week.get((year, week), [])
            buckets.append(WeekBucket(
                year=year,
                week=week,
                complaints=count_type(week_feedbacks, FeedbackType.COMPLAINT),
                suggestions=count_type(week_feedbacks, FeedbackType.SUGGESTION),
                compliments=count_type(week_feedbacks, FeedbackType.COMPLIMENT),
            ))
            monday += timedelta(weeks=1)

        return buckets
