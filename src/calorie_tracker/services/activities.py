"""Activity logging service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.activities import (
    ActivityDraft,
    ActivityEvent,
    ActivitySource,
)
from calorie_tracker.errors import NotFound, ValidationFailure
from calorie_tracker.services.dates import resolve_date

RECENT_ACTIVITY_LIMIT = 50


class ActivityRepository(Protocol):
    """Persistence interface for activities."""

    def list_recent(self, limit: int) -> list[ActivityEvent]:
        """Return the most recent activities, newest first."""

    def list_for_dates(self, days: list[date]) -> list[ActivityEvent]:
        """Return all activities whose date is in `days`."""

    def create_activity(self, draft: ActivityDraft) -> ActivityEvent:
        """Store an activity and return it with its id."""

    def delete_activity(self, activity_id: UUID) -> bool:
        """Delete an activity; return False when it did not exist."""

    def delete_all(self) -> None:
        """Delete every activity."""


@dataclass
class ActivityService:
    """Service for the activity log."""

    repository: ActivityRepository

    def list_recent(self, limit: int = RECENT_ACTIVITY_LIMIT) -> list[ActivityEvent]:
        """Return recent activities."""
        return self.repository.list_recent(limit)

    def log_activity(  # noqa: PLR0913
        self,
        *,
        name: str,
        calories_burned: float,
        duration_minutes: float,
        source: ActivitySource = ActivitySource.MANUAL,
        description: str | None = None,
        day: date | None = None,
        timestamp: datetime | None = None,
    ) -> ActivityEvent:
        """Validate and persist an activity."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise ValidationFailure("name is required")
        if calories_burned < 0 or duration_minutes < 0:
            raise ValidationFailure("calories and duration must not be negative")
        resolved_day, resolved_timestamp = resolve_date(day, timestamp)
        return self.repository.create_activity(
            ActivityDraft(
                name=cleaned_name,
                calories_burned=calories_burned,
                duration_minutes=duration_minutes,
                date=resolved_day,
                timestamp=resolved_timestamp,
                source=source,
                description=description,
            )
        )

    def delete_activity(self, activity_id: UUID) -> None:
        """Delete an activity or raise NotFound."""
        if not self.repository.delete_activity(activity_id):
            raise NotFound("activity", activity_id)
