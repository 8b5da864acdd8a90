"""Body weight log service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.body import WeightSample
from calorie_tracker.errors import NotFound, ValidationFailure
from calorie_tracker.services.dates import resolve_date

RECENT_WEIGHT_LIMIT = 30


class WeightRepository(Protocol):
    """Persistence interface for weight samples."""

    def list_recent(self, limit: int) -> list[WeightSample]:
        """Return recent samples, latest date first."""

    def create_sample(
        self, day: date, weight: float, note: str | None, timestamp: datetime
    ) -> WeightSample:
        """Store a weight sample."""

    def delete_sample(self, sample_id: UUID) -> bool:
        """Delete a sample; return False when it did not exist."""

    def delete_all(self) -> None:
        """Delete every sample."""


@dataclass
class WeightService:
    """Service for recording body weight."""

    repository: WeightRepository

    def list_recent(self, limit: int = RECENT_WEIGHT_LIMIT) -> list[WeightSample]:
        """Return recent weight samples."""
        return self.repository.list_recent(limit)

    def record_weight(
        self,
        weight: float,
        day: date | None = None,
        note: str | None = None,
        timestamp: datetime | None = None,
    ) -> WeightSample:
        """Persist a weight reading. Same-day readings are all kept."""
        if weight <= 0:
            raise ValidationFailure("weight must be positive")
        resolved_day, resolved_timestamp = resolve_date(day, timestamp)
        return self.repository.create_sample(
            resolved_day, weight, note, resolved_timestamp
        )

    def delete_sample(self, sample_id: UUID) -> None:
        """Delete a weight sample or raise NotFound."""
        if not self.repository.delete_sample(sample_id):
            raise NotFound("weight sample", sample_id)
