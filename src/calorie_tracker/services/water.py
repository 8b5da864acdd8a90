"""Hydration log service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.body import WaterLogEntry
from calorie_tracker.errors import NotFound, ValidationFailure
from calorie_tracker.services.dates import resolve_date


class WaterRepository(Protocol):
    """Persistence interface for water log entries."""

    def list_entries(self, day: date | None) -> list[WaterLogEntry]:
        """Return entries oldest first, optionally for one date."""

    def create_entry(
        self, day: date, amount_ml: int, timestamp: datetime
    ) -> WaterLogEntry:
        """Store a water log entry."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry; return False when it did not exist."""

    def delete_all(self) -> None:
        """Delete every entry."""


@dataclass
class WaterService:
    """Service for the water log."""

    repository: WaterRepository

    def list_entries(self, day: date | None = None) -> list[WaterLogEntry]:
        """Return water entries."""
        return self.repository.list_entries(day)

    def log_water(
        self,
        amount_ml: int,
        day: date | None = None,
        timestamp: datetime | None = None,
    ) -> WaterLogEntry:
        """Persist a drink."""
        if amount_ml <= 0:
            raise ValidationFailure("amount must be positive")
        resolved_day, resolved_timestamp = resolve_date(day, timestamp)
        return self.repository.create_entry(
            resolved_day, amount_ml, resolved_timestamp
        )

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a water entry or raise NotFound."""
        if not self.repository.delete_entry(entry_id):
            raise NotFound("water entry", entry_id)
