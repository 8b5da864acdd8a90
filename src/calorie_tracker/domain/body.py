"""Domain models for weight and hydration logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightSample:
    """A body weight reading. Several readings may share a date."""

    id: UUID
    date: date
    weight: float
    timestamp: datetime
    note: str | None = None


@dataclass(frozen=True)
class WaterLogEntry:
    """A single drink, in milliliters."""

    id: UUID
    date: date
    amount_ml: int
    timestamp: datetime
