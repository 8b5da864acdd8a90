"""Domain models for physical activity."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class ActivitySource(StrEnum):
    """How an activity's burn figure was obtained."""

    MANUAL = "manual"
    AI = "ai"


@dataclass(frozen=True)
class ActivityDraft:
    """Activity data ready to be stored."""

    name: str
    calories_burned: float
    duration_minutes: float
    date: date
    timestamp: datetime
    source: ActivitySource = ActivitySource.MANUAL
    description: str | None = None


@dataclass(frozen=True)
class ActivityEvent:
    """A stored activity session."""

    id: UUID
    name: str
    calories_burned: float
    duration_minutes: float
    date: date
    timestamp: datetime
    source: ActivitySource
    description: str | None = None
