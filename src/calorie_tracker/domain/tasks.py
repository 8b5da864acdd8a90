"""Domain models for daily tasks."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class TaskStatus(StrEnum):
    """Completion state of a task."""

    PENDING = "pending"
    COMPLETED = "completed"
    PARTIAL = "partial"


@dataclass(frozen=True)
class TaskItem:
    """A to-do entry for a calendar day."""

    id: UUID
    text: str
    status: TaskStatus
    date: date
    timestamp: datetime
    notes: str = ""
