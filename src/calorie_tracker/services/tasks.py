"""Daily task service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.tasks import TaskItem, TaskStatus
from calorie_tracker.errors import NotFound, ValidationFailure
from calorie_tracker.services.dates import resolve_date

_UPDATABLE_FIELDS = frozenset({"text", "status", "notes"})


class TaskRepository(Protocol):
    """Persistence interface for tasks."""

    def list_tasks(self, day: date | None) -> list[TaskItem]:
        """Return tasks oldest first, optionally for one date."""

    def create_task(  # noqa: PLR0913
        self,
        text: str,
        status: TaskStatus,
        notes: str,
        day: date,
        timestamp: datetime,
    ) -> TaskItem:
        """Store a task."""

    def update_task(
        self, task_id: UUID, changes: dict[str, object]
    ) -> TaskItem | None:
        """Apply changes; return None when the task does not exist."""

    def delete_task(self, task_id: UUID) -> bool:
        """Delete a task; return False when it did not exist."""

    def delete_all(self) -> None:
        """Delete every task."""


@dataclass
class TaskService:
    """Service for the daily to-do list."""

    repository: TaskRepository

    def list_tasks(self, day: date | None = None) -> list[TaskItem]:
        """Return tasks."""
        return self.repository.list_tasks(day)

    def add_task(
        self,
        text: str,
        day: date | None = None,
        status: TaskStatus = TaskStatus.PENDING,
        notes: str = "",
        timestamp: datetime | None = None,
    ) -> TaskItem:
        """Create a task."""
        cleaned = text.strip()
        if not cleaned:
            raise ValidationFailure("text is required")
        resolved_day, resolved_timestamp = resolve_date(day, timestamp)
        return self.repository.create_task(
            cleaned, status, notes, resolved_day, resolved_timestamp
        )

    def update_task(self, task_id: UUID, changes: dict[str, object]) -> TaskItem:
        """Update text, status or notes in place."""
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            fields = ", ".join(sorted(unknown))
            raise ValidationFailure(f"cannot update fields: {fields}")
        if not changes:
            raise ValidationFailure("no changes supplied")
        if "status" in changes:
            try:
                status = TaskStatus(changes["status"])
            except ValueError as exc:
                raise ValidationFailure(f"invalid status: {changes['status']}") from exc
            changes = {**changes, "status": status}
        updated = self.repository.update_task(task_id, changes)
        if updated is None:
            raise NotFound("task", task_id)
        return updated

    def delete_task(self, task_id: UUID) -> None:
        """Delete a task or raise NotFound."""
        if not self.repository.delete_task(task_id):
            raise NotFound("task", task_id)
