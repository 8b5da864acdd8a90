"""Supabase repository for daily tasks."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import NIL_ID, parse_date, parse_timestamp
from calorie_tracker.domain.tasks import TaskItem, TaskStatus
from calorie_tracker.services.tasks import TaskRepository

_COLUMNS = "id, text, status, notes, date, timestamp"


@dataclass
class SupabaseTaskRepository(TaskRepository):
    """Supabase implementation for tasks."""

    client: Client

    def list_tasks(self, day: date | None) -> list[TaskItem]:
        """Return tasks oldest first."""
        query = self.client.table("todos").select(_COLUMNS)
        if day is not None:
            query = query.eq("date", day.isoformat())
        response = query.order("timestamp", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]

    def create_task(  # noqa: PLR0913
        self,
        text: str,
        status: TaskStatus,
        notes: str,
        day: date,
        timestamp: datetime,
    ) -> TaskItem:
        """Insert a task row and return it."""
        response = (
            self.client.table("todos")
            .insert(
                {
                    "text": text,
                    "status": status.value,
                    "notes": notes,
                    "date": day.isoformat(),
                    "timestamp": timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create task")
        return _parse_row(response.data[0])

    def update_task(
        self, task_id: UUID, changes: dict[str, object]
    ) -> TaskItem | None:
        """Update a task row; None when no row matched."""
        payload = {
            key: value.value if isinstance(value, TaskStatus) else value
            for key, value in changes.items()
        }
        response = (
            self.client.table("todos").update(payload).eq("id", str(task_id)).execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_task(self, task_id: UUID) -> bool:
        """Delete a task row."""
        response = self.client.table("todos").delete().eq("id", str(task_id)).execute()
        return bool(response.data)

    def delete_all(self) -> None:
        """Delete all task rows."""
        self.client.table("todos").delete().neq("id", NIL_ID).execute()


def _parse_row(row: dict[str, object]) -> TaskItem:
    return TaskItem(
        id=UUID(str(row["id"])),
        text=str(row.get("text", "")),
        status=TaskStatus(row.get("status") or TaskStatus.PENDING),
        notes=str(row.get("notes") or ""),
        date=parse_date(row["date"]),
        timestamp=parse_timestamp(row.get("timestamp")),
    )
