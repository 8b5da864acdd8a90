"""Supabase repository for activities."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    NIL_ID,
    number,
    parse_date,
    parse_timestamp,
)
from calorie_tracker.domain.activities import (
    ActivityDraft,
    ActivityEvent,
    ActivitySource,
)
from calorie_tracker.services.activities import ActivityRepository

_COLUMNS = (
    "id, name, description, calories_burned, duration_minutes, date, timestamp, "
    "source"
)


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase implementation for activities."""

    client: Client

    def list_recent(self, limit: int) -> list[ActivityEvent]:
        """Return recent activities newest first."""
        response = (
            self.client.table("activities")
            .select(_COLUMNS)
            .order("timestamp", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_for_dates(self, days: list[date]) -> list[ActivityEvent]:
        """Return activities whose date is one of `days`."""
        response = (
            self.client.table("activities")
            .select(_COLUMNS)
            .in_("date", [day.isoformat() for day in days])
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_activity(self, draft: ActivityDraft) -> ActivityEvent:
        """Insert an activity row and return it."""
        response = (
            self.client.table("activities")
            .insert(
                {
                    "name": draft.name,
                    "description": draft.description,
                    "calories_burned": draft.calories_burned,
                    "duration_minutes": draft.duration_minutes,
                    "date": draft.date.isoformat(),
                    "timestamp": draft.timestamp.isoformat(),
                    "source": draft.source.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create activity")
        return _parse_row(response.data[0])

    def delete_activity(self, activity_id: UUID) -> bool:
        """Delete an activity row."""
        response = (
            self.client.table("activities")
            .delete()
            .eq("id", str(activity_id))
            .execute()
        )
        return bool(response.data)

    def delete_all(self) -> None:
        """Delete all activity rows."""
        self.client.table("activities").delete().neq("id", NIL_ID).execute()


def _parse_row(row: dict[str, object]) -> ActivityEvent:
    return ActivityEvent(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        description=row.get("description"),
        calories_burned=number(row, "calories_burned"),
        duration_minutes=number(row, "duration_minutes"),
        date=parse_date(row["date"]),
        timestamp=parse_timestamp(row.get("timestamp")),
        source=ActivitySource(row.get("source") or ActivitySource.MANUAL),
    )
