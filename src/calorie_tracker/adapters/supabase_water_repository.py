"""Supabase repository for the water log."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_rows import (
    NIL_ID,
    number,
    parse_date,
    parse_timestamp,
)
from calorie_tracker.domain.body import WaterLogEntry
from calorie_tracker.services.water import WaterRepository


@dataclass
class SupabaseWaterRepository(WaterRepository):
    """Supabase implementation for water entries."""

    client: Client

    def list_entries(self, day: date | None) -> list[WaterLogEntry]:
        """Return entries oldest first."""
        query = self.client.table("water_logs").select("id, date, amount, timestamp")
        if day is not None:
            query = query.eq("date", day.isoformat())
        response = query.order("timestamp", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]

    def create_entry(
        self, day: date, amount_ml: int, timestamp: datetime
    ) -> WaterLogEntry:
        """Insert a water row and return it."""
        response = (
            self.client.table("water_logs")
            .insert(
                {
                    "date": day.isoformat(),
                    "amount": amount_ml,
                    "timestamp": timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to log water")
        return _parse_row(response.data[0])

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a water row."""
        response = (
            self.client.table("water_logs").delete().eq("id", str(entry_id)).execute()
        )
        return bool(response.data)

    def delete_all(self) -> None:
        """Delete all water rows."""
        self.client.table("water_logs").delete().neq("id", NIL_ID).execute()


def _parse_row(row: dict[str, object]) -> WaterLogEntry:
    return WaterLogEntry(
        id=UUID(str(row["id"])),
        date=parse_date(row["date"]),
        amount_ml=int(number(row, "amount")),
        timestamp=parse_timestamp(row.get("timestamp")),
    )
