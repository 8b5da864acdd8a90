"""Supabase repository for weight samples."""

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
from calorie_tracker.domain.body import WeightSample
from calorie_tracker.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight samples."""

    client: Client

    def list_recent(self, limit: int) -> list[WeightSample]:
        """Return samples by date, latest first."""
        response = (
            self.client.table("weights")
            .select("id, date, weight, note, timestamp")
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_sample(
        self, day: date, weight: float, note: str | None, timestamp: datetime
    ) -> WeightSample:
        """Insert a weight row and return it."""
        response = (
            self.client.table("weights")
            .insert(
                {
                    "date": day.isoformat(),
                    "weight": weight,
                    "note": note,
                    "timestamp": timestamp.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to record weight")
        return _parse_row(response.data[0])

    def delete_sample(self, sample_id: UUID) -> bool:
        """Delete a weight row."""
        response = (
            self.client.table("weights").delete().eq("id", str(sample_id)).execute()
        )
        return bool(response.data)

    def delete_all(self) -> None:
        """Delete all weight rows."""
        self.client.table("weights").delete().neq("id", NIL_ID).execute()


def _parse_row(row: dict[str, object]) -> WeightSample:
    return WeightSample(
        id=UUID(str(row["id"])),
        date=parse_date(row["date"]),
        weight=number(row, "weight"),
        note=row.get("note"),
        timestamp=parse_timestamp(row.get("timestamp")),
    )
