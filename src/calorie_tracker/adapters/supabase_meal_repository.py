"""Supabase repository for meals."""

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
from calorie_tracker.domain.meals import MealDraft, MealEvent
from calorie_tracker.services.meals import MealRepository

_COLUMNS = (
    "id, meal_name, calories, protein, carbs, fat, date, timestamp, "
    "image_path, analysis_raw"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, day: date | None, limit: int | None) -> list[MealEvent]:
        """Return meals newest first."""
        query = self.client.table("meals").select(_COLUMNS)
        if day is not None:
            query = query.eq("date", day.isoformat())
        query = query.order("timestamp", desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_row(row) for row in response.data or []]

    def list_meals_for_dates(self, days: list[date]) -> list[MealEvent]:
        """Return meals whose date is one of `days`."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .in_("date", [day.isoformat() for day in days])
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_meal(self, draft: MealDraft) -> MealEvent:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "meal_name": draft.meal_name,
                    "calories": draft.calories,
                    "protein": draft.protein,
                    "carbs": draft.carbs,
                    "fat": draft.fat,
                    "date": draft.date.isoformat(),
                    "timestamp": draft.timestamp.isoformat(),
                    "image_path": draft.image_path,
                    "analysis_raw": draft.analysis_raw,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_row(response.data[0])

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal row."""
        response = self.client.table("meals").delete().eq("id", str(meal_id)).execute()
        return bool(response.data)

    def delete_all(self) -> None:
        """Delete all meal rows."""
        self.client.table("meals").delete().neq("id", NIL_ID).execute()


def _parse_row(row: dict[str, object]) -> MealEvent:
    return MealEvent(
        id=UUID(str(row["id"])),
        meal_name=str(row.get("meal_name", "")),
        calories=int(number(row, "calories")),
        protein=number(row, "protein"),
        carbs=number(row, "carbs"),
        fat=number(row, "fat"),
        date=parse_date(row["date"]),
        timestamp=parse_timestamp(row.get("timestamp")),
        image_path=row.get("image_path"),
        analysis_raw=row.get("analysis_raw"),
    )
