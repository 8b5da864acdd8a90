"""Meal logging service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.meals import MealDraft, MealEvent
from calorie_tracker.errors import NotFound, ValidationFailure
from calorie_tracker.services.dates import resolve_date


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, day: date | None, limit: int | None) -> list[MealEvent]:
        """Return meals, newest first, optionally for one date."""

    def list_meals_for_dates(self, days: list[date]) -> list[MealEvent]:
        """Return all meals whose date is in `days`."""

    def create_meal(self, draft: MealDraft) -> MealEvent:
        """Store a meal and return it with its id."""

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal; return False when it did not exist."""

    def delete_all(self) -> None:
        """Delete every meal."""


@dataclass
class MealService:
    """Service for creating, listing and deleting meals."""

    repository: MealRepository

    def list_meals(
        self, day: date | None = None, limit: int | None = None
    ) -> list[MealEvent]:
        """Return meals, newest first."""
        if limit is not None and limit <= 0:
            raise ValidationFailure("limit must be positive")
        return self.repository.list_meals(day, limit)

    def log_meal(  # noqa: PLR0913
        self,
        *,
        meal_name: str,
        calories: int,
        protein: float = 0.0,
        carbs: float = 0.0,
        fat: float = 0.0,
        day: date | None = None,
        timestamp: datetime | None = None,
        image_path: str | None = None,
        analysis_raw: dict[str, object] | None = None,
    ) -> MealEvent:
        """Validate and persist a meal."""
        name = meal_name.strip()
        if not name:
            raise ValidationFailure("meal_name is required")
        if calories < 0 or min(protein, carbs, fat) < 0:
            raise ValidationFailure("calories and macros must not be negative")
        resolved_day, resolved_timestamp = resolve_date(day, timestamp)
        return self.repository.create_meal(
            MealDraft(
                meal_name=name,
                calories=calories,
                protein=protein,
                carbs=carbs,
                fat=fat,
                date=resolved_day,
                timestamp=resolved_timestamp,
                image_path=image_path,
                analysis_raw=analysis_raw,
            )
        )

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal or raise NotFound."""
        if not self.repository.delete_meal(meal_id):
            raise NotFound("meal", meal_id)
