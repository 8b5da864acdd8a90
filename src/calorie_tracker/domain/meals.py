"""Domain models for logged meals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class MealDraft:
    """Meal data ready to be stored."""

    meal_name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    date: date
    timestamp: datetime
    image_path: str | None = None
    analysis_raw: dict[str, object] | None = None


@dataclass(frozen=True)
class MealEvent:
    """A stored meal. Meals are never edited, only deleted."""

    id: UUID
    meal_name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    date: date
    timestamp: datetime
    image_path: str | None = None
    analysis_raw: dict[str, object] | None = None
