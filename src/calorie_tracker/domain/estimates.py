"""Models for AI nutrition and burn estimates."""

import math
from enum import StrEnum

from pydantic import BaseModel, Field, field_serializer, field_validator

DEFAULT_DURATION_MINUTES = 30.0


class Confidence(StrEnum):
    """Model-reported confidence in a burn estimate."""

    HIGH = "high"
    LOW = "low"


class MealEstimate(BaseModel):
    """Nutrition estimate for a photographed meal."""

    meal_name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    protein: float = Field(ge=0.0)
    carbs: float = Field(ge=0.0)
    fat: float = Field(ge=0.0)
    reasoning: str = ""

    @field_validator("calories", mode="before")
    @classmethod
    def _round_calories(cls, value: object) -> object:
        if isinstance(value, float) and math.isfinite(value):
            return round(value)
        return value


class BurnEstimate(BaseModel):
    """Calorie burn estimate for a described activity."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    duration: float = Field(default=DEFAULT_DURATION_MINUTES, ge=0.0)
    confidence: Confidence

    @field_validator("calories", mode="before")
    @classmethod
    def _round_calories(cls, value: object) -> object:
        if isinstance(value, float) and math.isfinite(value):
            return round(value)
        return value

    @field_validator("duration", mode="before")
    @classmethod
    def _default_duration(cls, value: object) -> object:
        return DEFAULT_DURATION_MINUTES if value is None else value

    @field_serializer("duration")
    def _whole_minutes(self, value: float) -> int | float:
        return int(value) if value.is_integer() else value

    @property
    def needs_manual_entry(self) -> bool:
        """True when no usable estimate was produced."""
        return self.calories == 0

    @classmethod
    def unavailable(cls) -> "BurnEstimate":
        """Sentinel returned when estimation fails."""
        return cls(name="Activity", calories=0, duration=0, confidence=Confidence.LOW)
