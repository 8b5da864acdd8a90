"""Request bodies accepted by the REST API."""

import datetime as dt

from pydantic import BaseModel, Field

from calorie_tracker.domain.activities import ActivitySource
from calorie_tracker.domain.tasks import TaskStatus


class MealCreate(BaseModel):
    """Manual or AI-confirmed meal entry."""

    meal_name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    protein: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fat: float = Field(default=0.0, ge=0.0)
    date: dt.date | None = None
    timestamp: dt.datetime | None = None
    image_path: str | None = None
    analysis_raw: dict[str, object] | None = None


class WeightCreate(BaseModel):
    """Body weight reading."""

    weight: float = Field(gt=0.0)
    date: dt.date | None = None
    note: str | None = None
    timestamp: dt.datetime | None = None


class ActivityCreate(BaseModel):
    """Activity session, entered manually or accepted from an estimate."""

    name: str = Field(min_length=1)
    calories_burned: float = Field(ge=0.0)
    duration_minutes: float = Field(ge=0.0)
    description: str | None = None
    source: ActivitySource = ActivitySource.MANUAL
    date: dt.date | None = None
    timestamp: dt.datetime | None = None


class ActivityEstimateRequest(BaseModel):
    """Free-text activity description to estimate."""

    query: str = ""


class TaskCreate(BaseModel):
    """New to-do item."""

    text: str = Field(min_length=1)
    status: TaskStatus = TaskStatus.PENDING
    notes: str = ""
    date: dt.date | None = None
    timestamp: dt.datetime | None = None


class TaskUpdate(BaseModel):
    """Partial task update."""

    text: str | None = Field(default=None, min_length=1)
    status: TaskStatus | None = None
    notes: str | None = None


class WaterCreate(BaseModel):
    """A drink, in milliliters."""

    amount: int = Field(gt=0)
    date: dt.date | None = None
    timestamp: dt.datetime | None = None


class SettingsUpdate(BaseModel):
    """Partial settings update."""

    name: str | None = None
    program: str | None = None
    calorie_target: int | None = Field(default=None, ge=0)
    protein_target: int | None = Field(default=None, ge=0)
    carbs_target: int | None = Field(default=None, ge=0)
    fat_target: int | None = Field(default=None, ge=0)
    current_weight: float | None = Field(default=None, gt=0.0)
    goal_weight: float | None = Field(default=None, gt=0.0)
    weekly_burn_goal: int | None = Field(default=None, ge=0)
    water_goal: int | None = Field(default=None, ge=0)
    notifications: bool | None = None
    theme: str | None = None
