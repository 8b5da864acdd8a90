"""REST endpoints for meals, activity, body logs, tasks, settings and stats."""

from __future__ import annotations

import datetime as dt
from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, File, Query, Request, UploadFile

from calorie_tracker.api.schemas import (
    ActivityCreate,
    ActivityEstimateRequest,
    MealCreate,
    SettingsUpdate,
    TaskCreate,
    TaskUpdate,
    WaterCreate,
    WeightCreate,
)
from calorie_tracker.errors import ValidationFailure
from calorie_tracker.services.stats import round_half_up

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.activities import ActivityEvent
    from calorie_tracker.domain.body import WaterLogEntry, WeightSample
    from calorie_tracker.domain.meals import MealEvent
    from calorie_tracker.domain.stats import WeekDay
    from calorie_tracker.domain.tasks import TaskItem
    from calorie_tracker.services.stats import ActivitySummary, DailySummary

router = APIRouter(prefix="/api", tags=["api"])

_DELETED = {"success": True}


def _container(request: Request) -> AppContainer:
    return request.app.state.container


# Analysis


@router.post("/analyze")
async def analyze_meal(
    request: Request, image: UploadFile | None = File(default=None)
) -> dict[str, object]:
    """Estimate nutrition for an uploaded meal photo. Nothing is saved."""
    if image is None:
        raise ValidationFailure("No image uploaded")
    image_bytes = await image.read()
    estimate = await _container(request).estimation_service.analyze_meal_image(
        image_bytes, image.content_type
    )
    return estimate.model_dump(mode="json")


@router.post("/activity/estimate")
async def estimate_activity(
    body: ActivityEstimateRequest, request: Request
) -> dict[str, object]:
    """Estimate calorie burn; falls back to a zero, low-confidence estimate."""
    estimate = await _container(request).estimation_service.estimate_burn(body.query)
    return estimate.model_dump(mode="json")


# Stats


@router.get("/stats/weekly")
async def weekly_stats(request: Request) -> list[dict[str, object]]:
    """Return the trailing 7-day intake rollup, oldest first."""
    days = _container(request).stats_service.get_weekly()
    return [_serialize_week_day(day) for day in days]


@router.get("/stats/weekly/summary")
async def weekly_summary(request: Request) -> dict[str, object]:
    """Return the 7-day rollup with total and average calories."""
    overview = _container(request).stats_service.get_weekly_overview()
    return {
        "days": [_serialize_week_day(day) for day in overview.days],
        "total_calories": overview.total_calories,
        "avg_calories": round(overview.avg_calories),
    }


@router.get("/stats/daily")
async def daily_stats(
    request: Request, day: dt.date | None = Query(default=None, alias="date")
) -> dict[str, object]:
    """Return totals, goal progress and meals for one day."""
    summary = _container(request).stats_service.get_daily(day)
    return _serialize_daily(summary)


@router.get("/stats/activity")
async def activity_stats(request: Request) -> dict[str, object]:
    """Return burn totals, weekly goal progress and personal bests."""
    summary = _container(request).stats_service.get_activity_summary()
    return _serialize_activity_summary(summary)


# Meals


@router.get("/meals")
async def list_meals(
    request: Request,
    day: dt.date | None = Query(default=None, alias="date"),
    limit: int | None = Query(default=None, ge=1),
) -> list[dict[str, object]]:
    """Return meals, newest first."""
    meals = _container(request).meal_service.list_meals(day, limit)
    return [_serialize_meal(meal) for meal in meals]


@router.post("/meals")
async def create_meal(body: MealCreate, request: Request) -> dict[str, object]:
    """Log a meal."""
    meal = _container(request).meal_service.log_meal(
        meal_name=body.meal_name,
        calories=body.calories,
        protein=body.protein,
        carbs=body.carbs,
        fat=body.fat,
        day=body.date,
        timestamp=body.timestamp,
        image_path=body.image_path,
        analysis_raw=body.analysis_raw,
    )
    return _serialize_meal(meal)


@router.delete("/meals/{meal_id}")
async def delete_meal(meal_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a meal."""
    _container(request).meal_service.delete_meal(meal_id)
    return _DELETED


# Weight


@router.get("/weight")
async def list_weights(request: Request) -> list[dict[str, object]]:
    """Return the 30 latest weight samples."""
    samples = _container(request).weight_service.list_recent()
    return [_serialize_weight(sample) for sample in samples]


@router.post("/weight")
async def create_weight(body: WeightCreate, request: Request) -> dict[str, object]:
    """Record a weight sample."""
    sample = _container(request).weight_service.record_weight(
        weight=body.weight, day=body.date, note=body.note, timestamp=body.timestamp
    )
    return _serialize_weight(sample)


@router.delete("/weight/{sample_id}")
async def delete_weight(sample_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a weight sample."""
    _container(request).weight_service.delete_sample(sample_id)
    return _DELETED


# Settings


@router.get("/settings")
async def get_settings(request: Request) -> dict[str, object]:
    """Return the settings record, creating defaults on first read."""
    return asdict(_container(request).user_settings_service.get())


@router.put("/settings")
async def update_settings(body: SettingsUpdate, request: Request) -> dict[str, object]:
    """Update some or all settings."""
    settings = _container(request).user_settings_service.update(
        body.model_dump(exclude_none=True)
    )
    return asdict(settings)


# Activity


@router.get("/activity")
async def list_activities(request: Request) -> list[dict[str, object]]:
    """Return the 50 most recent activities."""
    activities = _container(request).activity_service.list_recent()
    return [_serialize_activity(activity) for activity in activities]


@router.post("/activity")
async def create_activity(body: ActivityCreate, request: Request) -> dict[str, object]:
    """Log an activity."""
    activity = _container(request).activity_service.log_activity(
        name=body.name,
        calories_burned=body.calories_burned,
        duration_minutes=body.duration_minutes,
        source=body.source,
        description=body.description,
        day=body.date,
        timestamp=body.timestamp,
    )
    return _serialize_activity(activity)


@router.delete("/activity/{activity_id}")
async def delete_activity(activity_id: UUID, request: Request) -> dict[str, bool]:
    """Delete an activity."""
    _container(request).activity_service.delete_activity(activity_id)
    return _DELETED


# Tasks


@router.get("/todos")
async def list_tasks(
    request: Request, day: dt.date | None = Query(default=None, alias="date")
) -> list[dict[str, object]]:
    """Return tasks, oldest first."""
    tasks = _container(request).task_service.list_tasks(day)
    return [_serialize_task(task) for task in tasks]


@router.post("/todos")
async def create_task(body: TaskCreate, request: Request) -> dict[str, object]:
    """Add a task."""
    task = _container(request).task_service.add_task(
        text=body.text,
        day=body.date,
        status=body.status,
        notes=body.notes,
        timestamp=body.timestamp,
    )
    return _serialize_task(task)


@router.put("/todos/{task_id}")
async def update_task(
    task_id: UUID, body: TaskUpdate, request: Request
) -> dict[str, object]:
    """Change a task's text, status or notes."""
    task = _container(request).task_service.update_task(
        task_id, body.model_dump(exclude_none=True)
    )
    return _serialize_task(task)


@router.delete("/todos/{task_id}")
async def delete_task(task_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a task."""
    _container(request).task_service.delete_task(task_id)
    return _DELETED


# Water


@router.get("/water")
async def list_water(
    request: Request, day: dt.date | None = Query(default=None, alias="date")
) -> list[dict[str, object]]:
    """Return water entries, oldest first."""
    entries = _container(request).water_service.list_entries(day)
    return [_serialize_water(entry) for entry in entries]


@router.post("/water")
async def create_water(body: WaterCreate, request: Request) -> dict[str, object]:
    """Log a drink."""
    entry = _container(request).water_service.log_water(
        amount_ml=body.amount, day=body.date, timestamp=body.timestamp
    )
    return _serialize_water(entry)


@router.delete("/water/{entry_id}")
async def delete_water(entry_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a water entry."""
    _container(request).water_service.delete_entry(entry_id)
    return _DELETED


# Account


@router.post("/reset")
async def reset_account(request: Request) -> dict[str, object]:
    """Delete every record and the settings row."""
    _container(request).account_service.reset()
    return {"success": True, "message": "Account reset successfully"}


def _serialize_meal(meal: MealEvent) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "meal_name": meal.meal_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "date": meal.date.isoformat(),
        "timestamp": meal.timestamp.isoformat(),
        "image_path": meal.image_path,
        "analysis_raw": meal.analysis_raw,
    }


def _serialize_weight(sample: WeightSample) -> dict[str, object]:
    return {
        "id": str(sample.id),
        "date": sample.date.isoformat(),
        "weight": sample.weight,
        "note": sample.note,
        "timestamp": sample.timestamp.isoformat(),
    }


def _serialize_activity(activity: ActivityEvent) -> dict[str, object]:
    return {
        "id": str(activity.id),
        "name": activity.name,
        "description": activity.description,
        "calories_burned": activity.calories_burned,
        "duration_minutes": activity.duration_minutes,
        "date": activity.date.isoformat(),
        "timestamp": activity.timestamp.isoformat(),
        "source": activity.source.value,
    }


def _serialize_task(task: TaskItem) -> dict[str, object]:
    return {
        "id": str(task.id),
        "text": task.text,
        "status": task.status.value,
        "notes": task.notes,
        "date": task.date.isoformat(),
        "timestamp": task.timestamp.isoformat(),
    }


def _serialize_water(entry: WaterLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "date": entry.date.isoformat(),
        "amount": entry.amount_ml,
        "timestamp": entry.timestamp.isoformat(),
    }


def _serialize_week_day(day: WeekDay) -> dict[str, object]:
    return {
        "day": day.day,
        "date": day.date.isoformat(),
        "cal": day.calories,
        "protein": day.protein,
        "carbs": day.carbs,
        "fat": day.fat,
    }


def _serialize_daily(summary: DailySummary) -> dict[str, object]:
    totals = summary.totals
    return {
        "date": totals.day.isoformat(),
        "calories": totals.calories,
        "protein": round_half_up(totals.protein),
        "carbs": round_half_up(totals.carbs),
        "fat": round_half_up(totals.fat),
        "calorie_target": summary.calorie_target,
        "calorie_progress": summary.calorie_progress,
        "water_ml": summary.water_ml,
        "water_goal": summary.water_goal,
        "water_progress": summary.water_progress,
        "tasks": {
            "pending": summary.tasks.pending,
            "completed": summary.tasks.completed,
            "partial": summary.tasks.partial,
            "total": summary.tasks.total,
        },
        "meals": [
            {**_serialize_meal(entry.meal), "dominant_macro": entry.dominant.value}
            for entry in summary.meals
        ],
    }


def _serialize_activity_summary(summary: ActivitySummary) -> dict[str, object]:
    return {
        "today_burn": summary.today_burn,
        "weekly_burn": summary.weekly_burn,
        "weekly_goal": summary.weekly_goal,
        "weekly_progress": summary.weekly_progress,
        "chart": [
            {"day": entry.day, "date": entry.date.isoformat(), "burn": entry.burn}
            for entry in summary.chart
        ],
        "personal_bests": {
            "longest_duration": summary.longest_duration,
            "max_calories": summary.max_calories,
        },
    }
