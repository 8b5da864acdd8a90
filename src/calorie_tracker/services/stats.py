"""Daily and weekly rollups over logged events."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from calorie_tracker.domain.activities import ActivityEvent
from calorie_tracker.domain.body import WaterLogEntry
from calorie_tracker.domain.meals import MealEvent
from calorie_tracker.domain.stats import (
    BurnDay,
    DailyTotals,
    MacroName,
    TaskBreakdown,
    WeekDay,
)
from calorie_tracker.domain.tasks import TaskItem, TaskStatus
from calorie_tracker.services.activities import (
    RECENT_ACTIVITY_LIMIT,
    ActivityRepository,
)
from calorie_tracker.services.dates import trailing_dates, utc_today, weekday_name
from calorie_tracker.services.meals import MealRepository
from calorie_tracker.services.tasks import TaskRepository
from calorie_tracker.services.user_settings import UserSettingsService
from calorie_tracker.services.water import WaterRepository

WEEK_DAYS = 7


@dataclass(frozen=True)
class MealWithMacro:
    """A meal paired with its dominant macro."""

    meal: MealEvent
    dominant: MacroName


@dataclass(frozen=True)
class DailySummary:
    """Everything the dashboard shows for one day."""

    totals: DailyTotals
    calorie_target: int
    calorie_progress: float
    meals: list[MealWithMacro]
    water_ml: int
    water_goal: int
    water_progress: float
    tasks: TaskBreakdown


@dataclass(frozen=True)
class WeeklyOverview:
    """Trailing week of intake with totals."""

    days: list[WeekDay]
    total_calories: int
    avg_calories: float


@dataclass(frozen=True)
class ActivitySummary:
    """Burn totals, weekly goal progress and personal bests."""

    today_burn: float
    weekly_burn: float
    weekly_goal: int
    weekly_progress: float
    chart: list[BurnDay]
    longest_duration: float
    max_calories: float


@dataclass
class StatsService:
    """Service that reads the event store and reduces it to rollups."""

    meal_repository: MealRepository
    activity_repository: ActivityRepository
    water_repository: WaterRepository
    task_repository: TaskRepository
    settings_service: UserSettingsService

    def get_weekly(self, today: date | None = None) -> list[WeekDay]:
        """Return the 7-day intake rollup ending today."""
        reference = today or utc_today()
        days = trailing_dates(reference, WEEK_DAYS)
        meals = self.meal_repository.list_meals_for_dates(days)
        return weekly_rollup(reference, meals)

    def get_weekly_overview(self, today: date | None = None) -> WeeklyOverview:
        """Return the weekly rollup with total and average calories."""
        days = self.get_weekly(today)
        total = sum(day.calories for day in days)
        return WeeklyOverview(
            days=days, total_calories=total, avg_calories=total / len(days)
        )

    def get_daily(self, day: date | None = None) -> DailySummary:
        """Return totals, targets and per-meal detail for a day."""
        reference = day or utc_today()
        settings = self.settings_service.get()
        meals = self.meal_repository.list_meals(reference, None)
        meals = sorted(meals, key=lambda meal: meal.timestamp)
        totals = daily_totals(reference, meals)
        water_ml = water_total(self.water_repository.list_entries(reference))
        return DailySummary(
            totals=totals,
            calorie_target=settings.calorie_target,
            calorie_progress=goal_progress(totals.calories, settings.calorie_target),
            meals=[
                MealWithMacro(
                    meal=meal,
                    dominant=dominant_macro(meal.protein, meal.carbs, meal.fat),
                )
                for meal in meals
            ],
            water_ml=water_ml,
            water_goal=settings.water_goal,
            water_progress=goal_progress(water_ml, settings.water_goal),
            tasks=task_breakdown(self.task_repository.list_tasks(reference)),
        )

    def get_activity_summary(self, today: date | None = None) -> ActivitySummary:
        """Return burn rollups against the weekly burn goal."""
        reference = today or utc_today()
        days = trailing_dates(reference, WEEK_DAYS)
        activities = self.activity_repository.list_for_dates(days)
        settings = self.settings_service.get()
        chart = burn_by_day(days, activities)
        weekly_burn = sum(entry.burn for entry in chart)
        longest, hottest = personal_bests(
            self.activity_repository.list_recent(RECENT_ACTIVITY_LIMIT)
        )
        return ActivitySummary(
            today_burn=chart[-1].burn,
            weekly_burn=weekly_burn,
            weekly_goal=settings.weekly_burn_goal,
            weekly_progress=goal_progress(weekly_burn, settings.weekly_burn_goal),
            chart=chart,
            longest_duration=longest,
            max_calories=hottest,
        )


def daily_totals(day: date, meals: Iterable[MealEvent]) -> DailyTotals:
    """Sum calories and macros of the meals logged on `day`."""
    calories = 0
    protein = carbs = fat = 0.0
    for meal in meals:
        if meal.date != day:
            continue
        calories += int(_number(meal.calories))
        protein += _number(meal.protein)
        carbs += _number(meal.carbs)
        fat += _number(meal.fat)
    return DailyTotals(
        day=day, calories=calories, protein=protein, carbs=carbs, fat=fat
    )


def weekly_rollup(today: date, meals: Iterable[MealEvent]) -> list[WeekDay]:
    """Return one entry per trailing day, zero-filled when nothing was logged."""
    meals = list(meals)
    rollup = []
    for day in trailing_dates(today, WEEK_DAYS):
        totals = daily_totals(day, meals)
        rollup.append(
            WeekDay(
                day=weekday_name(day),
                date=day,
                calories=totals.calories,
                protein=round_half_up(totals.protein),
                carbs=round_half_up(totals.carbs),
                fat=round_half_up(totals.fat),
            )
        )
    return rollup


def dominant_macro(protein: float, carbs: float, fat: float) -> MacroName:
    """Return the macro contributing the most calories.

    Ties go to protein, then fat, then carbs. A meal with no macros at all
    reports carbs.
    """
    protein_kcal = _number(protein) * 4
    carbs_kcal = _number(carbs) * 4
    fat_kcal = _number(fat) * 9
    if protein_kcal == carbs_kcal == fat_kcal == 0:
        return MacroName.CARBS
    if protein_kcal >= carbs_kcal and protein_kcal >= fat_kcal:
        return MacroName.PROTEIN
    if fat_kcal >= carbs_kcal:
        return MacroName.FAT
    return MacroName.CARBS


def goal_progress(achieved: float, goal: float) -> float:
    """Percentage of a goal reached, capped at 100."""
    achieved = _number(achieved)
    goal = _number(goal)
    if goal <= 0:
        return 100.0 if achieved > 0 else 0.0
    return min(100.0, 100.0 * achieved / goal)


def water_total(entries: Iterable[WaterLogEntry]) -> int:
    """Total milliliters logged."""
    return sum(entry.amount_ml for entry in entries)


def burn_by_day(
    days: list[date], activities: Iterable[ActivityEvent]
) -> list[BurnDay]:
    """Calories burned on each of `days`."""
    totals = dict.fromkeys(days, 0.0)
    for activity in activities:
        if activity.date in totals:
            totals[activity.date] += _number(activity.calories_burned)
    return [
        BurnDay(day=weekday_name(day), date=day, burn=totals[day]) for day in days
    ]


def personal_bests(activities: Iterable[ActivityEvent]) -> tuple[float, float]:
    """Return (longest duration in minutes, most calories in one session)."""
    longest = hottest = 0.0
    for activity in activities:
        longest = max(longest, _number(activity.duration_minutes))
        hottest = max(hottest, _number(activity.calories_burned))
    return longest, hottest


def task_breakdown(tasks: Iterable[TaskItem]) -> TaskBreakdown:
    """Count tasks by status."""
    pending = completed = partial = 0
    for task in tasks:
        match task.status:
            case TaskStatus.PENDING:
                pending += 1
            case TaskStatus.COMPLETED:
                completed += 1
            case TaskStatus.PARTIAL:
                partial += 1
    return TaskBreakdown(pending=pending, completed=completed, partial=partial)


def _number(value: object) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up."""
    return math.floor(value + 0.5)
