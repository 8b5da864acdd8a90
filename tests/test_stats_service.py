"""Tests for daily and weekly rollups."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from calorie_tracker.domain.meals import MealEvent
from calorie_tracker.domain.stats import MacroName
from calorie_tracker.domain.tasks import TaskStatus
from calorie_tracker.services.activities import ActivityService
from calorie_tracker.services.meals import MealService
from calorie_tracker.services.stats import (
    StatsService,
    daily_totals,
    dominant_macro,
    goal_progress,
    weekly_rollup,
)
from calorie_tracker.services.tasks import TaskService
from calorie_tracker.services.user_settings import UserSettingsService
from calorie_tracker.services.water import WaterService
from tests.conftest import (
    InMemoryActivityRepository,
    InMemoryMealRepository,
    InMemoryTaskRepository,
    InMemoryUserSettingsRepository,
    InMemoryWaterRepository,
)

MONDAY = date(2024, 5, 6)


def _meal(
    day: date,
    calories: int,
    protein: float = 0,
    carbs: float = 0,
    fat: float = 0,
) -> MealEvent:
    return MealEvent(
        id=uuid4(),
        meal_name="Meal",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        date=day,
        timestamp=datetime(day.year, day.month, day.day, 12, tzinfo=UTC),
    )


@dataclass
class _Harness:
    stats: StatsService
    meals: MealService
    activities: ActivityService
    water: WaterService
    tasks: TaskService


def _build_service() -> _Harness:
    meals = InMemoryMealRepository()
    activities = InMemoryActivityRepository()
    water = InMemoryWaterRepository()
    tasks = InMemoryTaskRepository()
    settings_service = UserSettingsService(InMemoryUserSettingsRepository())
    return _Harness(
        stats=StatsService(
            meal_repository=meals,
            activity_repository=activities,
            water_repository=water,
            task_repository=tasks,
            settings_service=settings_service,
        ),
        meals=MealService(meals),
        activities=ActivityService(activities),
        water=WaterService(water),
        tasks=TaskService(tasks),
    )


def test_daily_totals_only_counts_that_day() -> None:
    meals = [
        _meal(MONDAY, 400, protein=30, carbs=40, fat=10),
        _meal(MONDAY, 250, protein=5, carbs=20, fat=15),
        _meal(MONDAY - timedelta(days=1), 900),
    ]

    totals = daily_totals(MONDAY, meals)

    assert totals.calories == 650
    assert totals.protein == 35
    assert totals.carbs == 60
    assert totals.fat == 25


def test_daily_totals_treats_missing_numbers_as_zero() -> None:
    meal = _meal(MONDAY, 300, protein=float("nan"))
    meal_with_none = _meal(MONDAY, 200, carbs=None)  # type: ignore[arg-type]

    totals = daily_totals(MONDAY, [meal, meal_with_none])

    assert totals.calories == 500
    assert totals.protein == 0
    assert totals.carbs == 0


def test_weekly_rollup_has_seven_days_oldest_first() -> None:
    rollup = weekly_rollup(MONDAY, [])

    assert len(rollup) == 7
    assert [entry.date for entry in rollup] == [
        MONDAY - timedelta(days=offset) for offset in range(6, -1, -1)
    ]
    assert rollup[-1].day == "Mon"
    assert rollup[0].day == "Tue"
    assert all(entry.calories == 0 for entry in rollup)


def test_weekly_rollup_across_month_and_leap_day() -> None:
    rollup = weekly_rollup(date(2024, 3, 2), [_meal(date(2024, 2, 29), 500)])

    assert rollup[0].date == date(2024, 2, 25)
    assert rollup[-1].date == date(2024, 3, 2)
    by_date = {entry.date: entry.calories for entry in rollup}
    assert by_date[date(2024, 2, 29)] == 500
    assert by_date[date(2024, 3, 1)] == 0


def test_weekly_rollup_rounds_macros_half_up() -> None:
    meals = [
        _meal(MONDAY, 101, protein=10.25, carbs=0.5, fat=1.2),
        _meal(MONDAY, 202, protein=10.25, carbs=0, fat=1.2),
    ]

    today = weekly_rollup(MONDAY, meals)[-1]

    assert today.calories == 303
    assert today.protein == 21
    assert today.carbs == 1
    assert today.fat == 2


def test_weekly_rollup_ignores_meals_outside_window() -> None:
    meals = [_meal(MONDAY - timedelta(days=7), 800), _meal(MONDAY, 100)]

    rollup = weekly_rollup(MONDAY, meals)

    assert sum(entry.calories for entry in rollup) == 100


def test_dominant_macro() -> None:
    assert dominant_macro(10, 10, 0) is MacroName.PROTEIN
    assert dominant_macro(0, 0, 0) is MacroName.CARBS
    assert dominant_macro(5, 50, 1) is MacroName.CARBS
    assert dominant_macro(5, 10, 20) is MacroName.FAT
    assert dominant_macro(0, 9, 4) is MacroName.FAT


def test_goal_progress_is_capped() -> None:
    assert goal_progress(3000, 2000) == 100
    assert goal_progress(1000, 2000) == 50
    assert goal_progress(500, 0) == 100
    assert goal_progress(0, 0) == 0


def test_get_weekly_is_stable_across_reads() -> None:
    harness = _build_service()
    harness.meals.log_meal(meal_name="Eggs", calories=300, protein=20, day=MONDAY)

    first = harness.stats.get_weekly(MONDAY)
    second = harness.stats.get_weekly(MONDAY)

    assert first == second
    assert first[-1].calories == 300


def test_weekly_overview_totals_and_average() -> None:
    harness = _build_service()
    for offset, calories in enumerate((700, 0, 1400)):
        harness.meals.log_meal(
            meal_name="Meal", calories=calories, day=MONDAY - timedelta(days=offset)
        )

    overview = harness.stats.get_weekly_overview(MONDAY)

    assert overview.total_calories == 2100
    assert overview.avg_calories == 300


def test_daily_summary_includes_water_tasks_and_macros() -> None:
    harness = _build_service()
    harness.meals.log_meal(
        meal_name="Steak",
        calories=1250,
        protein=60,
        fat=30,
        day=MONDAY,
        timestamp=datetime(2024, 5, 6, 19, tzinfo=UTC),
    )
    harness.meals.log_meal(
        meal_name="Porridge",
        calories=300,
        carbs=50,
        day=MONDAY,
        timestamp=datetime(2024, 5, 6, 7, tzinfo=UTC),
    )
    harness.water.log_water(1500, day=MONDAY)
    harness.tasks.add_task("Walk", day=MONDAY)
    harness.tasks.add_task("Prep lunch", day=MONDAY, status=TaskStatus.COMPLETED)

    summary = harness.stats.get_daily(MONDAY)

    assert summary.totals.calories == 1550
    assert summary.calorie_target == 2500
    assert summary.calorie_progress == 62
    assert [entry.meal.meal_name for entry in summary.meals] == ["Porridge", "Steak"]
    assert [entry.dominant for entry in summary.meals] == [
        MacroName.CARBS,
        MacroName.FAT,
    ]
    assert summary.water_ml == 1500
    assert summary.water_progress == 50
    assert summary.tasks.pending == 1
    assert summary.tasks.completed == 1
    assert summary.tasks.total == 2


def test_activity_summary() -> None:
    harness = _build_service()
    harness.activities.log_activity(
        name="Running", calories_burned=400, duration_minutes=40, day=MONDAY
    )
    harness.activities.log_activity(
        name="Cycling",
        calories_burned=600,
        duration_minutes=90,
        day=MONDAY - timedelta(days=2),
    )
    harness.activities.log_activity(
        name="Hike",
        calories_burned=900,
        duration_minutes=180,
        day=MONDAY - timedelta(days=10),
    )

    summary = harness.stats.get_activity_summary(MONDAY)

    assert summary.today_burn == 400
    assert summary.weekly_burn == 1000
    assert summary.weekly_goal == 2000
    assert summary.weekly_progress == 50
    assert len(summary.chart) == 7
    assert summary.chart[4].burn == 600
    assert summary.longest_duration == 180
    assert summary.max_calories == 900
