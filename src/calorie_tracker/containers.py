"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.openai_estimation_client import OpenAIEstimationClient
from calorie_tracker.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from calorie_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from calorie_tracker.adapters.supabase_task_repository import SupabaseTaskRepository
from calorie_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from calorie_tracker.adapters.supabase_water_repository import SupabaseWaterRepository
from calorie_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.account import AccountService
from calorie_tracker.services.activities import ActivityService
from calorie_tracker.services.estimation import EstimationService
from calorie_tracker.services.meals import MealService
from calorie_tracker.services.stats import StatsService
from calorie_tracker.services.tasks import TaskService
from calorie_tracker.services.user_settings import UserSettingsService
from calorie_tracker.services.water import WaterService
from calorie_tracker.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    weight_service: WeightService
    activity_service: ActivityService
    water_service: WaterService
    task_service: TaskService
    user_settings_service: UserSettingsService
    stats_service: StatsService
    estimation_service: EstimationService
    account_service: AccountService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    weight_repository = SupabaseWeightRepository(supabase_client)
    activity_repository = SupabaseActivityRepository(supabase_client)
    water_repository = SupabaseWaterRepository(supabase_client)
    task_repository = SupabaseTaskRepository(supabase_client)
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client)
    )

    estimation_client = None
    if resolved_settings.openai_api_key:
        estimation_client = OpenAIEstimationClient.create(
            api_key=resolved_settings.openai_api_key,
            timeout_seconds=resolved_settings.ai_timeout_seconds,
        )
    estimation_service = EstimationService(
        client=estimation_client,
        model=resolved_settings.openai_model,
        timeout_seconds=resolved_settings.ai_timeout_seconds,
    )
    stats_service = StatsService(
        meal_repository=meal_repository,
        activity_repository=activity_repository,
        water_repository=water_repository,
        task_repository=task_repository,
        settings_service=user_settings_service,
    )
    account_service = AccountService(
        meal_repository=meal_repository,
        weight_repository=weight_repository,
        activity_repository=activity_repository,
        task_repository=task_repository,
        water_repository=water_repository,
        settings_service=user_settings_service,
    )

    async def close_resources() -> None:
        if estimation_client is not None:
            await estimation_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_service=MealService(meal_repository),
        weight_service=WeightService(weight_repository),
        activity_service=ActivityService(activity_repository),
        water_service=WaterService(water_repository),
        task_service=TaskService(task_repository),
        user_settings_service=user_settings_service,
        stats_service=stats_service,
        estimation_service=estimation_service,
        account_service=account_service,
        close_resources=close_resources,
    )
