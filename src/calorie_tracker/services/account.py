"""Account-wide maintenance."""

import logging
from dataclasses import dataclass

from calorie_tracker.services.activities import ActivityRepository
from calorie_tracker.services.meals import MealRepository
from calorie_tracker.services.tasks import TaskRepository
from calorie_tracker.services.user_settings import UserSettingsService
from calorie_tracker.services.water import WaterRepository
from calorie_tracker.services.weights import WeightRepository

logger = logging.getLogger(__name__)


@dataclass
class AccountService:
    """Service that wipes every record kind and the settings row."""

    meal_repository: MealRepository
    weight_repository: WeightRepository
    activity_repository: ActivityRepository
    task_repository: TaskRepository
    water_repository: WaterRepository
    settings_service: UserSettingsService

    def reset(self) -> None:
        """Delete all logged data; settings return to defaults on next read."""
        self.meal_repository.delete_all()
        self.weight_repository.delete_all()
        self.activity_repository.delete_all()
        self.task_repository.delete_all()
        self.water_repository.delete_all()
        self.settings_service.reset()
        logger.info("Account data reset")
