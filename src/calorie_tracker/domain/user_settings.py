"""Domain model for the user's targets and preferences."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserSettings:
    """The single settings record for the tracker."""

    name: str = "Anup"
    program: str = "Muscle Gain"
    calorie_target: int = 2500
    protein_target: int = 180
    carbs_target: int = 250
    fat_target: int = 80
    current_weight: float = 75.5
    goal_weight: float = 80.0
    weekly_burn_goal: int = 2000
    water_goal: int = 3000
    notifications: bool = True
    theme: str = "dark"
