"""Domain models for rollups."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class MacroName(StrEnum):
    """Macronutrient labels used for dominant-macro results."""

    PROTEIN = "Protein"
    FAT = "Fat"
    CARBS = "Carbs"


@dataclass(frozen=True)
class DailyTotals:
    """Summed intake for one calendar day."""

    day: date
    calories: int
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class WeekDay:
    """One entry of the trailing 7-day rollup."""

    day: str
    date: date
    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class BurnDay:
    """Calories burned on one calendar day."""

    day: str
    date: date
    burn: float


@dataclass(frozen=True)
class TaskBreakdown:
    """Task counts by status."""

    pending: int = 0
    completed: int = 0
    partial: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.completed + self.partial
