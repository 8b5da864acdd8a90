"""Singleton user settings service."""

from dataclasses import dataclass, fields, replace
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.user_settings import UserSettings
from calorie_tracker.errors import ValidationFailure

SETTINGS_ID = UUID("00000000-0000-0000-0000-000000000001")

_SETTINGS_FIELDS = frozenset(field.name for field in fields(UserSettings))


class UserSettingsRepository(Protocol):
    """Persistence interface for the settings row with a fixed id."""

    def get(self, settings_id: UUID) -> UserSettings | None:
        """Return the settings row if it exists."""

    def insert_if_absent(self, settings_id: UUID, settings: UserSettings) -> None:
        """Create the row unless one with this id already exists."""

    def save(self, settings_id: UUID, settings: UserSettings) -> UserSettings:
        """Write the full settings row and return it."""

    def delete(self, settings_id: UUID) -> None:
        """Remove the settings row."""


@dataclass
class UserSettingsService:
    """Accessor that guarantees exactly one settings record."""

    repository: UserSettingsRepository

    def get(self) -> UserSettings:
        """Return the settings, creating defaults on first read."""
        existing = self.repository.get(SETTINGS_ID)
        if existing is not None:
            return existing
        self.repository.insert_if_absent(SETTINGS_ID, UserSettings())
        created = self.repository.get(SETTINGS_ID)
        if created is None:
            raise RuntimeError("Failed to create default settings")
        return created

    def update(self, changes: dict[str, object]) -> UserSettings:
        """Apply a partial update to the settings record."""
        unknown = set(changes) - _SETTINGS_FIELDS
        if unknown:
            raise ValidationFailure(
                f"unknown settings fields: {', '.join(sorted(unknown))}"
            )
        current = self.get()
        updated = replace(current, **changes)
        return self.repository.save(SETTINGS_ID, updated)

    def reset(self) -> None:
        """Drop the settings record; the next read restores defaults."""
        self.repository.delete(SETTINGS_ID)
