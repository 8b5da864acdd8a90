"""Supabase repository for the settings row."""

from dataclasses import asdict, dataclass, fields
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.user_settings import UserSettings
from calorie_tracker.services.user_settings import UserSettingsRepository

_FIELD_NAMES = tuple(field.name for field in fields(UserSettings))


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for the singleton settings row."""

    client: Client

    def get(self, settings_id: UUID) -> UserSettings | None:
        """Return the settings row with the fixed id."""
        response = (
            self.client.table("settings")
            .select(", ".join(_FIELD_NAMES))
            .eq("id", str(settings_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def insert_if_absent(self, settings_id: UUID, settings: UserSettings) -> None:
        """Insert defaults without overwriting an existing row."""
        self.client.table("settings").upsert(
            {"id": str(settings_id), **asdict(settings)},
            on_conflict="id",
            ignore_duplicates=True,
        ).execute()

    def save(self, settings_id: UUID, settings: UserSettings) -> UserSettings:
        """Write the full row and return what was stored."""
        response = (
            self.client.table("settings")
            .upsert(
                {
                    "id": str(settings_id),
                    **asdict(settings),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save settings")
        return _parse_row(response.data[0])

    def delete(self, settings_id: UUID) -> None:
        """Delete the settings row."""
        self.client.table("settings").delete().eq("id", str(settings_id)).execute()


def _parse_row(row: dict[str, object]) -> UserSettings:
    defaults = UserSettings()
    values = {
        name: row[name] if row.get(name) is not None else getattr(defaults, name)
        for name in _FIELD_NAMES
    }
    return UserSettings(**values)
