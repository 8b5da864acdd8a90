"""Calendar-date helpers shared by services."""

from datetime import UTC, date, datetime, timedelta

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def utc_today() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(tz=UTC).date()


def resolve_date(day: date | None, timestamp: datetime | None) -> tuple[date, datetime]:
    """Fill in whichever of date/timestamp is missing.

    A missing timestamp becomes the current UTC instant; a missing date is the
    UTC calendar day of the timestamp. Values supplied together are returned
    unchanged.
    """
    resolved_timestamp = timestamp or datetime.now(tz=UTC)
    if resolved_timestamp.tzinfo is None:
        resolved_timestamp = resolved_timestamp.replace(tzinfo=UTC)
    if day is None:
        day = resolved_timestamp.astimezone(UTC).date()
    return day, resolved_timestamp


def trailing_dates(today: date, days: int = 7) -> list[date]:
    """Return the `days` calendar dates ending at `today`, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def weekday_name(day: date) -> str:
    """Short English weekday name, independent of locale."""
    return WEEKDAY_NAMES[day.weekday()]
