"""Row parsing helpers shared by Supabase repositories."""

from datetime import UTC, date, datetime

NIL_ID = "00000000-0000-0000-0000-000000000000"


def parse_date(raw: object) -> date:
    """Parse a stored YYYY-MM-DD value."""
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])


def parse_timestamp(raw: object) -> datetime:
    """Parse a stored timestamp, assuming UTC when no offset is present."""
    if isinstance(raw, str) and raw:
        parsed = datetime.fromisoformat(raw)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return datetime.min.replace(tzinfo=UTC)


def number(row: dict[str, object], key: str) -> float:
    """Read a numeric column, treating null as zero."""
    value = row.get(key)
    return float(value) if value is not None else 0.0
