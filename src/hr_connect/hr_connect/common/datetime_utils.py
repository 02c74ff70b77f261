from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, int, float]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> tuple[int, int]:
    """Parse payroll month "MM-YYYY" into (year, month)."""
    parsed = datetime.strptime(value, "%m-%Y")
    return parsed.year, parsed.month


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def from_epoch_ms(timestamp_ms: Union[int, float]) -> datetime:
    """Epoch milliseconds to a naive local datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000)


def to_epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def local_day(value: DateLike) -> date:
    """Calendar day (local time) of a date, datetime or epoch-ms timestamp.

    Registrations may be stored with arbitrary time-of-day components, so
    callers compare on this instead of on exact timestamps.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    return from_epoch_ms(value).date()


def minute_of_day(value: datetime) -> int:
    """Minutes since local midnight, 0..1439."""
    return value.hour * 60 + value.minute


def parse_hhmm(value: str) -> int:
    """Parse "HH:MM" into minute-of-day.

    Raises ValueError when the string is not a valid time of day.
    """
    parsed = datetime.strptime(value.strip(), "%H:%M")
    return parsed.hour * 60 + parsed.minute


def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
