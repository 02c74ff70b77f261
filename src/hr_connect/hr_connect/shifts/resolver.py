from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, format_hhmm, local_day, parse_hhmm
from ..core.constants import CUSTOM_SHIFT_MINUTES, LAST_MINUTE_OF_DAY
from ..core.enums import RequestStatus, ShiftKind
from .model import ExpectedWindow, ShiftRegistration

logger = logging.getLogger(__name__)


def resolve_shift(shifts: Iterable[ShiftRegistration], on_date: DateLike) -> Optional[ShiftRegistration]:
    """Find the approved registration for the calendar day of `on_date`.

    Days are compared as local (year, month, day). Duplicates are not
    deduplicated: the first match in iteration order wins.
    """
    target: date = local_day(on_date)
    for shift in shifts:
        if shift.status != RequestStatus.APPROVED:
            continue
        if local_day(shift.date) == target:
            return shift
    return None


def expected_window(shift: Optional[ShiftRegistration]) -> Optional[ExpectedWindow]:
    if shift is None or shift.kind == ShiftKind.OFF:
        return None

    if shift.kind == ShiftKind.CUSTOM:
        if not shift.start_time:
            return None
        start_minutes = parse_hhmm(shift.start_time)
        end_minutes = min(start_minutes + CUSTOM_SHIFT_MINUTES, LAST_MINUTE_OF_DAY)
        return ExpectedWindow(start_minutes=start_minutes, end_minutes=end_minutes)

    # Unknown kinds carry no expectation; every action on that day is ON_TIME.
    logger.warning(
        "Shift kind %r has no expected-window rule (user_id=%s); treating as no shift",
        shift.kind,
        shift.user_id,
    )
    return None


def shift_end_time(start_time: str) -> str:
    """End label of a CUSTOM shift: start + 9 hours, same day, at most 23:59."""
    start_minutes = parse_hhmm(start_time)
    return format_hhmm(min(start_minutes + CUSTOM_SHIFT_MINUTES, LAST_MINUTE_OF_DAY))
