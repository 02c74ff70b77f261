from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import OffType, RequestStatus, ShiftKind


@dataclass(frozen=True)
class ShiftRegistration:
    """Thực thể miền (domain): Đăng ký ca theo ngày của một nhân viên.

    `date` only matters by calendar day; storage may keep any time-of-day.
    `kind` is a plain string when storage holds a value outside ShiftKind.
    `off_type` is set only for OFF registrations.
    """

    user_id: int
    date: Union[date, datetime, int]
    kind: Union[ShiftKind, str]
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: RequestStatus = RequestStatus.APPROVED
    registration_id: Optional[int] = None
    rejection_reason: Optional[str] = None
    off_type: Optional[OffType] = None


@dataclass(frozen=True)
class ExpectedWindow:
    """Minute-of-day interval an employee is expected to be clocked in."""

    start_minutes: int
    end_minutes: int
