from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ExpectedWindow
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Check-out before the expected end of the shift."""

    def decide_checkin(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        note = f"Về sớm {window.end_minutes - minute} phút" if window else None
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE, note=note)
