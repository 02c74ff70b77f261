from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ExpectedWindow
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        note = f"Muộn {minute - window.start_minutes} phút" if window else None
        return StatusDecision(status=AttendanceStatus.LATE, note=note)

    def decide_checkout(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)
