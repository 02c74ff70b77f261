from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ExpectedWindow
from .base import AttendanceStrategy, StatusDecision


class OvertimeStrategy(AttendanceStrategy):
    """Check-out after the expected end of the shift."""

    def decide_checkin(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        note = f"Tăng ca {minute - window.end_minutes} phút" if window else None
        return StatusDecision(status=AttendanceStatus.OVERTIME, note=note)
