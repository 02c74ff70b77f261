from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ExpectedWindow
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, on-time check-out (or no shift to compare against)."""

    def decide_checkin(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(self, *, window: Optional[ExpectedWindow], minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)
