from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceType
from ..shifts.model import ExpectedWindow
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.overtime_strategy import OvertimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, window: Optional[ExpectedWindow], minute: int) -> AttendanceStrategy:
        if not window:
            return NormalStrategy()

        # Arriving early or exactly at start is on time; there is no "early" check-in.
        if minute > window.start_minutes:
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, window: Optional[ExpectedWindow], minute: int) -> AttendanceStrategy:
        if not window:
            return NormalStrategy()

        if minute < window.end_minutes:
            return EarlyLeaveStrategy()
        if minute > window.end_minutes:
            return OvertimeStrategy()
        return NormalStrategy()

    def for_event(self, *, event_type: AttendanceType, window: Optional[ExpectedWindow], minute: int) -> AttendanceStrategy:
        if event_type == AttendanceType.CHECK_IN:
            return self.for_checkin(window=window, minute=minute)
        return self.for_checkout(window=window, minute=minute)
