from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus, AttendanceType
from ..shifts.model import ExpectedWindow
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision

_FACTORY = AttendanceStrategyFactory()


def decide(
    window: Optional[ExpectedWindow],
    event_type: AttendanceType,
    minute: int,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    """Status plus a short note ("Muộn 5 phút") for an event at `minute`."""
    strategy = (factory or _FACTORY).for_event(event_type=event_type, window=window, minute=minute)
    if event_type == AttendanceType.CHECK_IN:
        return strategy.decide_checkin(window=window, minute=minute)
    return strategy.decide_checkout(window=window, minute=minute)


def classify(window: Optional[ExpectedWindow], event_type: AttendanceType, minute: int) -> AttendanceStatus:
    """Attendance status of an event at minute-of-day `minute`.

    Total over validated inputs: no window means ON_TIME for any minute.
    """
    return decide(window, event_type, minute).status
