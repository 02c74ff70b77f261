from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import minute_of_day, now_local, to_epoch_ms
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, AttendanceType
from ..core.exceptions import ValidationError
from ..geo.distance import GeoPoint, can_record, distance_meters, within_range
from ..shifts.model import ExpectedWindow
from ..shifts.repository import ShiftRegistrationRepository
from ..shifts.resolver import expected_window, resolve_shift
from ..system_config.service import SystemConfigService
from .classifier import decide
from .factory import AttendanceStrategyFactory
from .model import AttendanceEvent, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    AttendanceStatus.ON_TIME: "Đúng giờ",
    AttendanceStatus.LATE: "Đi muộn",
    AttendanceStatus.EARLY_LEAVE: "Về sớm",
    AttendanceStatus.OVERTIME: "Tăng ca",
    AttendanceStatus.PENDING: "Chờ đồng bộ",
}


class AttendanceService:
    """Use case: record a check-in/check-out with its derived status.

    The distance gate is advisory. Out-of-range events are recorded and
    flagged, never rejected.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        registrations: ShiftRegistrationRepository,
        config_service: SystemConfigService | None = None,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._registrations = registrations
        self._config_service = config_service or SystemConfigService()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _window_for(self, user_id: int, now: datetime) -> Optional[ExpectedWindow]:
        shift = resolve_shift(self._registrations.list_for_user(user_id), now)
        try:
            return expected_window(shift)
        except ValueError:
            # Registration data should be validated upstream; a bad start time
            # carries no expectation rather than blocking the employee.
            logger.warning("Unparsable shift start time %r for user_id=%s", shift.start_time, user_id)
            return None

    def record(
        self,
        user_id: int,
        event_type: AttendanceType,
        location: Optional[GeoPoint],
        *,
        photo_ref: Optional[str] = None,
        now: datetime | None = None,
        online: bool = True,
    ) -> AttendanceRecord:
        if location is None:
            raise ValidationError("Cần vị trí GPS")

        now = now or now_local()
        event = AttendanceEvent(
            user_id=user_id,
            timestamp=to_epoch_ms(now),
            type=AttendanceType(event_type),
            location=location,
            photo_ref=photo_ref,
        )

        config = self._config_service.load()
        window = self._window_for(user_id, now)
        decision = decide(window, event.type, minute_of_day(now), factory=self._factory)

        office = config.reference_location
        distance = distance_meters(location, office.point)
        in_range = within_range(distance, office.radius_meters)
        if not can_record(distance, office.radius_meters, online=online):
            logger.warning(
                "user_id=%s recorded %s out of office range (%.0fm > %.0fm)",
                user_id, event.type.value, distance, office.radius_meters,
            )

        record = AttendanceRecord(
            user_id=event.user_id,
            timestamp=event.timestamp,
            type=event.type,
            location=event.location,
            status=decision.status,
            photo_ref=event.photo_ref,
            note=decision.note,
            distance_meters=distance,
            within_range=in_range,
            synced=online,
        )
        record_id = self._attendance.save(record)
        logger.info(
            "Attendance recorded id=%s user_id=%s type=%s status=%s",
            record_id, user_id, event.type.value, decision.status.value,
        )
        return replace(record, record_id=record_id)

    def today_records(self, user_id: int, today: date):
        start_ms = to_epoch_ms(datetime.combine(today, time.min))
        end_ms = to_epoch_ms(datetime.combine(today, time.max))
        return self._attendance.list_for_user(user_id, start_ms=start_ms, end_ms=end_ms)

    def next_action(self, user_id: int, today: date) -> AttendanceType:
        """CHECK_OUT only when the latest record today is a CHECK_IN."""
        records = self.today_records(user_id, today)
        if records and records[0].type == AttendanceType.CHECK_IN:
            return AttendanceType.CHECK_OUT
        return AttendanceType.CHECK_IN

    def get_history_ui(self, user_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT):
        rows = self._attendance.get_recent_for_user(user_id, limit)
        return [self.to_ui(r) for r in rows]

    def to_ui(self, r: AttendanceRecord) -> dict:
        return {
            "id": r.record_id,
            "date": r.local_time.strftime("%Y-%m-%d"),
            "time": r.local_time.strftime("%H:%M:%S"),
            "type": r.type.value,
            "status": r.status.value,
            "label": STATUS_LABELS.get(r.status, r.status.value),
            "note": r.note or "",
            "distance_meters": round(r.distance_meters) if r.distance_meters is not None else None,
            "within_range": r.within_range,
            "synced": r.synced,
        }
