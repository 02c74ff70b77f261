from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

import pytest

from src.hr_connect.hr_connect.attendance.model import AttendanceRecord
from src.hr_connect.hr_connect.attendance.service import AttendanceService
from src.hr_connect.hr_connect.core.enums import AttendanceStatus, AttendanceType, ShiftKind
from src.hr_connect.hr_connect.core.exceptions import ValidationError
from src.hr_connect.hr_connect.geo.distance import GeoPoint
from src.hr_connect.hr_connect.shifts.model import ShiftRegistration
from src.hr_connect.hr_connect.system_config.service import SystemConfigService

OFFICE = GeoPoint(lat=10.040675858019696, lng=105.78463187148355)
HANOI = GeoPoint(lat=21.0278, lng=105.8342)


@dataclass
class InMemoryRegistrations:
    items: list[ShiftRegistration]

    def list_for_user(self, user_id: int):
        return [r for r in self.items if r.user_id == user_id]


class InMemoryAttendance:
    def __init__(self):
        self.items: list[AttendanceRecord] = []

    def save(self, record: AttendanceRecord) -> int:
        record_id = len(self.items) + 1
        self.items.append(replace(record, record_id=record_id))
        return record_id

    def list_for_user(self, user_id: int, *, start_ms: int, end_ms: int):
        rows = [r for r in self.items if r.user_id == user_id and start_ms <= r.timestamp <= end_ms]
        return sorted(rows, key=lambda r: r.timestamp, reverse=True)

    def get_recent_for_user(self, user_id: int, limit: int):
        rows = sorted((r for r in self.items if r.user_id == user_id), key=lambda r: r.timestamp, reverse=True)
        return rows[:limit]


def _service(shifts, attendance=None):
    return AttendanceService(attendance or InMemoryAttendance(), InMemoryRegistrations(shifts), SystemConfigService())


def _shift(day, start="09:00", kind=ShiftKind.CUSTOM):
    return ShiftRegistration(user_id=1, date=day, kind=kind, start_time=start)


def test_checkin_after_registered_start_is_late(fixed_now):
    attendance = InMemoryAttendance()
    svc = _service([_shift(fixed_now.date())], attendance)

    rec = svc.record(1, AttendanceType.CHECK_IN, OFFICE, photo_ref="photos/1.jpg", now=fixed_now)

    assert rec.record_id == 1
    assert rec.status == AttendanceStatus.LATE
    assert rec.note == "Muộn 5 phút"
    assert rec.within_range is True
    assert rec.distance_meters == pytest.approx(0.0, abs=1e-6)
    assert attendance.items[0].photo_ref == "photos/1.jpg"


def test_checkin_uses_only_todays_registration(fixed_now):
    yesterday = fixed_now.date() - timedelta(days=1)
    svc = _service([_shift(yesterday, "06:00")])

    rec = svc.record(1, AttendanceType.CHECK_IN, OFFICE, now=fixed_now)

    assert rec.status == AttendanceStatus.ON_TIME


def test_off_day_is_on_time(fixed_now):
    svc = _service([_shift(fixed_now.date(), None, ShiftKind.OFF)])

    rec = svc.record(1, AttendanceType.CHECK_OUT, OFFICE, now=fixed_now)

    assert rec.status == AttendanceStatus.ON_TIME


def test_checkout_after_shift_end_is_overtime(fixed_now):
    svc = _service([_shift(fixed_now.date(), "08:00")])
    evening = fixed_now.replace(hour=18, minute=30)

    rec = svc.record(1, AttendanceType.CHECK_OUT, OFFICE, now=evening)

    assert rec.status == AttendanceStatus.OVERTIME


def test_out_of_range_is_recorded_and_flagged(fixed_now, caplog):
    attendance = InMemoryAttendance()
    svc = _service([], attendance)

    rec = svc.record(1, AttendanceType.CHECK_IN, HANOI, now=fixed_now)

    assert rec.within_range is False
    assert rec.distance_meters > 1_000_000
    assert len(attendance.items) == 1
    assert "out of office range" in caplog.text


def test_offline_record_is_unsynced_without_warning(fixed_now, caplog):
    svc = _service([])

    rec = svc.record(1, AttendanceType.CHECK_IN, HANOI, now=fixed_now, online=False)

    assert rec.synced is False
    assert "out of office range" not in caplog.text


def test_record_requires_location(fixed_now):
    svc = _service([])

    with pytest.raises(ValidationError):
        svc.record(1, AttendanceType.CHECK_IN, None, now=fixed_now)


def test_unparsable_start_time_falls_back_to_on_time(fixed_now):
    svc = _service([_shift(fixed_now.date(), "9h00")])

    rec = svc.record(1, AttendanceType.CHECK_IN, OFFICE, now=fixed_now)

    assert rec.status == AttendanceStatus.ON_TIME


def test_next_action_alternates(fixed_now):
    attendance = InMemoryAttendance()
    svc = _service([], attendance)
    today = fixed_now.date()

    assert svc.next_action(1, today) == AttendanceType.CHECK_IN
    svc.record(1, AttendanceType.CHECK_IN, OFFICE, now=fixed_now)
    assert svc.next_action(1, today) == AttendanceType.CHECK_OUT
    svc.record(1, AttendanceType.CHECK_OUT, OFFICE, now=fixed_now + timedelta(hours=9))
    assert svc.next_action(1, today) == AttendanceType.CHECK_IN
    assert svc.next_action(1, today + timedelta(days=1)) == AttendanceType.CHECK_IN


def test_history_ui_labels(fixed_now):
    attendance = InMemoryAttendance()
    svc = _service([_shift(fixed_now.date())], attendance)
    svc.record(1, AttendanceType.CHECK_IN, OFFICE, now=fixed_now)

    rows = svc.get_history_ui(1)

    assert rows[0]["date"] == "2026-02-02"
    assert rows[0]["time"] == "09:05:00"
    assert rows[0]["label"] == "Đi muộn"
    assert rows[0]["within_range"] is True
