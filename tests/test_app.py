from __future__ import annotations

from dataclasses import replace

import pytest

from src.hr_connect.hr_connect.container import wire
from src.hr_connect.hr_connect.core.enums import ShiftKind
from src.hr_connect.hr_connect.main import create_app
from src.hr_connect.hr_connect.shifts.model import ShiftRegistration
from src.hr_connect.hr_connect.system_config.service import SystemConfigService


class InMemoryRegistrations:
    def __init__(self):
        self.items: list[ShiftRegistration] = []

    def list_for_user(self, user_id):
        return [r for r in self.items if r.user_id == user_id]

    def get_by_id(self, registration_id):
        return next((r for r in self.items if r.registration_id == registration_id), None)

    def create(self, *, user_id, work_date, kind, start_time, end_time, status, off_type=None):
        rid = len(self.items) + 1
        self.items.append(
            ShiftRegistration(
                registration_id=rid,
                user_id=user_id,
                date=work_date,
                kind=ShiftKind(kind),
                start_time=start_time,
                end_time=end_time,
                status=status,
            )
        )
        return rid

    def update_status(self, *, registration_id, status, rejection_reason=None):
        for i, r in enumerate(self.items):
            if r.registration_id == registration_id:
                self.items[i] = replace(r, status=status, rejection_reason=rejection_reason)
                return True
        return False


class InMemoryAttendance:
    def __init__(self):
        self.items = []

    def save(self, record):
        self.items.append(replace(record, record_id=len(self.items) + 1))
        return len(self.items)

    def list_for_user(self, user_id, *, start_ms, end_ms):
        rows = [r for r in self.items if r.user_id == user_id and start_ms <= r.timestamp <= end_ms]
        return sorted(rows, key=lambda r: r.timestamp, reverse=True)

    def get_recent_for_user(self, user_id, limit):
        rows = sorted((r for r in self.items if r.user_id == user_id), key=lambda r: r.timestamp, reverse=True)
        return rows[:limit]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(
        attendance_repo=InMemoryAttendance(),
        registrations_repo=InMemoryRegistrations(),
        config_service=SystemConfigService(),
    )
    app = create_app(container)
    return app.test_client()


def test_register_approve_and_read_expected_window(client):
    resp = client.post("/api/shifts", json={"user_id": 1, "date": "2026-02-02", "shift": "CUSTOM", "start_time": "16:00"})
    assert resp.status_code == 201
    rid = resp.get_json()["registration_id"]

    pending = client.get("/api/shifts/expected?user_id=1&date=2026-02-02").get_json()
    assert pending["window"] is None

    assert client.post(f"/api/shifts/{rid}/approve").status_code == 200

    window = client.get("/api/shifts/expected?user_id=1&date=2026-02-02").get_json()["window"]
    assert window == {"start_minutes": 960, "end_minutes": 1439, "start": "16:00", "end": "23:59"}


def test_register_invalid_time_is_400(client):
    resp = client.post("/api/shifts", json={"user_id": 1, "date": "2026-02-02", "shift": "CUSTOM", "start_time": "24:30"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_record_attendance(client):
    resp = client.post(
        "/api/attendance",
        json={"user_id": 3, "type": "CHECK_IN", "lat": 10.040675858019696, "lng": 105.78463187148355, "photo_ref": "p.jpg"},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["record"]["status"] == "ON_TIME"
    assert body["record"]["within_range"] is True

    nxt = client.get("/api/attendance/next?user_id=3").get_json()
    assert nxt["action"] == "CHECK_OUT"

    history = client.get("/api/attendance/history?user_id=3").get_json()["data"]
    assert len(history) == 1


def test_record_attendance_without_gps_is_400(client):
    resp = client.post("/api/attendance", json={"user_id": 3, "type": "CHECK_IN"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Cần vị trí GPS"


def test_record_attendance_bad_type_is_400(client):
    resp = client.post("/api/attendance", json={"user_id": 3, "type": "LUNCH", "lat": 1, "lng": 1})

    assert resp.status_code == 400


def test_overtime_endpoint(client):
    resp = client.post("/api/payroll/overtime", json={"base_salary": 7_200_000, "ot_hours": 3.5})

    data = resp.get_json()["data"]
    assert data["ot_pay"] == 175000
    assert data["ot_hourly_rate"] == pytest.approx(50_000)


def test_overtime_endpoint_rejects_zero_days(client):
    resp = client.post("/api/payroll/overtime", json={"base_salary": 1, "ot_hours": 1, "standard_work_days": 0})

    assert resp.status_code == 400


def test_payroll_calculate_endpoint(client):
    resp = client.post(
        "/api/payroll/calculate",
        json={"user_id": 1, "base_salary": 7_200_000, "month": "02-2026", "actual_work_days": 27, "ot_hours": 3.5},
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"]["net_salary"] == 6_600_625


@pytest.mark.parametrize("online,synced", [(False, False), ("false", False), ("True", True), (True, True)])
def test_record_attendance_online_flag(client, online, synced):
    resp = client.post(
        "/api/attendance",
        json={"user_id": 4, "type": "CHECK_IN", "lat": 21.0, "lng": 105.8, "online": online},
    )

    assert resp.status_code == 201
    assert resp.get_json()["record"]["synced"] is synced


@pytest.mark.parametrize("online", ["no", 0, "offline"])
def test_record_attendance_rejects_non_boolean_online(client, online):
    resp = client.post(
        "/api/attendance",
        json={"user_id": 4, "type": "CHECK_IN", "lat": 21.0, "lng": 105.8, "online": online},
    )

    assert resp.status_code == 400


def test_register_off_day_requires_off_type(client):
    missing = client.post("/api/shifts", json={"user_id": 1, "date": "2026-02-03", "shift": "OFF"})
    assert missing.status_code == 400

    ok = client.post("/api/shifts", json={"user_id": 1, "date": "2026-02-03", "shift": "OFF", "off_type": "OFF_PN"})
    assert ok.status_code == 201
