from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollInputs:
    base_salary: float
    standard_work_days: float
    work_hours_per_day: float
    ot_hours: float
    overtime_rate: float


@dataclass(frozen=True)
class OTResult:
    hourly_rate: float
    ot_hourly_rate: float
    ot_pay: int


@dataclass(frozen=True)
class AttendanceStats:
    """Tổng hợp chấm công của một nhân viên trong tháng."""

    actual_work_days: int
    ot_hours: float


@dataclass(frozen=True)
class PayrollRecord:
    """Bảng lương tháng (chưa lưu trữ; việc duyệt/chi trả nằm ngoài core)."""

    user_id: int
    month: str  # "MM-YYYY"
    base_salary: int
    standard_work_days: float
    actual_work_days: float
    ot_hours: float
    ot_pay: int
    allowance: float
    bonus: float
    deductions: int
    net_salary: int
