"""Ví dụ: dùng các hàm nghiệp vụ thuần (không qua Flask, không cần CSDL)."""

from datetime import date

from src.hr_connect.hr_connect.attendance.classifier import classify
from src.hr_connect.hr_connect.core.enums import AttendanceType, ShiftKind
from src.hr_connect.hr_connect.geo.distance import GeoPoint, distance_meters
from src.hr_connect.hr_connect.payroll.calculator.standard_calculator import compute_overtime_pay
from src.hr_connect.hr_connect.shifts.model import ShiftRegistration
from src.hr_connect.hr_connect.shifts.resolver import expected_window, resolve_shift
from src.hr_connect.hr_connect.system_config.model import SystemConfig


def main():
    config = SystemConfig()
    today = date.today()
    shifts = [ShiftRegistration(user_id=1, date=today, kind=ShiftKind.CUSTOM, start_time="08:30")]

    window = expected_window(resolve_shift(shifts, today))
    print("window:", window)
    print("check-in 08:45:", classify(window, AttendanceType.CHECK_IN, 8 * 60 + 45).value)
    print("check-out 18:00:", classify(window, AttendanceType.CHECK_OUT, 18 * 60).value)

    here = GeoPoint(lat=10.0410, lng=105.7850)
    print("distance to office (m):", round(distance_meters(here, config.reference_location.point)))

    print("OT pay:", compute_overtime_pay(7_200_000, config.standard_work_days, config.work_hours_per_day, 3.5, config.overtime_rate))


if __name__ == "__main__":
    main()
