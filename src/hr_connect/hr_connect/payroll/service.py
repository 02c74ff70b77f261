from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, time
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_month, to_epoch_ms
from ..common.validators import require_non_negative
from ..core.exceptions import ValidationError
from ..system_config.service import SystemConfigService
from .calculator.base import PayrollCalculator, round_half_up
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import AttendanceStats, OTResult, PayrollInputs, PayrollRecord
from .stats import calculate_attendance_stats

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: monthly payroll figures from salary, attendance and system config."""

    def __init__(
        self,
        attendance: AttendanceRepository | None = None,
        config_service: SystemConfigService | None = None,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._config_service = config_service or SystemConfigService()
        self._calculator = calculator or StandardPayrollCalculator()

    def overtime(self, *, base_salary: float, ot_hours: float) -> OTResult:
        config = self._config_service.load()
        return self._calculator.overtime(
            PayrollInputs(
                base_salary=base_salary,
                standard_work_days=config.standard_work_days,
                work_hours_per_day=config.work_hours_per_day,
                ot_hours=ot_hours,
                overtime_rate=config.overtime_rate,
            )
        )

    def attendance_stats(self, *, user_id: int, month: str) -> AttendanceStats:
        if self._attendance is None:
            return AttendanceStats(actual_work_days=0, ot_hours=0.0)

        year, month_no = parse_month(month)
        last_day = calendar.monthrange(year, month_no)[1]
        start_ms = to_epoch_ms(datetime.combine(date(year, month_no, 1), time.min))
        end_ms = to_epoch_ms(datetime.combine(date(year, month_no, last_day), time.max))

        records = self._attendance.list_for_user(user_id, start_ms=start_ms, end_ms=end_ms)
        config = self._config_service.load()
        return calculate_attendance_stats(records, month, config.work_hours_per_day)

    def calculate(
        self,
        *,
        user_id: int,
        base_salary: float,
        month: str,
        actual_work_days: Optional[float] = None,
        ot_hours: Optional[float] = None,
        allowance: float = 0,
        bonus: float = 0,
    ) -> PayrollRecord:
        """Build the payroll record; missing figures come from attendance."""
        require_non_negative(allowance, "Phụ cấp")
        require_non_negative(bonus, "Thưởng")
        try:
            parse_month(month)
        except ValueError:
            raise ValidationError("Tháng phải có dạng MM-YYYY") from None
        config = self._config_service.load()

        if actual_work_days is None or ot_hours is None:
            stats = self.attendance_stats(user_id=user_id, month=month)
            if actual_work_days is None:
                actual_work_days = stats.actual_work_days
            if ot_hours is None:
                ot_hours = stats.ot_hours

        ot = self.overtime(base_salary=base_salary, ot_hours=ot_hours)
        work_day_salary = base_salary / config.standard_work_days * actual_work_days
        # Unrounded OT pay; only deductions and net are rounded.
        total_income = work_day_salary + ot.ot_hourly_rate * ot_hours + allowance + bonus
        deductions = total_income * config.social_insurance_rate / 100

        record = PayrollRecord(
            user_id=user_id,
            month=month,
            base_salary=round_half_up(base_salary),
            standard_work_days=config.standard_work_days,
            actual_work_days=actual_work_days,
            ot_hours=ot_hours,
            ot_pay=ot.ot_pay,
            allowance=allowance,
            bonus=bonus,
            deductions=round_half_up(deductions),
            net_salary=round_half_up(total_income - deductions),
        )
        logger.info(
            "Payroll calculated user_id=%s month=%s work_days=%s ot_hours=%s net=%s",
            user_id, month, actual_work_days, ot_hours, record.net_salary,
        )
        return record
