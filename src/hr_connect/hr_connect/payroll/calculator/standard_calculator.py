from __future__ import annotations

from ...common.validators import require_positive
from ..model import OTResult, PayrollInputs
from .base import PayrollCalculator, round_half_up


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base / days / hours * OT rate * OT hours, rounded once at the end.

    Negative salary or OT hours are a caller precondition and are not checked.
    """

    def overtime(self, inputs: PayrollInputs) -> OTResult:
        require_positive(inputs.standard_work_days, "Số ngày công tiêu chuẩn")
        require_positive(inputs.work_hours_per_day, "Số giờ làm mỗi ngày")

        hourly_rate = inputs.base_salary / inputs.standard_work_days / inputs.work_hours_per_day
        ot_hourly_rate = hourly_rate * inputs.overtime_rate
        return OTResult(
            hourly_rate=hourly_rate,
            ot_hourly_rate=ot_hourly_rate,
            ot_pay=round_half_up(ot_hourly_rate * inputs.ot_hours),
        )


def overtime_breakdown(
    base_salary: float,
    standard_work_days: float,
    work_hours_per_day: float,
    ot_hours: float,
    overtime_rate: float,
) -> OTResult:
    return StandardPayrollCalculator().overtime(
        PayrollInputs(
            base_salary=base_salary,
            standard_work_days=standard_work_days,
            work_hours_per_day=work_hours_per_day,
            ot_hours=ot_hours,
            overtime_rate=overtime_rate,
        )
    )


def compute_overtime_pay(
    base_salary: float,
    standard_work_days: float,
    work_hours_per_day: float,
    ot_hours: float,
    overtime_rate: float,
) -> int:
    return overtime_breakdown(base_salary, standard_work_days, work_hours_per_day, ot_hours, overtime_rate).ot_pay
