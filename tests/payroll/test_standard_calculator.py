import pytest

from src.hr_connect.hr_connect.core.exceptions import ValidationError
from src.hr_connect.hr_connect.payroll.calculator.base import round_half_up
from src.hr_connect.hr_connect.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    compute_overtime_pay,
    overtime_breakdown,
)
from src.hr_connect.hr_connect.payroll.model import PayrollInputs


def test_overtime_pay_reference_case():
    assert compute_overtime_pay(7_200_000, 27, 8, 3.5, 1.5) == 175000


def test_overtime_breakdown_exposes_rates():
    result = overtime_breakdown(7_200_000, 27, 8, 3.5, 1.5)

    assert result.hourly_rate == pytest.approx(7_200_000 / 27 / 8)
    assert result.ot_hourly_rate == pytest.approx(50_000.0)
    assert result.ot_pay == 175000


@pytest.mark.parametrize("base_salary,days,hours", [(7_200_000, 27, 8), (10_000_000, 26, 8), (1, 30, 7.5)])
def test_zero_ot_hours_pays_nothing(base_salary, days, hours):
    assert compute_overtime_pay(base_salary, days, hours, 0, 1.5) == 0


def test_rounding_is_half_up_and_only_at_the_end():
    # hourly rate 1.0 exactly, so OT pay is 2.5 before rounding
    assert compute_overtime_pay(216, 27, 8, 2.5, 1) == 3
    # 10_000_000 / 27 / 8 * 1.5 * 5 = 347222.22..
    assert compute_overtime_pay(10_000_000, 27, 8, 5, 1.5) == 347222


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1
    assert round_half_up(-1.5) == -1


def test_negative_ot_hours_are_not_rejected():
    assert compute_overtime_pay(216, 27, 8, -1, 1.5) == -1


@pytest.mark.parametrize("days,hours", [(0, 8), (27, 0), (-1, 8)])
def test_invalid_divisors_fail_loudly(days, hours):
    with pytest.raises(ValidationError):
        compute_overtime_pay(7_200_000, days, hours, 3.5, 1.5)


def test_calculator_is_repeatable():
    calc = StandardPayrollCalculator()
    inputs = PayrollInputs(
        base_salary=15_000_000, standard_work_days=27, work_hours_per_day=8, ot_hours=10, overtime_rate=1.5
    )

    assert {calc.overtime(inputs).ot_pay for _ in range(20)} == {1_041_667}
