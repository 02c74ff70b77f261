from __future__ import annotations

import math
from datetime import date
from typing import Dict, Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_month
from ..core.enums import AttendanceType
from .model import AttendanceStats


def calculate_attendance_stats(
    records: Iterable[AttendanceRecord],
    month: str,
    work_hours_per_day: float,
) -> AttendanceStats:
    """Work days and OT hours of one user in `month` ("MM-YYYY").

    A day counts only when it has both a check-in and a check-out; the
    earliest check-in and latest check-out of the day are paired. Hours past
    `work_hours_per_day` are overtime. Total OT is rounded to one decimal.
    """
    year, month_no = parse_month(month)

    check_ins: Dict[date, int] = {}
    check_outs: Dict[date, int] = {}
    for r in records:
        day = r.local_time.date()
        if day.year != year or day.month != month_no:
            continue
        if r.type == AttendanceType.CHECK_IN:
            check_ins[day] = min(check_ins.get(day, r.timestamp), r.timestamp)
        else:
            check_outs[day] = max(check_outs.get(day, r.timestamp), r.timestamp)

    actual_work_days = 0
    total_ot_hours = 0.0
    for day, in_ms in check_ins.items():
        out_ms = check_outs.get(day)
        if out_ms is None:
            continue
        actual_work_days += 1
        worked_hours = (out_ms - in_ms) / (1000 * 60 * 60)
        if worked_hours > work_hours_per_day:
            total_ot_hours += worked_hours - work_hours_per_day

    return AttendanceStats(
        actual_work_days=actual_work_days,
        ot_hours=math.floor(total_ot_hours * 10 + 0.5) / 10,
    )
