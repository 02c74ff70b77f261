from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import OffType, RequestStatus, ShiftKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_hhmm
from .model import ShiftRegistration
from .repository import ShiftRegistrationRepository


def _kind(value: str):
    # Unknown kinds are kept as raw strings so resolution can flag them.
    try:
        return ShiftKind(value)
    except ValueError:
        return value


def _to_model(r: Dict[str, Any]) -> ShiftRegistration:
    return ShiftRegistration(
        registration_id=int(r["registration_id"]),
        user_id=int(r["user_id"]),
        date=r["work_date"],
        kind=_kind(r["shift"]),
        start_time=mysql_time_to_hhmm(r.get("start_time")),
        end_time=mysql_time_to_hhmm(r.get("end_time")),
        status=RequestStatus(r["status"]),
        rejection_reason=r.get("rejection_reason"),
        off_type=OffType(r["off_type"]) if r.get("off_type") else None,
    )


class MySQLShiftRegistrationRepository(ShiftRegistrationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[ShiftRegistration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT registration_id, user_id, work_date, shift, start_time, end_time, off_type, status, rejection_reason
                FROM shift_registrations
                WHERE user_id=%s
                ORDER BY registration_id
                """,
                (user_id,),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, registration_id: int) -> Optional[ShiftRegistration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT registration_id, user_id, work_date, shift, start_time, end_time, off_type, status, rejection_reason
                FROM shift_registrations
                WHERE registration_id=%s
                """,
                (registration_id,),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None

    def create(
        self,
        *,
        user_id: int,
        work_date: date,
        kind: str,
        start_time: Optional[str],
        end_time: Optional[str],
        status: RequestStatus,
        off_type: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_registrations(user_id, work_date, shift, start_time, end_time, off_type, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (user_id, work_date, kind, start_time, end_time, off_type, status.value),
            )
            return int(cur.lastrowid)

    def update_status(
        self,
        *,
        registration_id: int,
        status: RequestStatus,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shift_registrations
                SET status=%s, rejection_reason=%s
                WHERE registration_id=%s
                """,
                (status.value, rejection_reason, int(registration_id)),
            )
            return cur.rowcount > 0
