from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.enums import AttendanceStatus, AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..geo.distance import GeoPoint
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, user_id, timestamp, type, latitude, longitude, status,
    photo_ref, note, distance_meters, within_range, synced
"""


def _to_model(r: Dict[str, Any]) -> AttendanceRecord:
    distance = r.get("distance_meters")
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        user_id=int(r["user_id"]),
        timestamp=int(r["timestamp"]),
        type=AttendanceType(r["type"]),
        location=GeoPoint(lat=float(r["latitude"]), lng=float(r["longitude"])),
        status=AttendanceStatus(r["status"]),
        photo_ref=r.get("photo_ref"),
        note=r.get("note"),
        distance_meters=float(distance) if distance is not None else None,
        within_range=bool(r.get("within_range")),
        synced=bool(r.get("synced", 1)),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save(self, record: AttendanceRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    user_id, timestamp, type, latitude, longitude, status,
                    photo_ref, note, distance_meters, within_range, synced
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.user_id,
                    record.timestamp,
                    record.type.value,
                    record.location.lat,
                    record.location.lng,
                    record.status.value,
                    record.photo_ref,
                    record.note,
                    record.distance_meters,
                    int(record.within_range),
                    int(record.synced),
                ),
            )
            return int(cur.lastrowid)

    def list_for_user(self, user_id: int, *, start_ms: int, end_ms: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s AND timestamp BETWEEN %s AND %s
                ORDER BY timestamp DESC
                """,
                (user_id, int(start_ms), int(end_ms)),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s
                ORDER BY timestamp DESC
                LIMIT %s
                """,
                (user_id, int(limit)),
            )
            return [_to_model(r) for r in fetchall(cur)]
