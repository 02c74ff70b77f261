from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def save(self, record: AttendanceRecord) -> int:
        """Persist a record and return its id."""

        raise NotImplementedError

    def list_for_user(self, user_id: int, *, start_ms: int, end_ms: int) -> Sequence[AttendanceRecord]:
        """Records with start_ms <= timestamp <= end_ms, newest first."""

        raise NotImplementedError

    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
