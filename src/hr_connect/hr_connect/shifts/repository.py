from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import ShiftRegistration


class ShiftRegistrationRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[ShiftRegistration]:
        """All registrations of a user, in insertion order."""

        raise NotImplementedError

    def get_by_id(self, registration_id: int) -> Optional[ShiftRegistration]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_status(
        self,
        *,
        registration_id: int,
        status: RequestStatus,
        rejection_reason: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
