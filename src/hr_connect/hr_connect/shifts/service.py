from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike
from ..common.validators import require_hhmm
from ..core.enums import OffType, RequestStatus, ShiftKind
from ..core.exceptions import ValidationError
from .model import ExpectedWindow, ShiftRegistration
from .repository import ShiftRegistrationRepository
from .resolver import expected_window, resolve_shift, shift_end_time

logger = logging.getLogger(__name__)


class ShiftRegistrationService:
    """Use case: employees register shifts, managers approve/reject them.

    Time strings are validated here, at registration time, so the classifier
    only ever sees well-formed "HH:MM" values.
    """

    def __init__(self, registrations: ShiftRegistrationRepository):
        self._registrations = registrations

    def register(
        self,
        *,
        user_id: int,
        work_date: date,
        kind: str,
        start_time: Optional[str] = None,
        off_type: Optional[str] = None,
    ) -> int:
        if int(user_id) <= 0:
            raise ValidationError("Nhân viên không hợp lệ")

        try:
            shift_kind = ShiftKind(kind)
        except ValueError:
            raise ValidationError(f"Loại ca không hợp lệ: {kind}") from None

        end_time = None
        off_kind = None
        if shift_kind == ShiftKind.CUSTOM:
            if not start_time:
                raise ValidationError("Ca CUSTOM cần giờ vào")
            if off_type:
                raise ValidationError("Ca CUSTOM không có loại nghỉ")
            start_time = require_hhmm(start_time, "Giờ vào")
            end_time = shift_end_time(start_time)
        else:
            if start_time:
                raise ValidationError("Ca OFF không có giờ vào")
            if not off_type:
                raise ValidationError("Ca OFF cần loại nghỉ")
            try:
                off_kind = OffType(off_type)
            except ValueError:
                raise ValidationError(f"Loại nghỉ không hợp lệ: {off_type}") from None

        registration_id = self._registrations.create(
            user_id=int(user_id),
            work_date=work_date,
            kind=shift_kind.value,
            start_time=start_time,
            end_time=end_time,
            status=RequestStatus.PENDING,
            off_type=off_kind.value if off_kind else None,
        )
        logger.info(
            "Shift registered id=%s user_id=%s date=%s kind=%s start=%s off_type=%s",
            registration_id, user_id, work_date, shift_kind.value, start_time, off_kind and off_kind.value,
        )
        return registration_id

    def approve(self, *, registration_id: int) -> None:
        self._set_status(registration_id, RequestStatus.APPROVED)

    def reject(self, *, registration_id: int, reason: Optional[str] = None) -> None:
        reason = reason.strip() if reason else None
        self._set_status(registration_id, RequestStatus.REJECTED, reason)

    def _set_status(self, registration_id: int, status: RequestStatus, reason: Optional[str] = None) -> None:
        registration = self._registrations.get_by_id(int(registration_id))
        if not registration:
            raise ValidationError("Đăng ký ca không tồn tại")
        if registration.status != RequestStatus.PENDING:
            raise ValidationError("Đăng ký ca đã được xử lý")

        if not self._registrations.update_status(
            registration_id=int(registration_id), status=status, rejection_reason=reason
        ):
            raise ValidationError("Cập nhật đăng ký ca thất bại")
        logger.info("Shift registration %s -> %s", registration_id, status.value)

    def shift_for_date(self, *, user_id: int, on_date: DateLike) -> Optional[ShiftRegistration]:
        return resolve_shift(self._registrations.list_for_user(user_id), on_date)

    def expected_window_for_date(self, *, user_id: int, on_date: DateLike) -> Optional[ExpectedWindow]:
        return expected_window(self.shift_for_date(user_id=user_id, on_date=on_date))
