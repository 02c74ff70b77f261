from __future__ import annotations

from enum import Enum


class AttendanceType(str, Enum):
    """Loại sự kiện chấm công."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công chuẩn hoá lưu trong CSDL."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    OVERTIME = "OVERTIME"
    # Offline records waiting for sync; never produced by the classifier.
    PENDING = "PENDING"


class ShiftKind(str, Enum):
    """Loại ca đăng ký: CUSTOM (giờ vào tuỳ chọn, 9 tiếng) hoặc OFF."""

    CUSTOM = "CUSTOM"
    OFF = "OFF"


class RequestStatus(str, Enum):
    """Trạng thái luồng duyệt yêu cầu (đăng ký ca)."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class OffType(str, Enum):
    """Loại ngày nghỉ của ca OFF."""

    OFF_DK = "OFF_DK"  # Định kỳ, không lương
    OFF_PN = "OFF_PN"  # Phép năm, có lương
    OFF_KL = "OFF_KL"  # Không lương
    CT = "CT"  # Công tác, có lương
    LE = "LE"  # Nghỉ lễ, có lương
