from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import from_epoch_ms
from ..core.enums import AttendanceStatus, AttendanceType
from ..geo.distance import GeoPoint


@dataclass(frozen=True)
class AttendanceEvent:
    """Sự kiện chấm công vào/ra do thiết bị gửi lên."""

    user_id: int
    timestamp: int  # epoch ms
    type: AttendanceType
    location: GeoPoint
    photo_ref: Optional[str] = None

    @property
    def local_time(self) -> datetime:
        return from_epoch_ms(self.timestamp)


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công kèm trạng thái đã phân loại."""

    user_id: int
    timestamp: int
    type: AttendanceType
    location: GeoPoint
    status: AttendanceStatus
    photo_ref: Optional[str] = None
    note: Optional[str] = None
    distance_meters: Optional[float] = None
    within_range: bool = False
    synced: bool = True
    record_id: Optional[int] = None

    @property
    def local_time(self) -> datetime:
        return from_epoch_ms(self.timestamp)
