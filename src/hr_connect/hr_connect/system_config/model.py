from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.constants import (
    DEFAULT_OFFICE_LATITUDE,
    DEFAULT_OFFICE_LONGITUDE,
    DEFAULT_OFFICE_RADIUS_METERS,
    DEFAULT_OVERTIME_RATE,
    DEFAULT_SOCIAL_INSURANCE_RATE,
    DEFAULT_STANDARD_WORK_DAYS,
    DEFAULT_WORK_HOURS_PER_DAY,
)
from ..core.exceptions import ConfigurationError
from ..geo.distance import ReferenceLocation

# Keys of the key/value system configuration store.
OFFICE_LATITUDE = "office_latitude"
OFFICE_LONGITUDE = "office_longitude"
OFFICE_RADIUS_METERS = "office_radius_meters"
STANDARD_WORK_DAYS = "standard_work_days"
WORK_HOURS_PER_DAY = "work_hours_per_day"
OVERTIME_RATE = "overtime_rate"
SOCIAL_INSURANCE_RATE = "social_insurance_rate"


def _default_location() -> ReferenceLocation:
    return ReferenceLocation(
        lat=DEFAULT_OFFICE_LATITUDE,
        lng=DEFAULT_OFFICE_LONGITUDE,
        radius_meters=DEFAULT_OFFICE_RADIUS_METERS,
    )


@dataclass(frozen=True)
class SystemConfig:
    """Explicit configuration threaded through attendance and payroll calls."""

    reference_location: ReferenceLocation = field(default_factory=_default_location)
    standard_work_days: float = DEFAULT_STANDARD_WORK_DAYS
    work_hours_per_day: float = DEFAULT_WORK_HOURS_PER_DAY
    overtime_rate: float = DEFAULT_OVERTIME_RATE
    # Percent of total income, e.g. 10.5
    social_insurance_rate: float = DEFAULT_SOCIAL_INSURANCE_RATE

    @classmethod
    def from_key_values(cls, values: Mapping[str, Optional[str]]) -> "SystemConfig":
        """Build from store rows; missing or blank keys keep their defaults."""

        def number(key: str, default: float) -> float:
            raw = values.get(key)
            if raw is None or str(raw).strip() == "":
                return default
            try:
                return float(raw)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Cấu hình {key} không hợp lệ: {raw!r}") from None

        return cls(
            reference_location=ReferenceLocation(
                lat=number(OFFICE_LATITUDE, DEFAULT_OFFICE_LATITUDE),
                lng=number(OFFICE_LONGITUDE, DEFAULT_OFFICE_LONGITUDE),
                radius_meters=number(OFFICE_RADIUS_METERS, DEFAULT_OFFICE_RADIUS_METERS),
            ),
            standard_work_days=number(STANDARD_WORK_DAYS, DEFAULT_STANDARD_WORK_DAYS),
            work_hours_per_day=number(WORK_HOURS_PER_DAY, DEFAULT_WORK_HOURS_PER_DAY),
            overtime_rate=number(OVERTIME_RATE, DEFAULT_OVERTIME_RATE),
            social_insurance_rate=number(SOCIAL_INSURANCE_RATE, DEFAULT_SOCIAL_INSURANCE_RATE),
        )
