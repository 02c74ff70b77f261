from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollService
from .shifts.mysql_shift_repository import MySQLShiftRegistrationRepository
from .shifts.repository import ShiftRegistrationRepository
from .shifts.service import ShiftRegistrationService
from .system_config.mysql_system_config_repository import MySQLSystemConfigRepository
from .system_config.service import SystemConfigService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    registrations_repo: ShiftRegistrationRepository

    config_service: SystemConfigService
    shift_service: ShiftRegistrationService
    attendance_service: AttendanceService
    payroll_service: PayrollService


def wire(
    *,
    attendance_repo: AttendanceRepository,
    registrations_repo: ShiftRegistrationRepository,
    config_service: SystemConfigService,
) -> Container:
    return Container(
        attendance_repo=attendance_repo,
        registrations_repo=registrations_repo,
        config_service=config_service,
        shift_service=ShiftRegistrationService(registrations_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            registrations_repo,
            config_service,
            strategy_factory=AttendanceStrategyFactory(),
        ),
        payroll_service=PayrollService(attendance_repo, config_service),
    )


def build_container(*, db_config: dict, system_config_source: str = "database") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    if system_config_source == "database":
        config_service = SystemConfigService(MySQLSystemConfigRepository(conn))
    else:
        config_service = SystemConfigService()

    return wire(
        attendance_repo=MySQLAttendanceRepository(conn),
        registrations_repo=MySQLShiftRegistrationRepository(conn),
        config_service=config_service,
    )
