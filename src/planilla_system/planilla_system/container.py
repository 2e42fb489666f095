from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import load_timezone
from .core.constants import DEFAULT_TIMEZONE
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .payroll.factory import PayrollCalculatorFactory
from .payroll.rates import PayrollRates
from .payroll.service import PayrollReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService
    dashboard_service: DashboardService

    conn: Optional[DatabaseConnection] = None


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    rates = PayrollRates.from_overrides(getattr(settings, "PAYROLL_RATES", None) or {})
    calculators = PayrollCalculatorFactory(rates=rates)
    timezone = load_timezone(getattr(settings, "ATTENDANCE_TIMEZONE", DEFAULT_TIMEZONE))

    users_repo = MySQLUserRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            employees_repo,
            calculators=calculators,
            timezone=timezone,
        ),
        payroll_report_service=PayrollReportService(
            attendance_repo,
            employees_repo,
            calculators=calculators,
        ),
        dashboard_service=DashboardService(attendance_repo, employees_repo),
    )
