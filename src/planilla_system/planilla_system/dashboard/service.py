from __future__ import annotations

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_timestamp
from ..core.constants import DASHBOARD_WINDOW_DAYS, RECENT_ACTIVITY_LIMIT
from ..core.enums import AttendanceState
from ..employees.repository import EmployeeRepository


class DashboardService:
    """Headline counters for the landing screen."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def stats(self, *, today: date) -> dict:
        today_rows = self._attendance.get_report_rows(start_date=today, end_date=today)
        window_rows = self._attendance.get_report_rows(
            start_date=today - timedelta(days=DASHBOARD_WINDOW_DAYS),
            end_date=today,
        )

        seconds = sum(
            (r.exit_time - r.entry_time).total_seconds()
            for r in window_rows
            if r.exit_time is not None
        )
        weekly_hours = Decimal(str(seconds / 3600)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

        recent = sorted(today_rows, key=lambda r: r.entry_time, reverse=True)[:RECENT_ACTIVITY_LIMIT]

        return {
            "totalEmployees": self._employees.count_active(),
            "todayAttendance": len(today_rows),
            "pendingExits": sum(1 for r in today_rows if r.state == AttendanceState.ACTIVE),
            "weeklyHours": float(weekly_hours),
            "weeklyEmployees": len({r.employee_id for r in window_rows}),
            "recentActivity": [
                {
                    "employee_name": r.employee_name,
                    "date": r.work_date.isoformat(),
                    "entry_time": format_timestamp(r.entry_time),
                    "exit_time": format_timestamp(r.exit_time),
                    "action_type": "Entrada" if r.state == AttendanceState.ACTIVE else "Salida",
                }
                for r in recent
            ],
        }
