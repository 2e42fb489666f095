from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..common.numbers import to_decimal
from ..core.enums import EmployeeType
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..payroll.calculator.base import DerivedFields
from .model import AttendanceRecord, AttendanceReportRow, ExitInputs
from .repository import AttendanceRepository

_RECORD_COLUMNS = """
    a.attendance_id, a.employee_id, a.work_date, a.entry_time, a.exit_time,
    a.hours_extra, a.despalillo, a.escogida, a.monado,
    a.t_despalillo, a.t_escogida, a.t_monado, a.prop_sabado, a.septimo_dia
"""

_AMOUNT_FIELDS = (
    "hours_extra",
    "despalillo",
    "escogida",
    "monado",
    "t_despalillo",
    "t_escogida",
    "t_monado",
    "prop_sabado",
    "septimo_dia",
)


def _amounts(r: dict[str, Any]) -> dict[str, Any]:
    return {name: to_decimal(r.get(name)) for name in _AMOUNT_FIELDS}


def _to_record(r: dict[str, Any]) -> AttendanceRecord:
    label = r.get("employee_type")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        entry_time=r["entry_time"],
        exit_time=r.get("exit_time"),
        employee_type=EmployeeType.from_label(label) if label else None,
        monthly_salary=to_decimal(r["monthly_salary"]) if r.get("monthly_salary") is not None else None,
        **_amounts(r),
    )


def _to_report_row(r: dict[str, Any]) -> AttendanceReportRow:
    label = r.get("employee_type") or ""
    return AttendanceReportRow(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        national_id=r.get("national_id") or "",
        employee_type=EmployeeType.from_label(label),
        type_label=label,
        monthly_salary=to_decimal(r.get("monthly_salary")),
        work_date=r["work_date"],
        entry_time=r["entry_time"],
        exit_time=r.get("exit_time"),
        **_amounts(r),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}, a.employee_type, a.monthly_salary
                FROM attendance a
                WHERE a.employee_id=%s AND a.work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        entry_time: datetime,
        employee_type: EmployeeType,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(employee_id, work_date, entry_time, employee_type)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, entry_time, employee_type.value),
                )
                return int(cur.lastrowid)
        except mysql_errors.IntegrityError:
            # uq_attendance_employee_date: a concurrent entry won the race.
            raise ConflictError("Ya existe un registro de asistencia para hoy.")

    def update_exit(
        self,
        *,
        attendance_id: int,
        exit_time: datetime,
        inputs: ExitInputs,
        derived: DerivedFields,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET exit_time=%s, employee_type=%s, monthly_salary=%s,
                    hours_extra=%s, despalillo=%s, escogida=%s, monado=%s,
                    t_despalillo=%s, t_escogida=%s, t_monado=%s,
                    prop_sabado=%s, septimo_dia=%s
                WHERE attendance_id=%s AND exit_time IS NULL
                """,
                (
                    exit_time,
                    inputs.employee_type.value,
                    inputs.monthly_salary,
                    inputs.hours_extra,
                    inputs.despalillo,
                    inputs.escogida,
                    inputs.monado,
                    derived.t_despalillo,
                    derived.t_escogida,
                    derived.t_monado,
                    derived.prop_sabado,
                    derived.septimo_dia,
                    int(attendance_id),
                ),
            )
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
        completed_only: bool = False,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["a.work_date BETWEEN %s AND %s", "e.is_active = 1"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("a.employee_id=%s")
            params.append(int(employee_id))
        if completed_only:
            clauses.append("a.exit_time IS NOT NULL")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    {_RECORD_COLUMNS},
                    e.name AS employee_name,
                    e.national_id,
                    COALESCE(a.employee_type, e.employee_type) AS employee_type,
                    COALESCE(a.monthly_salary, e.monthly_salary) AS monthly_salary
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                WHERE {where}
                ORDER BY e.name ASC, a.work_date ASC, a.entry_time ASC
                """,
                tuple(params),
            )
            return [_to_report_row(r) for r in fetchall(cur)]
