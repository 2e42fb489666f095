from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.planilla_system.planilla_system.attendance.model import AttendanceRecord, AttendanceReportRow
from src.planilla_system.planilla_system.core.enums import EmployeeType
from src.planilla_system.planilla_system.core.exceptions import ConflictError
from src.planilla_system.planilla_system.employees.model import Employee
from src.planilla_system.planilla_system.users.model import User


class FakeEmployeeRepo:
    def __init__(self, employees=()):
        self.rows: dict[int, Employee] = {e.employee_id: e for e in employees}

    def add(self, employee_id, name, employee_type, monthly_salary="0", *, national_id=None, is_active=True):
        employee = Employee(
            employee_id=employee_id,
            national_id=national_id or f"{employee_id:013d}",
            name=name,
            employee_type=EmployeeType.from_label(employee_type),
            monthly_salary=Decimal(monthly_salary),
            is_active=is_active,
        )
        self.rows[employee_id] = employee
        return employee

    def get_by_id(self, employee_id):
        return self.rows.get(employee_id)

    def get_active_by_national_id(self, national_id):
        for e in self.rows.values():
            if e.is_active and e.national_id == national_id:
                return e
        return None

    def list_active(self):
        return sorted((e for e in self.rows.values() if e.is_active), key=lambda e: e.employee_id, reverse=True)

    def count_active(self):
        return len(self.list_active())

    def create_employee(self, *, national_id, name, employee_type, monthly_salary):
        employee_id = max(self.rows, default=0) + 1
        self.rows[employee_id] = Employee(employee_id, national_id, name, employee_type, monthly_salary)
        return employee_id

    def update_employee(self, *, employee_id, national_id, name, employee_type, monthly_salary):
        if employee_id not in self.rows:
            return False
        self.rows[employee_id] = replace(
            self.rows[employee_id],
            national_id=national_id,
            name=name,
            employee_type=employee_type,
            monthly_salary=monthly_salary,
        )
        return True

    def set_active(self, employee_id, *, is_active):
        if employee_id not in self.rows:
            return False
        self.rows[employee_id] = replace(self.rows[employee_id], is_active=is_active)
        return True


class FakeAttendanceRepo:
    """Keeps records in memory and joins them with a FakeEmployeeRepo for reports."""

    def __init__(self, employees: FakeEmployeeRepo):
        self.employees = employees
        self.records: dict[int, AttendanceRecord] = {}
        self.type_labels: dict[int, str] = {}

    def add_record(
        self,
        employee_id,
        work_date,
        *,
        entry_at=(8, 0),
        exit_at=(16, 0),
        employee_type=None,
        monthly_salary=None,
        **amounts,
    ):
        attendance_id = len(self.records) + 1
        exit_time = datetime.combine(work_date, datetime.min.time()).replace(hour=exit_at[0], minute=exit_at[1]) if exit_at else None
        self.records[attendance_id] = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            work_date=work_date,
            entry_time=datetime.combine(work_date, datetime.min.time()).replace(hour=entry_at[0], minute=entry_at[1]),
            exit_time=exit_time,
            employee_type=EmployeeType.from_label(employee_type) if employee_type else None,
            monthly_salary=Decimal(monthly_salary) if monthly_salary is not None else None,
            **{k: Decimal(str(v)) for k, v in amounts.items()},
        )
        return attendance_id

    def get_for_employee_and_date(self, employee_id, work_date):
        for r in self.records.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create_entry(self, *, employee_id, work_date, entry_time, employee_type):
        if self.get_for_employee_and_date(employee_id, work_date):
            raise ConflictError("Ya existe un registro de asistencia para hoy.")
        attendance_id = len(self.records) + 1
        self.records[attendance_id] = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            work_date=work_date,
            entry_time=entry_time,
            employee_type=employee_type,
        )
        return attendance_id

    def update_exit(self, *, attendance_id, exit_time, inputs, derived):
        current = self.records.get(attendance_id)
        if current is None or current.exit_time is not None:
            return False
        self.records[attendance_id] = replace(
            current,
            exit_time=exit_time,
            employee_type=inputs.employee_type,
            monthly_salary=inputs.monthly_salary,
            hours_extra=inputs.hours_extra,
            despalillo=inputs.despalillo,
            escogida=inputs.escogida,
            monado=inputs.monado,
            t_despalillo=derived.t_despalillo,
            t_escogida=derived.t_escogida,
            t_monado=derived.t_monado,
            prop_sabado=derived.prop_sabado,
            septimo_dia=derived.septimo_dia,
        )
        return True

    def get_report_rows(self, *, start_date, end_date, employee_id=None, completed_only=False):
        out = []
        for r in self.records.values():
            employee = self.employees.get_by_id(r.employee_id)
            if not employee or not employee.is_active:
                continue
            if not start_date <= r.work_date <= end_date:
                continue
            if employee_id is not None and r.employee_id != employee_id:
                continue
            if completed_only and r.exit_time is None:
                continue
            employee_type = r.employee_type or employee.employee_type
            out.append(
                AttendanceReportRow(
                    attendance_id=r.attendance_id,
                    employee_id=r.employee_id,
                    employee_name=employee.name,
                    national_id=employee.national_id,
                    employee_type=employee_type,
                    type_label=self.type_labels.get(employee.employee_id, employee_type.value),
                    monthly_salary=employee.monthly_salary if r.monthly_salary is None else r.monthly_salary,
                    work_date=r.work_date,
                    entry_time=r.entry_time,
                    exit_time=r.exit_time,
                    hours_extra=r.hours_extra,
                    despalillo=r.despalillo,
                    escogida=r.escogida,
                    monado=r.monado,
                    t_despalillo=r.t_despalillo,
                    t_escogida=r.t_escogida,
                    t_monado=r.t_monado,
                    prop_sabado=r.prop_sabado,
                    septimo_dia=r.septimo_dia,
                )
            )
        return sorted(out, key=lambda row: (row.employee_name, row.work_date, row.entry_time))


class FakeUserRepo:
    def __init__(self):
        self.rows: dict[int, User] = {}

    def add(self, user_id, username, password_hash, role, *, is_active=True):
        self.rows[user_id] = User(user_id, username, password_hash, role, is_active)
        return self.rows[user_id]

    def get_by_id(self, user_id):
        u = self.rows.get(user_id)
        return u if u and u.is_active else None

    def get_by_username(self, username):
        for u in self.rows.values():
            if u.is_active and u.username == username:
                return u
        return None

    def list_active(self):
        return [u for u in self.rows.values() if u.is_active]

    def create_user(self, *, username, password_hash, role):
        user_id = max(self.rows, default=0) + 1
        self.rows[user_id] = User(user_id, username, password_hash, role)
        return user_id

    def update_user(self, *, user_id, username, role, password_hash=None):
        current = self.rows[user_id]
        self.rows[user_id] = replace(
            current,
            username=username,
            role=role,
            password_hash=password_hash or current.password_hash,
        )
        return True

    def set_active(self, user_id, *, is_active):
        if user_id not in self.rows:
            return False
        self.rows[user_id] = replace(self.rows[user_id], is_active=is_active)
        return True


@pytest.fixture
def employee_repo():
    return FakeEmployeeRepo()


@pytest.fixture
def attendance_repo(employee_repo):
    return FakeAttendanceRepo(employee_repo)


@pytest.fixture
def user_repo():
    return FakeUserRepo()


@pytest.fixture
def monday():
    # 2025-03-03 is a Monday
    return date(2025, 3, 3)


