from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.planilla_system.planilla_system.attendance.service import AttendanceService
from src.planilla_system.planilla_system.core.exceptions import NotFoundError, ValidationError
from src.planilla_system.planilla_system.employees.service import EmployeeService
from src.planilla_system.planilla_system.payroll.service import PayrollReportService

# 2/3/10 pieces as stored when the record was closed.
CLOSED_PRODUCTION_DAY = dict(
    despalillo=2,
    escogida=3,
    monado=10,
    t_despalillo=160,
    t_escogida=210,
    t_monado=10,
    prop_sabado="34.54542",
    septimo_dia="69.09084",
)


@pytest.fixture
def svc(attendance_repo, employee_repo):
    return PayrollReportService(attendance_repo, employee_repo)


def test_weekly_applies_seventh_day_after_summing(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    for i in range(5):
        attendance_repo.add_record(1, monday + timedelta(days=i), hours_extra=0)

    report = svc.weekly_report(start=monday, end=monday + timedelta(days=6))

    # each single day is below the threshold, the week is not
    assert svc.daily_report(day=monday)[0]["septimo_dia"] == 0.0
    row = report.al_dia[0]
    assert row["dias_trabajados"] == 5
    assert row["septimo_dia"] == 300.0
    assert row["neto_pagar"] == 1800.0


def test_weekly_partitions_and_summary(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    employee_repo.add(2, "Beto", "Producción")
    for i in range(6):
        attendance_repo.add_record(1, monday + timedelta(days=i), hours_extra=1 if i < 4 else 0)
    attendance_repo.add_record(2, monday, **CLOSED_PRODUCTION_DAY)

    report = svc.weekly_report(start=monday, end=monday + timedelta(days=6)).as_dict()

    assert [r["employee_name"] for r in report["production"]] == ["Beto"]
    assert [r["employee_name"] for r in report["alDia"]] == ["Ana"]
    assert report["alDia"][0]["horas_extra"] == 4.0
    assert report["production"][0]["neto_pagar"] == 483.64

    summary = report["summary"]
    assert summary["total_employees"] == 2
    assert summary["total_production_employees"] == 1
    assert summary["total_aldia_employees"] == 1
    assert summary["total_aldia_payroll"] == 2287.5
    assert summary["total_payroll"] == 2771.14


def test_weekly_skips_unknown_type(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(3, "Carla", "Temporal")
    attendance_repo.type_labels[3] = "Temporal"
    attendance_repo.add_record(3, monday)

    report = svc.weekly_report(start=monday, end=monday)

    assert report.production == [] and report.al_dia == []
    assert report.summary["total_employees"] == 0
    assert report.summary["total_payroll"] == 0.0


def test_weekly_rejects_inverted_range(svc, monday):
    with pytest.raises(ValidationError):
        svc.weekly_report(start=monday, end=monday - timedelta(days=1))


def test_daily_report_passes_unknown_type_through(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(3, "Carla", "Temporal")
    attendance_repo.type_labels[3] = "Temporal"
    attendance_repo.add_record(3, monday)

    rows = svc.daily_report(day=monday)

    assert rows[0]["employee_type"] == "Temporal"
    assert "neto_pagar" not in rows[0]


def test_daily_report_counts_open_records(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(2, "Beto", "Producción")
    attendance_repo.add_record(2, monday, exit_at=None)

    rows = svc.daily_report(day=monday)

    assert rows[0]["status"] == "active"
    assert rows[0]["exit_time"] is None
    assert rows[0]["neto_pagar"] == 0.0


def test_monthly_report_is_raw_rows_for_the_calendar_month(svc, attendance_repo, employee_repo):
    employee_repo.add(2, "Beto", "Producción")
    attendance_repo.add_record(2, date(2024, 2, 29), despalillo=1)
    attendance_repo.add_record(2, date(2024, 3, 1), despalillo=1)

    rows = svc.monthly_report(year=2024, month=2)

    assert [r["date"] for r in rows] == ["2024-02-29"]
    assert "neto_pagar" not in rows[0]
    assert rows[0]["despalillo"] == 1.0


def test_monthly_report_rejects_bad_month(svc):
    with pytest.raises(ValidationError):
        svc.monthly_report(year=2024, month=13)


def test_employee_stats_counts_completed_records_only(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    for i in range(4):
        attendance_repo.add_record(1, monday + timedelta(days=i))
    attendance_repo.add_record(1, monday + timedelta(days=4), exit_at=None)

    stats = svc.employee_stats(1, year=monday.year, month=monday.month)

    assert stats["dias_trabajados"] == 4
    assert stats["septimo_dia"] == 0.0
    assert stats["neto_pagar"] == 1200.0


def test_employee_stats_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.employee_stats(99, year=2025, month=3)


@pytest.fixture
def clock(attendance_repo, employee_repo):
    return AttendanceService(attendance_repo, employee_repo)


def _work_day(clock, employee_id, day, **amounts):
    start = datetime.combine(day, time(7, 30))
    clock.record_entry(employee_id, now=start)
    clock.record_exit(employee_id, now=start + timedelta(hours=8), **amounts)


def _change_type(employee_repo, employee_id, employee_type, monthly_salary="0"):
    current = employee_repo.get_by_id(employee_id)
    EmployeeService(employee_repo).update_employee(
        employee_id,
        national_id=current.national_id,
        name=current.name,
        employee_type=employee_type,
        monthly_salary=monthly_salary,
    )


def test_type_change_keeps_production_pay_of_closed_days(svc, clock, employee_repo, monday):
    employee_repo.add(2, "Beto", "Producción")
    _work_day(clock, 2, monday, despalillo=2, escogida=3, monado=10)

    _change_type(employee_repo, 2, "Al Día", "9000")

    row = svc.daily_report(day=monday)[0]
    assert row["employee_type"] == "Producción"
    assert row["t_despalillo"] == 160.0
    assert row["neto_pagar"] == 483.64
    weekly = svc.weekly_report(start=monday, end=monday + timedelta(days=6))
    assert [r["neto_pagar"] for r in weekly.production] == [483.64]
    assert weekly.al_dia == []


def test_type_change_keeps_daily_rate_salary_of_closed_days(svc, clock, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    _work_day(clock, 1, monday, hours_extra=2)

    # Production employees carry no salary, so the update zeroes it.
    _change_type(employee_repo, 1, "Producción")
    assert employee_repo.get_by_id(1).monthly_salary == 0

    row = svc.daily_report(day=monday)[0]
    assert row["employee_type"] == "Al Día"
    assert row["monthly_salary"] == 9000.0
    assert row["salario_diario"] == 300.0
    assert row["neto_pagar"] == 393.75


def test_weekly_lists_an_employee_once_per_paid_type(svc, clock, employee_repo, monday):
    employee_repo.add(2, "Beto", "Producción")
    _work_day(clock, 2, monday, despalillo=2, escogida=3, monado=10)
    _change_type(employee_repo, 2, "Al Día", "9000")
    _work_day(clock, 2, monday + timedelta(days=1), hours_extra=0)

    report = svc.weekly_report(start=monday, end=monday + timedelta(days=6))

    assert [(r["employee_name"], r["neto_pagar"]) for r in report.production] == [("Beto", 483.64)]
    assert [(r["employee_name"], r["neto_pagar"]) for r in report.al_dia] == [("Beto", 300.0)]
    assert report.summary["total_employees"] == 2
    assert report.summary["total_payroll"] == 783.64


def test_employee_stats_reports_days_under_a_previous_type(svc, clock, employee_repo, monday):
    employee_repo.add(2, "Beto", "Producción")
    _work_day(clock, 2, monday, despalillo=2, escogida=3, monado=10)
    _change_type(employee_repo, 2, "Al Día", "9000")
    _work_day(clock, 2, monday + timedelta(days=1), hours_extra=0)

    stats = svc.employee_stats(2, year=monday.year, month=monday.month)

    assert stats["type"] == "Al Día"
    assert stats["dias_trabajados"] == 1
    assert stats["neto_pagar"] == 300.0
    assert len(stats["previous_types"]) == 1
    assert stats["previous_types"][0]["type"] == "Producción"
    assert stats["previous_types"][0]["neto_pagar"] == 483.64


def test_daily_rows_carry_one_key_per_field(svc, attendance_repo, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    employee_repo.add(2, "Beto", "Producción")
    attendance_repo.add_record(1, monday, hours_extra=2)
    attendance_repo.add_record(2, monday, **CLOSED_PRODUCTION_DAY)

    al_dia, production = svc.daily_report(day=monday)

    assert al_dia["horas_extra"] == 2.0
    assert "hours_extra" not in al_dia
    assert "despalillo" not in al_dia and "t_despalillo" not in al_dia
    assert "hours_extra" not in production and "horas_extra" not in production
    assert production["total_produccion"] == 380.0


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_month_reports_reject_out_of_range_year(svc, employee_repo, year):
    employee_repo.add(1, "Ana", "Al Día", "9000")

    with pytest.raises(ValidationError, match="año"):
        svc.monthly_report(year=year, month=1)
    with pytest.raises(ValidationError, match="año"):
        svc.employee_stats(1, year=year, month=1)
