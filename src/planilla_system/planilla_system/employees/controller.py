from __future__ import annotations

from flask import Flask, request

from ..common.auth import ADMIN_OR_SCANNER, login_required, roles_required
from ..common.http import json_body, ok
from ..common.validators import require_int
from ..container import Container
from ..core.enums import Role


def _employee_fields(body: dict) -> dict:
    return {
        "national_id": str(body.get("dni") or body.get("national_id") or "").strip(),
        "name": str(body.get("name") or "").strip(),
        "employee_type": body.get("type") or body.get("employee_type"),
        "monthly_salary": body.get("monthly_salary"),
    }


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def list_employees():
        return ok([employees.to_dict(e) for e in employees.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @roles_required(*ADMIN_OR_SCANNER)
    def create_employee():
        employee_id = employees.register_employee(**_employee_fields(json_body()))
        return ok({"id": employee_id}, status=201, message="Empleado registrado exitosamente")

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @login_required
    def get_employee(employee_id: int):
        return ok(employees.to_dict(employees.get_employee(employee_id)))

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @roles_required(*ADMIN_OR_SCANNER)
    def update_employee(employee_id: int):
        employee = employees.update_employee(employee_id, **_employee_fields(json_body()))
        return ok(employees.to_dict(employee), message="Empleado actualizado exitosamente")

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @roles_required(*ADMIN_OR_SCANNER)
    def delete_employee(employee_id: int):
        employees.remove_employee(employee_id)
        return ok(message="Empleado eliminado exitosamente")

    @app.route("/api/employees/<int:employee_id>/stats", methods=["GET"], endpoint="employees_stats")
    @roles_required(Role.SUPER_ADMIN)
    def employee_stats(employee_id: int):
        today = container.attendance_service.today()
        year = require_int(request.args.get("year") or today.year, "year")
        month = require_int(request.args.get("month") or today.month, "month")
        return ok(container.payroll_report_service.employee_stats(employee_id, year=year, month=month))
