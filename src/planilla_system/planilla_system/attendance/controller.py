from __future__ import annotations

from flask import Flask

from ..common.auth import ADMIN_OR_SCANNER, login_required, roles_required
from ..common.http import json_body, ok
from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/api/attendance/entry", methods=["POST"], endpoint="attendance_entry")
    @roles_required(*ADMIN_OR_SCANNER)
    def record_entry():
        body = json_body()
        employee_id = require_int(body.get("employee_id"), "employee_id")
        data = attendance.record_entry(employee_id)
        return ok(data, message=f"Entrada registrada para {data['employee_name']}")

    @app.route("/api/attendance/exit", methods=["POST"], endpoint="attendance_exit")
    @roles_required(*ADMIN_OR_SCANNER)
    def record_exit():
        body = json_body()
        employee_id = require_int(body.get("employee_id"), "employee_id")
        # Amounts are coerced leniently downstream; missing/garbage -> 0.
        data = attendance.record_exit(
            employee_id,
            hours_extra=body.get("hours_extra"),
            despalillo=body.get("despalillo"),
            escogida=body.get("escogida"),
            monado=body.get("monado"),
        )
        return ok(data, message=f"Salida registrada para {data['employee_name']}")

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def today_records():
        rows = attendance.today_records()
        return ok(rows, count=len(rows))
