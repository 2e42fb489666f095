from __future__ import annotations

from flask import Flask, request

from ..common.auth import roles_required
from ..common.datetime_utils import require_iso_date
from ..common.http import ok
from ..common.validators import require_int
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    reports = container.payroll_report_service

    @app.route("/api/reports/daily", methods=["GET"], endpoint="reports_daily")
    @roles_required(Role.SUPER_ADMIN)
    def daily_report():
        day = require_iso_date(request.args.get("date"), "date")
        return ok(reports.daily_report(day=day))

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="reports_weekly")
    @roles_required(Role.SUPER_ADMIN)
    def weekly_report():
        start = require_iso_date(request.args.get("start"), "start")
        end = require_iso_date(request.args.get("end"), "end")
        return ok(reports.weekly_report(start=start, end=end).as_dict())

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="reports_monthly")
    @roles_required(Role.SUPER_ADMIN)
    def monthly_report():
        year = require_int(request.args.get("year"), "year")
        month = require_int(request.args.get("month"), "month")
        return ok(reports.monthly_report(year=year, month=month))
