from __future__ import annotations

from flask import Flask

from ..common.auth import login_required
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    def stats():
        today = container.attendance_service.today()
        return ok(container.dashboard_service.stats(today=today))
