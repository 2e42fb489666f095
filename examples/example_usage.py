"""Example: call the service layer directly (no Flask).

Controllers are thin; the payroll rules live in the services.
"""

import importlib
from datetime import timedelta

from config import get_settings_module

from src.planilla_system.planilla_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    end = container.attendance_service.today()
    report = container.payroll_report_service.weekly_report(start=end - timedelta(days=6), end=end)
    print(report.summary)


if __name__ == "__main__":
    main()
