from datetime import timedelta

from src.planilla_system.planilla_system.dashboard.service import DashboardService


def test_stats_counts_today_and_window(attendance_repo, employee_repo, monday):
    employee_repo.add(1, "Ana", "Al Día", "9000")
    employee_repo.add(2, "Beto", "Producción")
    employee_repo.add(3, "Ciro", "Producción", is_active=False)
    attendance_repo.add_record(1, monday - timedelta(days=2), entry_at=(8, 0), exit_at=(16, 30))
    attendance_repo.add_record(1, monday, entry_at=(7, 0), exit_at=(15, 0))
    attendance_repo.add_record(2, monday, entry_at=(8, 0), exit_at=None)

    stats = DashboardService(attendance_repo, employee_repo).stats(today=monday)

    assert stats["totalEmployees"] == 2
    assert stats["todayAttendance"] == 2
    assert stats["pendingExits"] == 1
    assert stats["weeklyHours"] == 16.5
    assert stats["weeklyEmployees"] == 2
    assert [a["action_type"] for a in stats["recentActivity"]] == ["Entrada", "Salida"]
