from __future__ import annotations

import pytest

from church_roster.attendance.model import AttendanceRecord, DailyAttendance
from church_roster.core.enums import AttendanceStatus
from church_roster.core.exceptions import ValidationError
from church_roster.dashboard.stats import compute_dashboard_stats, trend_delta
from church_roster.students.model import Student


def roster(n: int) -> list[Student]:
    return [Student(f"s{i}", f"학생{i}", "3학년", "다윗셀", "") for i in range(n)]


def day(date: str, present: int, absent: int = 0) -> DailyAttendance:
    records = [AttendanceRecord(f"s{i}", AttendanceStatus.PRESENT) for i in range(present)]
    records += [AttendanceRecord(f"s{present + i}", AttendanceStatus.ABSENT) for i in range(absent)]
    return DailyAttendance(date, tuple(records))


def history_of(*days: DailyAttendance) -> dict:
    return {d.date: d for d in days}


def test_empty_roster_reports_zeros():
    stats = compute_dashboard_stats([], history_of(day("2024-01-07", 3)))

    assert stats.to_dict() == {"totalStudents": 0, "attendanceRate": 0, "recentTrend": []}


def test_trend_over_three_sundays():
    history = history_of(day("2024-01-14", 8), day("2024-01-07", 5), day("2024-01-21", 10))

    stats = compute_dashboard_stats(roster(10), history)

    assert [(p.date, p.rate, p.count) for p in stats.recent_trend] == [
        ("01-07", 50.0, 5),
        ("01-14", 80.0, 8),
        ("01-21", 100.0, 10),
    ]
    assert stats.attendance_rate == 100.0
    assert stats.total_students == 10


def test_only_present_counts():
    stats = compute_dashboard_stats(roster(4), history_of(day("2024-01-07", 1, absent=3)))

    assert stats.attendance_rate == 25.0


def test_no_history_gives_zero_rate():
    stats = compute_dashboard_stats(roster(3), {})

    assert stats.attendance_rate == 0
    assert stats.recent_trend == []


@pytest.mark.parametrize("window,expected", [(5, 5), (4, 4)])
def test_window_keeps_latest_dates(window, expected):
    dates = ["2023-12-17", "2023-12-24", "2023-12-31", "2024-01-07", "2024-01-14", "2024-01-21"]
    history = history_of(*(day(d, 1) for d in dates))

    stats = compute_dashboard_stats(roster(2), history, window=window)

    assert len(stats.recent_trend) == expected
    assert stats.recent_trend[-1].date == "01-21"


def test_unsupported_window_is_rejected():
    with pytest.raises(ValidationError):
        compute_dashboard_stats(roster(2), {}, window=7)


def test_rates_use_current_roster_size():
    history = history_of(day("2024-01-07", 5))

    before = compute_dashboard_stats(roster(5), history)
    after = compute_dashboard_stats(roster(10), history)

    assert before.attendance_rate == 100.0
    assert after.attendance_rate == 50.0


def test_trend_delta():
    stats = compute_dashboard_stats(roster(10), history_of(day("2024-01-07", 5), day("2024-01-14", 8)))

    assert trend_delta(stats) == pytest.approx(30.0)
    assert trend_delta(compute_dashboard_stats(roster(10), history_of(day("2024-01-07", 5)))) is None
