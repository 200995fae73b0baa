from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from ..attendance.model import DailyAttendance
from ..attendance.reconcile import sorted_days
from ..core.constants import ALLOWED_TREND_WINDOWS, DEFAULT_TREND_WINDOW
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import Student


@dataclass(frozen=True)
class TrendPoint:
    date: str  # MM-DD
    rate: float
    count: int

    def to_dict(self) -> dict:
        return {"date": self.date, "rate": self.rate, "count": self.count}


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    attendance_rate: float
    recent_trend: List[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "attendanceRate": self.attendance_rate,
            "recentTrend": [p.to_dict() for p in self.recent_trend],
        }


def compute_dashboard_stats(
    students: Sequence[Student],
    history: Mapping[str, DailyAttendance],
    *,
    window: int = DEFAULT_TREND_WINDOW,
) -> DashboardStats:
    """Roster size, latest PRESENT rate and the trailing-window trend.

    Every rate is taken against the current roster size, not the number of
    students recorded on that date, so students added later lower the rates
    of older dates.
    """
    if window not in ALLOWED_TREND_WINDOWS:
        raise ValidationError(f"trend window must be one of {ALLOWED_TREND_WINDOWS}")

    total = len(students)
    if total == 0:
        return DashboardStats(total_students=0, attendance_rate=0, recent_trend=[])

    recent = sorted_days(history)[-window:]

    trend = []
    for day in recent:
        present = day.count(AttendanceStatus.PRESENT)
        trend.append(TrendPoint(date=day.date[-5:], rate=present / total * 100, count=present))

    current_rate = trend[-1].rate if trend else 0
    return DashboardStats(total_students=total, attendance_rate=current_rate, recent_trend=trend)


def trend_delta(stats: DashboardStats) -> Optional[float]:
    """Change between the last two trend points, in percentage points."""
    if len(stats.recent_trend) < 2:
        return None
    return stats.recent_trend[-1].rate - stats.recent_trend[-2].rate
