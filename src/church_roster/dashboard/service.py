from __future__ import annotations

from typing import Optional

from ..insight.service import InsightService
from ..state import AppState
from .stats import DashboardStats, compute_dashboard_stats


class DashboardService:
    def __init__(self, state: AppState, insight: InsightService, *, window: int):
        self._state = state
        self._insight = insight
        self._window = int(window)

    def stats(self, *, window: Optional[int] = None) -> DashboardStats:
        students, history = self._state.snapshot()
        return compute_dashboard_stats(students, history, window=window or self._window)

    def insight(self, *, window: Optional[int] = None) -> str:
        return self._insight.dashboard_insight(self.stats(window=window))
