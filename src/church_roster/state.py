from __future__ import annotations

import logging
import threading
from typing import List, Mapping, Optional, Sequence, Tuple

from .attendance.model import DailyAttendance
from .attendance.reconcile import History
from .core.enums import Theme
from .storage.adapter import StorageAdapter
from .students.model import Student

logger = logging.getLogger(__name__)


class AppState:
    """Process-wide working copy of roster, history and theme.

    Loaded once from storage at start; every commit is written to storage
    before the in-memory copy is swapped, so a failed write changes nothing.
    Readers get immutable snapshots.
    """

    def __init__(self, adapter: StorageAdapter, students: Sequence[Student], history: Mapping[str, DailyAttendance], theme: Theme):
        self._adapter = adapter
        self._students: Tuple[Student, ...] = tuple(students)
        self._history: History = dict(history)
        self._theme = theme
        self._lock = threading.RLock()

    @classmethod
    def load(cls, adapter: StorageAdapter) -> "AppState":
        students = adapter.load_students()
        history = adapter.load_attendance()
        theme = adapter.load_theme()
        logger.info("Loaded %d students and %d attendance days", len(students), len(history))
        return cls(adapter, students, history, theme)

    @property
    def students(self) -> Tuple[Student, ...]:
        with self._lock:
            return self._students

    @property
    def history(self) -> History:
        with self._lock:
            return dict(self._history)

    @property
    def theme(self) -> Theme:
        with self._lock:
            return self._theme

    def snapshot(self) -> Tuple[Tuple[Student, ...], History]:
        with self._lock:
            return self._students, dict(self._history)

    def commit(
        self,
        *,
        students: Optional[List[Student]] = None,
        history: Optional[Mapping[str, DailyAttendance]] = None,
    ) -> None:
        with self._lock:
            self._adapter.save_state(
                students=None if students is None else list(students),
                history=history,
            )
            if students is not None:
                self._students = tuple(students)
            if history is not None:
                self._history = dict(history)

    def set_theme(self, theme: Theme) -> None:
        with self._lock:
            self._adapter.save_theme(theme)
            self._theme = theme
