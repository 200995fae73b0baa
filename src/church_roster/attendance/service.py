from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..core.enums import UnrecognizedStatusPolicy
from ..serialization.csv_codec import encode_attendance_csv
from ..serialization.xlsx import attendance_workbook_bytes
from ..state import AppState
from .csv_import import AttendanceCsvResult, parse_attendance_csv
from .model import AttendanceRecord, DailyAttendance
from .reconcile import merge_history, replace_day, sorted_days

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record and import attendance, at most one status per (date, student)."""

    def __init__(
        self,
        state: AppState,
        *,
        unrecognized_policy: UnrecognizedStatusPolicy = UnrecognizedStatusPolicy.COERCE,
    ):
        self._state = state
        self._policy = unrecognized_policy

    def list_days(self) -> List[DailyAttendance]:
        return sorted_days(self._state.history)

    def get_day(self, day: str) -> Optional[DailyAttendance]:
        return self._state.history.get(day)

    def save_attendance(self, day: str, records: Iterable[AttendanceRecord]) -> DailyAttendance:
        """Manual save for one date: the stored set becomes exactly ``records``."""
        history = replace_day(self._state.history, day, records)
        self._state.commit(history=history)
        logger.info("Attendance saved for %s (%d records)", day, len(history[day].records))
        return history[day]

    def import_attendance(self, days: Iterable[DailyAttendance]) -> None:
        days = list(days)
        history = merge_history(self._state.history, days)
        self._state.commit(history=history)
        logger.info("Attendance merged for %d dates", len(days))

    def import_csv(self, text: str, *, policy: Optional[UnrecognizedStatusPolicy] = None) -> AttendanceCsvResult:
        students, _ = self._state.snapshot()
        result = parse_attendance_csv(text, students, policy=policy or self._policy)
        self.import_attendance(result.days)
        if result.ambiguous:
            logger.warning(
                "Attendance CSV: %d rows matched a name shared by several students; first match used",
                len(result.ambiguous),
            )
        return result

    def export_csv(self) -> str:
        students, history = self._state.snapshot()
        return encode_attendance_csv(students, history)

    def export_xlsx(self) -> bytes:
        students, history = self._state.snapshot()
        return attendance_workbook_bytes(students, history)
