from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from ..attendance.model import DailyAttendance
from ..attendance.reconcile import History, dedupe_records
from ..common.datetime_utils import iso_timestamp
from ..core.constants import ATTENDANCE_KEY, DATABASE_VERSION, STUDENTS_KEY, THEME_KEY
from ..core.enums import Theme
from ..core.exceptions import ImportFormatError, ValidationError
from ..students.model import Student
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def _dump(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)


def students_from_list(raw: Any) -> List[Student]:
    if not isinstance(raw, list):
        raise ValidationError("students must be an array")
    students = [Student.from_dict(s) for s in raw]
    seen: set[str] = set()
    for s in students:
        if s.student_id in seen:
            raise ValidationError(f"duplicate student id {s.student_id!r}")
        seen.add(s.student_id)
    return students


def history_from_list(raw: Any) -> History:
    if not isinstance(raw, list):
        raise ValidationError("attendance must be an array")
    history: History = {}
    for item in raw:
        day = DailyAttendance.from_dict(item)
        if day.date in history:
            raise ValidationError(f"duplicate attendance date {day.date}")
        history[day.date] = DailyAttendance(date=day.date, records=dedupe_records(day.records))
    return history


def history_to_list(history: Mapping[str, DailyAttendance]) -> list[dict]:
    return [day.to_dict() for day in history.values()]


class StorageAdapter:
    """Load/save of the three persisted entities plus the full-database document.

    Reads never raise: a missing, corrupt or wrongly shaped document degrades to
    an empty collection (or the light theme) and is logged.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load_json(self, key: str) -> Any:
        text = self._store.get(key)
        if text is None:
            return None
        return json.loads(text)

    # --- Students ---
    def load_students(self) -> List[Student]:
        try:
            raw = self._load_json(STUDENTS_KEY)
            return [] if raw is None else students_from_list(raw)
        except (ValueError, ValidationError) as e:
            logger.warning("Failed to load students, starting empty: %s", e)
            return []

    def save_students(self, students: List[Student]) -> None:
        self._store.set(STUDENTS_KEY, _dump([s.to_dict() for s in students]))

    # --- Attendance ---
    def load_attendance(self) -> History:
        try:
            raw = self._load_json(ATTENDANCE_KEY)
            return {} if raw is None else history_from_list(raw)
        except (ValueError, ValidationError) as e:
            logger.warning("Failed to load attendance, starting empty: %s", e)
            return {}

    def save_attendance(self, history: Mapping[str, DailyAttendance]) -> None:
        self._store.set(ATTENDANCE_KEY, _dump(history_to_list(history)))

    # --- Roster and history together ---
    def save_state(
        self,
        *,
        students: Optional[List[Student]] = None,
        history: Optional[Mapping[str, DailyAttendance]] = None,
    ) -> None:
        """Write the given collections as one unit.

        If a later key fails to write, keys already written are put back to
        their previous text before the error propagates.
        """
        writes = []
        if students is not None:
            writes.append((STUDENTS_KEY, _dump([s.to_dict() for s in students])))
        if history is not None:
            writes.append((ATTENDANCE_KEY, _dump(history_to_list(history))))

        previous = {key: self._store.get(key) for key, _ in writes}
        written: List[str] = []
        try:
            for key, text in writes:
                self._store.set(key, text)
                written.append(key)
        except Exception:
            for key in reversed(written):
                old = previous[key]
                try:
                    # A key that did not exist loads as empty, same as "[]".
                    self._store.set(key, old if old is not None else "[]")
                except Exception:
                    logger.exception("Rollback of %r failed; stored data may be inconsistent", key)
            raise

    # --- Theme ---
    def load_theme(self) -> Theme:
        try:
            raw = self._load_json(THEME_KEY)
        except ValueError:
            return Theme.LIGHT
        return Theme.DARK if raw == Theme.DARK.value else Theme.LIGHT

    def save_theme(self, theme: Theme) -> None:
        self._store.set(THEME_KEY, json.dumps(theme.value))

    # --- Full DB (single JSON document) ---
    @staticmethod
    def export_database(students: List[Student], history: Mapping[str, DailyAttendance], *, now: datetime) -> str:
        db = {
            "version": DATABASE_VERSION,
            "timestamp": iso_timestamp(now),
            "data": {
                "students": [s.to_dict() for s in students],
                "attendance": history_to_list(history),
            },
        }
        return _dump(db)

    @staticmethod
    def parse_database(text: str) -> Tuple[List[Student], History]:
        """Validate a full-database document. Any defect rejects the whole file."""
        try:
            db = json.loads(text)
        except ValueError as e:
            raise ImportFormatError(f"Database file is not valid JSON: {e}") from e

        data = db.get("data") if isinstance(db, dict) else None
        if not isinstance(data, dict):
            raise ImportFormatError("Invalid database format: missing data section")
        if not isinstance(data.get("students"), list) or not isinstance(data.get("attendance"), list):
            raise ImportFormatError("Invalid database format: students and attendance must be arrays")

        try:
            return students_from_list(data["students"]), history_from_list(data["attendance"])
        except ValidationError as e:
            raise ImportFormatError(f"Invalid database format: {e}") from e
