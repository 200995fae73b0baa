"""Pure history reconciliation.

A history is a mapping ``date -> DailyAttendance``. Functions here never mutate
their inputs; they return a new mapping so callers can commit all-or-nothing.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from ..common.validators import require_iso_date
from .model import AttendanceRecord, DailyAttendance

History = Dict[str, DailyAttendance]


def dedupe_records(records: Iterable[AttendanceRecord]) -> tuple[AttendanceRecord, ...]:
    """Collapse records to one per student: last value wins, first position is kept."""
    by_student: dict[str, AttendanceRecord] = {}
    for r in records:
        by_student[r.student_id] = r
    return tuple(by_student.values())


def replace_day(history: Mapping[str, DailyAttendance], day: str, records: Iterable[AttendanceRecord]) -> History:
    """Discard whatever is stored for ``day`` and keep exactly ``records``."""
    require_iso_date(day)
    out = dict(history)
    out[day] = DailyAttendance(date=day, records=dedupe_records(records))
    return out


def merge_day(existing: DailyAttendance, incoming: DailyAttendance) -> DailyAttendance:
    merged: dict[str, AttendanceRecord] = {r.student_id: r for r in existing.records}
    for r in incoming.records:
        merged[r.student_id] = r
    return DailyAttendance(date=existing.date, records=tuple(merged.values()))


def merge_history(history: Mapping[str, DailyAttendance], incoming: Iterable[DailyAttendance]) -> History:
    """Per-date, per-student overwrite merge.

    New dates are inserted wholesale. On an existing date the incoming record
    replaces the stored one for that student; students the batch does not
    mention keep their status.
    """
    out = dict(history)
    for day in incoming:
        require_iso_date(day.date)
        current = out.get(day.date)
        if current is None:
            out[day.date] = DailyAttendance(date=day.date, records=dedupe_records(day.records))
        else:
            out[day.date] = merge_day(current, day)
    return out


def history_from_days(days: Iterable[DailyAttendance]) -> History:
    return merge_history({}, days)


def sorted_days(history: Mapping[str, DailyAttendance]) -> List[DailyAttendance]:
    return [history[d] for d in sorted(history)]
