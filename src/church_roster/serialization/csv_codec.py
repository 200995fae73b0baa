"""Plain comma-separated text for the roster and attendance sheets.

Decoding is newline-then-comma with per-cell trimming. Quoted fields and
embedded commas are not supported; a comma inside a name splits the cell.
"""
from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

from ..attendance.model import DailyAttendance
from ..core.constants import ATTENDANCE_CSV_HEADER, CSV_BOM, NO_RECORD_MARK, ROSTER_CSV_HEADER
from ..students.model import Student


def split_rows(text: str) -> List[List[str]]:
    if text.startswith(CSV_BOM):
        text = text[len(CSV_BOM):]
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return []
    return [[cell.strip() for cell in line.split(",")] for line in text.split("\n")]


def join_rows(rows: Sequence[Sequence[str]]) -> str:
    return CSV_BOM + "\n".join(",".join(r) for r in rows)


def roster_table(students: Sequence[Student]) -> Tuple[List[str], List[List[str]]]:
    rows = [
        [s.name, s.grade, s.cell_name, s.teacher_name, s.phone_number or ""]
        for s in students
    ]
    return list(ROSTER_CSV_HEADER), rows


def attendance_table(
    students: Sequence[Student], history: Mapping[str, DailyAttendance]
) -> Tuple[List[str], List[List[str]]]:
    """Wide sheet: one row per student, one column per recorded date (ascending)."""
    dates = sorted(history)
    header = list(ATTENDANCE_CSV_HEADER) + dates
    rows = []
    for s in students:
        cells = []
        for d in dates:
            status = history[d].status_of(s.student_id)
            cells.append(status.value if status else NO_RECORD_MARK)
        rows.append([s.name, s.grade, s.cell_name] + cells)
    return header, rows


def encode_roster_csv(students: Sequence[Student]) -> str:
    header, rows = roster_table(students)
    return join_rows([header] + rows)


def encode_attendance_csv(students: Sequence[Student], history: Mapping[str, DailyAttendance]) -> str:
    header, rows = attendance_table(students, history)
    return join_rows([header] + rows)
