"""Wide attendance sheet import.

Layout: ``name, grade, cell, ...`` then one column per date. Only header
cells from index 3 on that read exactly ``YYYY-MM-DD`` are date columns; any
other trailing column is ignored.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..common.datetime_utils import is_iso_date_label, parse_iso_date
from ..core.constants import ATTENDANCE_FIRST_DATE_COLUMN, MIN_ROW_COLUMNS, NO_RECORD_MARK
from ..core.enums import AttendanceStatus, CellKind, MatchKind, UnrecognizedStatusPolicy
from ..core.exceptions import ImportFormatError
from ..serialization.csv_codec import split_rows
from ..students.model import Student
from .model import AttendanceRecord, DailyAttendance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellOutcome:
    kind: CellKind
    raw: str
    status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class UnrecognizedCell:
    row: int
    date: str
    name: str
    raw: str


@dataclass(frozen=True)
class AmbiguousRow:
    row: int
    name: str
    cell_name: str
    candidates: int


@dataclass(frozen=True)
class AttendanceCsvResult:
    days: Tuple[DailyAttendance, ...]
    dates: Tuple[str, ...]
    matched: int
    unmatched_rows: Tuple[int, ...]
    ambiguous: Tuple[AmbiguousRow, ...]
    warnings: Tuple[UnrecognizedCell, ...]


def parse_status_cell(raw: str) -> CellOutcome:
    if raw == "" or raw == NO_RECORD_MARK:
        return CellOutcome(kind=CellKind.SKIP, raw=raw)
    status = AttendanceStatus.from_label(raw)
    if status is None:
        return CellOutcome(kind=CellKind.UNRECOGNIZED, raw=raw)
    return CellOutcome(kind=CellKind.STATUS, raw=raw, status=status)


def match_student(roster: Sequence[Student], name: str, cell_name: str) -> Tuple[MatchKind, Optional[Student]]:
    """(name, cell) first, then name alone. First match wins at either level."""
    exact = [s for s in roster if s.name == name and s.cell_name == cell_name]
    if exact:
        return (MatchKind.EXACT if len(exact) == 1 else MatchKind.AMBIGUOUS), exact[0]

    by_name = [s for s in roster if s.name == name]
    if not by_name:
        return MatchKind.UNMATCHED, None
    return (MatchKind.NAME_ONLY if len(by_name) == 1 else MatchKind.AMBIGUOUS), by_name[0]


def _is_calendar_date(label: str) -> bool:
    try:
        parse_iso_date(label)
    except ValueError:
        return False
    return True


def find_date_columns(header: Sequence[str]) -> List[Tuple[int, str]]:
    return [
        (idx, col)
        for idx, col in enumerate(header)
        if idx >= ATTENDANCE_FIRST_DATE_COLUMN and is_iso_date_label(col)
    ]


def parse_attendance_csv(
    text: str,
    roster: Sequence[Student],
    *,
    policy: UnrecognizedStatusPolicy = UnrecognizedStatusPolicy.COERCE,
) -> AttendanceCsvResult:
    """Turn a wide sheet into per-date record sets for ``roster``.

    Raises ImportFormatError when the header has no date column, when a date
    header is not a real calendar date, or when ``policy`` is REJECT and some
    cell is not a known status.
    """
    rows = split_rows(text)
    date_columns = find_date_columns(rows[0]) if rows else []
    if not date_columns:
        raise ImportFormatError("No date columns found (expected YYYY-MM-DD headers)", rows=(1,))
    bad_dates = [col for _, col in date_columns if not _is_calendar_date(col)]
    if bad_dates:
        raise ImportFormatError(f"Header has invalid dates: {', '.join(bad_dates)}", rows=(1,))

    records: dict[str, list[AttendanceRecord]] = {d: [] for _, d in date_columns}
    matched = 0
    unmatched: list[int] = []
    ambiguous: list[AmbiguousRow] = []
    unrecognized: list[UnrecognizedCell] = []

    for line_no, row in enumerate(rows[1:], start=2):
        if len(row) < MIN_ROW_COLUMNS:
            continue

        name, cell_name = row[0], row[2]
        kind, student = match_student(roster, name, cell_name)
        if student is None:
            unmatched.append(line_no)
            continue
        if kind == MatchKind.AMBIGUOUS:
            same_pair = sum(1 for s in roster if s.name == name and s.cell_name == cell_name)
            candidates = same_pair or sum(1 for s in roster if s.name == name)
            ambiguous.append(AmbiguousRow(row=line_no, name=name, cell_name=cell_name, candidates=candidates))

        matched += 1
        for idx, day in date_columns:
            outcome = parse_status_cell(row[idx] if idx < len(row) else "")
            if outcome.kind == CellKind.SKIP:
                continue
            status = outcome.status
            if outcome.kind == CellKind.UNRECOGNIZED:
                unrecognized.append(UnrecognizedCell(row=line_no, date=day, name=name, raw=outcome.raw))
                status = AttendanceStatus.ABSENT
            records[day].append(AttendanceRecord(student_id=student.student_id, status=status))

    if unrecognized and policy == UnrecognizedStatusPolicy.REJECT:
        bad_rows = sorted({c.row for c in unrecognized})
        raise ImportFormatError(
            f"Unrecognized attendance values in rows {', '.join(map(str, bad_rows))}",
            rows=bad_rows,
        )
    for c in unrecognized:
        logger.warning("Row %d (%s) %s: unrecognized status %r recorded as %s", c.row, c.name, c.date, c.raw, AttendanceStatus.ABSENT.value)

    return AttendanceCsvResult(
        days=tuple(DailyAttendance(date=d, records=tuple(rs)) for d, rs in records.items()),
        dates=tuple(records),
        matched=matched,
        unmatched_rows=tuple(unmatched),
        ambiguous=tuple(ambiguous),
        warnings=tuple(unrecognized),
    )
