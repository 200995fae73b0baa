from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.constants import DEFAULT_GRADE, MIN_ROW_COLUMNS, NAME_HEADER, UNASSIGNED_CELL
from ..serialization.csv_codec import split_rows
from .model import StudentDraft


@dataclass(frozen=True)
class RosterCsvResult:
    drafts: Tuple[StudentDraft, ...]
    kept: int
    dropped: int
    header_skipped: bool


def _cell(row: list[str], idx: int) -> str:
    return row[idx] if idx < len(row) else ""


def parse_roster_csv(text: str) -> RosterCsvResult:
    """Rows of ``name, grade, cell, teacher, phone``.

    The first row is treated as a header only when its first cell contains
    ``이름``. A data row needs at least three columns and a name; missing
    optional values fall back to the defaults.
    """
    rows = split_rows(text)
    header_skipped = bool(rows) and NAME_HEADER in rows[0][0]
    data_rows = rows[1:] if header_skipped else rows

    drafts = []
    for row in data_rows:
        if len(row) < MIN_ROW_COLUMNS or not row[0]:
            continue
        drafts.append(
            StudentDraft(
                name=row[0],
                grade=_cell(row, 1) or DEFAULT_GRADE,
                cell_name=_cell(row, 2) or UNASSIGNED_CELL,
                teacher_name=_cell(row, 3),
                phone_number=_cell(row, 4),
            )
        )

    return RosterCsvResult(
        drafts=tuple(drafts),
        kept=len(drafts),
        dropped=len(data_rows) - len(drafts),
        header_skipped=header_skipped,
    )
