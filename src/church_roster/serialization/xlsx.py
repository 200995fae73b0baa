from __future__ import annotations

import io
from typing import Mapping, Sequence

import pandas as pd

from ..attendance.model import DailyAttendance
from ..students.model import Student
from .csv_codec import attendance_table

ATTENDANCE_SHEET = "출석부"


def attendance_workbook_bytes(students: Sequence[Student], history: Mapping[str, DailyAttendance]) -> bytes:
    """Same grid as the attendance CSV, written as an .xlsx workbook in memory."""
    header, rows = attendance_table(students, history)
    df = pd.DataFrame(rows, columns=header)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=ATTENDANCE_SHEET)
    return output.getvalue()
