from __future__ import annotations

from datetime import date


def roster_csv_name(today: date) -> str:
    return f"학생명부_{today.isoformat()}.csv"


def attendance_csv_name(today: date) -> str:
    return f"출석부_전체_{today.isoformat()}.csv"


def attendance_xlsx_name(today: date) -> str:
    return f"출석부_전체_{today.isoformat()}.xlsx"


def database_json_name(today: date) -> str:
    return f"cho_deung_bu_db_{today.isoformat()}.json"
