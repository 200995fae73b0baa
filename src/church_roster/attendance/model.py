from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..common.validators import require_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status on one date."""

    student_id: str
    status: AttendanceStatus
    note: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"studentId": self.student_id, "status": self.status.value}
        if self.note is not None:
            out["note"] = self.note
        return out

    @classmethod
    def from_dict(cls, raw: Any) -> "AttendanceRecord":
        if not isinstance(raw, Mapping):
            raise ValidationError("attendance record must be an object")
        student_id = raw.get("studentId")
        if not isinstance(student_id, str) or not student_id:
            raise ValidationError("attendance record has no studentId")
        status = AttendanceStatus.from_label(str(raw.get("status", "")))
        if status is None:
            raise ValidationError(f"unknown attendance status {raw.get('status')!r}")
        note = raw.get("note")
        return cls(student_id=student_id, status=status, note=None if note is None else str(note))


@dataclass(frozen=True)
class DailyAttendance:
    """All records for one date. At most one record per student is kept by the engine."""

    date: str
    records: Tuple[AttendanceRecord, ...] = ()

    def status_of(self, student_id: str) -> Optional[AttendanceStatus]:
        for r in self.records:
            if r.student_id == student_id:
                return r.status
        return None

    def count(self, status: AttendanceStatus) -> int:
        return sum(1 for r in self.records if r.status == status)

    def to_dict(self) -> dict:
        return {"date": self.date, "records": [r.to_dict() for r in self.records]}

    @classmethod
    def from_dict(cls, raw: Any) -> "DailyAttendance":
        if not isinstance(raw, Mapping):
            raise ValidationError("attendance day must be an object")
        day = require_iso_date(raw.get("date"), "attendance date")
        records = raw.get("records")
        if not isinstance(records, list):
            raise ValidationError(f"attendance day {day} has no records array")
        return cls(date=day, records=tuple(AttendanceRecord.from_dict(r) for r in records))
