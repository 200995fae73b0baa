from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


def _text(raw: Mapping[str, Any], key: str, default: str = "") -> str:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, (str, int, float)):
        raise ValidationError(f"{key} must be text, got {type(value).__name__}")
    return str(value)


@dataclass(frozen=True)
class StudentDraft:
    """Student fields before the roster has assigned an identity."""

    name: str
    grade: str = ""
    cell_name: str = ""
    teacher_name: str = ""
    phone_number: Optional[str] = None


@dataclass(frozen=True)
class Student:
    """Domain entity: one roster entry.

    Serialized with the camelCase names used by the stored documents
    (``id``, ``cellName``, ``teacherName``, ``phoneNumber``).
    """

    student_id: str
    name: str
    grade: str
    cell_name: str
    teacher_name: str
    phone_number: Optional[str] = None

    @classmethod
    def from_draft(cls, student_id: str, draft: StudentDraft) -> "Student":
        return cls(
            student_id=student_id,
            name=draft.name,
            grade=draft.grade,
            cell_name=draft.cell_name,
            teacher_name=draft.teacher_name,
            phone_number=draft.phone_number,
        )

    def to_dict(self) -> dict:
        out = {
            "id": self.student_id,
            "name": self.name,
            "grade": self.grade,
            "cellName": self.cell_name,
            "teacherName": self.teacher_name,
        }
        if self.phone_number is not None:
            out["phoneNumber"] = self.phone_number
        return out

    @classmethod
    def from_dict(cls, raw: Any) -> "Student":
        if not isinstance(raw, Mapping):
            raise ValidationError("student entry must be an object")
        student_id = _text(raw, "id")
        if not student_id:
            raise ValidationError("student entry has no id")
        phone = raw.get("phoneNumber")
        return cls(
            student_id=student_id,
            name=_text(raw, "name"),
            grade=_text(raw, "grade"),
            cell_name=_text(raw, "cellName"),
            teacher_name=_text(raw, "teacherName"),
            phone_number=None if phone is None else _text(raw, "phoneNumber"),
        )
