from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status. Values are the labels stored and written to CSV."""

    PRESENT = "출석"
    ABSENT = "결석"
    LATE = "지각"
    EXCUSED = "공결"

    @classmethod
    def from_label(cls, label: str) -> "AttendanceStatus | None":
        for status in cls:
            if status.value == label:
                return status
        return None


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class UpdateOutcome(str, Enum):
    UPDATED = "UPDATED"
    NOT_FOUND = "NOT_FOUND"


class DeleteOutcome(str, Enum):
    DELETED = "DELETED"
    NOT_FOUND = "NOT_FOUND"
    CANCELLED = "CANCELLED"


class RestoreOutcome(str, Enum):
    RESTORED = "RESTORED"
    CANCELLED = "CANCELLED"


class UnrecognizedStatusPolicy(str, Enum):
    """What a CSV import does with a cell that is not a known status label."""

    COERCE = "coerce"
    REJECT = "reject"


class CellKind(str, Enum):
    """Closed-set reading of one status cell in an attendance sheet."""

    STATUS = "STATUS"
    SKIP = "SKIP"
    UNRECOGNIZED = "UNRECOGNIZED"


class MatchKind(str, Enum):
    EXACT = "EXACT"
    NAME_ONLY = "NAME_ONLY"
    AMBIGUOUS = "AMBIGUOUS"
    UNMATCHED = "UNMATCHED"
