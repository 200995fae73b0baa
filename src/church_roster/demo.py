"""Demo roster and attendance used to fill an empty store."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List, Optional, Sequence

from .attendance.model import AttendanceRecord, DailyAttendance
from .core.enums import AttendanceStatus
from .students.model import StudentDraft

DEMO_NAMES = [
    "김지수", "이민호", "박서준", "최영희", "정우성", "강하늘", "조수미", "윤도현", "장나라", "임시완",
    "한지민", "송중기", "박보영", "이광수", "김종국", "송지효", "하하", "유재석", "지석진", "양세찬",
    "전소민", "김연아", "손흥민", "류현진", "박찬호", "이승엽", "추신수", "강호동", "신동엽", "이수근",
]

# (grade, cells, teachers); cell i is taught by teacher i
DEMO_GRADES = [
    ("3학년", ["다윗셀", "요셉셀", "다니엘셀", "요나셀"], ["김선생", "이선생", "박선생", "최선생"]),
    ("4학년", ["바울셀", "베드로셀", "요한셀", "디모데셀"], ["정선생", "강선생", "조선생", "윤선생"]),
]


def demo_students(rng: Optional[random.Random] = None, *, count: int = 30) -> List[StudentDraft]:
    rng = rng or random.Random()
    drafts = []
    for i in range(count):
        grade, cells, teachers = DEMO_GRADES[0] if i < count // 2 else DEMO_GRADES[1]
        cell_idx = rng.randrange(len(cells))
        drafts.append(
            StudentDraft(
                name=DEMO_NAMES[i % len(DEMO_NAMES)],
                grade=grade,
                cell_name=cells[cell_idx],
                teacher_name=teachers[cell_idx],
                phone_number=f"010-{rng.randint(1000, 9999)}-{rng.randint(1000, 9999)}",
            )
        )
    return drafts


def _demo_status(roll: float) -> AttendanceStatus:
    if roll > 0.85:
        return AttendanceStatus.ABSENT
    if roll > 0.75:
        return AttendanceStatus.LATE
    if roll > 0.70:
        return AttendanceStatus.EXCUSED
    return AttendanceStatus.PRESENT


def demo_history(
    student_ids: Sequence[str],
    today: date,
    rng: Optional[random.Random] = None,
    *,
    weeks: int = 5,
) -> List[DailyAttendance]:
    """One day per week going back from ``today``, a record for every student."""
    rng = rng or random.Random()
    days = []
    for week in range(weeks):
        day = today - timedelta(days=7 * week)
        records = tuple(AttendanceRecord(student_id=sid, status=_demo_status(rng.random())) for sid in student_ids)
        days.append(DailyAttendance(date=day.isoformat(), records=records))
    return days
