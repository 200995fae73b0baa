"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the roster and attendance rules live in the services.
"""

import importlib

from church_roster.attendance.model import AttendanceRecord
from church_roster.config import get_settings_module
from church_roster.container import build_container
from church_roster.core.enums import AttendanceStatus
from church_roster.students.model import StudentDraft


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    kim = container.roster_service.add_student(StudentDraft(name="김지수", grade="3학년", cell_name="다윗셀"))
    container.attendance_service.save_attendance(
        "2024-01-07", [AttendanceRecord(student_id=kim.student_id, status=AttendanceStatus.PRESENT)]
    )
    print(container.dashboard_service.stats().to_dict())


if __name__ == "__main__":
    main()
