from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..common.gates import Confirm
from ..core.constants import DELETE_CONFIRM_MESSAGE
from ..core.enums import DeleteOutcome, UpdateOutcome
from ..serialization.csv_codec import encode_roster_csv
from ..state import AppState
from .csv_import import parse_roster_csv
from .merge import IdFactory, add_student, append_students, new_student_id, remove_student, replace_student
from .model import Student, StudentDraft

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterImportReport:
    added: Tuple[Student, ...]
    kept: int
    dropped: int


class RosterService:
    """Use case: maintain the student directory."""

    def __init__(self, state: AppState, *, id_factory: IdFactory = new_student_id):
        self._state = state
        self._id_factory = id_factory

    def list_students(self) -> Tuple[Student, ...]:
        return self._state.students

    def get(self, student_id: str) -> Optional[Student]:
        for s in self._state.students:
            if s.student_id == student_id:
                return s
        return None

    def add_student(self, draft: StudentDraft) -> Student:
        roster, student = add_student(self._state.students, draft, self._id_factory)
        self._state.commit(students=roster)
        logger.info("Student added: %s (%s)", student.name, student.student_id)
        return student

    def import_students(self, drafts: Iterable[StudentDraft]) -> List[Student]:
        roster, added = append_students(self._state.students, drafts, self._id_factory)
        if added:
            self._state.commit(students=roster)
        logger.info("Imported %d students", len(added))
        return added

    def import_csv(self, text: str) -> RosterImportReport:
        parsed = parse_roster_csv(text)
        added = self.import_students(parsed.drafts)
        if parsed.dropped:
            logger.info("Roster CSV: dropped %d rows without a name or with fewer than 3 columns", parsed.dropped)
        return RosterImportReport(added=tuple(added), kept=parsed.kept, dropped=parsed.dropped)

    def update_student(self, student: Student) -> UpdateOutcome:
        roster, outcome = replace_student(self._state.students, student)
        if outcome == UpdateOutcome.UPDATED:
            self._state.commit(students=roster)
        else:
            logger.warning("Update for unknown student id %s", student.student_id)
        return outcome

    def delete_student(self, student_id: str, confirm: Confirm) -> DeleteOutcome:
        if not confirm(DELETE_CONFIRM_MESSAGE):
            return DeleteOutcome.CANCELLED
        roster, removed = remove_student(self._state.students, student_id)
        if not removed:
            return DeleteOutcome.NOT_FOUND
        self._state.commit(students=roster)
        logger.info("Student deleted: %s", student_id)
        return DeleteOutcome.DELETED

    def export_csv(self) -> str:
        return encode_roster_csv(self._state.students)
