"""Roster merge engine.

Identity is assigned here and nowhere else: every new student gets a fresh id
from the id factory, and callers can only hand in drafts.
"""
from __future__ import annotations

import uuid
from typing import Callable, Iterable, List, Sequence, Tuple

from ..common.validators import require_non_empty
from ..core.enums import UpdateOutcome
from ..core.exceptions import ValidationError
from .model import Student, StudentDraft

IdFactory = Callable[[], str]


def new_student_id() -> str:
    return str(uuid.uuid4())


def _mint(roster_ids: set[str], draft: StudentDraft, id_factory: IdFactory) -> Student:
    if not isinstance(draft, StudentDraft):
        # A Student already has an id; only the roster may assign one.
        raise ValidationError(f"expected a StudentDraft, got {type(draft).__name__}")
    require_non_empty(draft.name, "name")
    student_id = id_factory()
    if student_id in roster_ids:
        raise ValidationError(f"id factory produced an id already in the roster: {student_id!r}")
    roster_ids.add(student_id)
    return Student.from_draft(student_id, draft)


def add_student(roster: Sequence[Student], draft: StudentDraft, id_factory: IdFactory) -> Tuple[List[Student], Student]:
    ids = {s.student_id for s in roster}
    student = _mint(ids, draft, id_factory)
    return list(roster) + [student], student


def append_students(
    roster: Sequence[Student], drafts: Iterable[StudentDraft], id_factory: IdFactory
) -> Tuple[List[Student], List[Student]]:
    """Append the whole batch. No name deduplication against the roster."""
    ids = {s.student_id for s in roster}
    added = [_mint(ids, d, id_factory) for d in drafts]
    return list(roster) + added, added


def replace_student(roster: Sequence[Student], updated: Student) -> Tuple[List[Student], UpdateOutcome]:
    require_non_empty(updated.name, "name")
    out: List[Student] = []
    outcome = UpdateOutcome.NOT_FOUND
    for s in roster:
        if s.student_id == updated.student_id:
            out.append(updated)
            outcome = UpdateOutcome.UPDATED
        else:
            out.append(s)
    return out, outcome


def remove_student(roster: Sequence[Student], student_id: str) -> Tuple[List[Student], bool]:
    out = [s for s in roster if s.student_id != student_id]
    return out, len(out) != len(roster)
