from __future__ import annotations

import json

import pytest

from church_roster.common.gates import approve, decline
from church_roster.core.enums import DeleteOutcome, UpdateOutcome
from church_roster.core.exceptions import ValidationError
from church_roster.students.model import Student, StudentDraft
from church_roster.students.service import RosterService


def _draft(name="김지수", cell="다윗셀"):
    return StudentDraft(name=name, grade="3학년", cell_name=cell, teacher_name="김선생")


def test_add_student_assigns_fresh_id(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)

    a = svc.add_student(_draft("A"))
    b = svc.add_student(_draft("B"))

    assert (a.student_id, b.student_id) == ("s1", "s2")
    assert [s.name for s in svc.list_students()] == ["A", "B"]


def test_add_student_rejects_caller_supplied_id(state):
    svc = RosterService(state)
    student = Student(student_id="mine", name="A", grade="3학년", cell_name="x", teacher_name="")

    with pytest.raises(ValidationError):
        svc.add_student(student)

    assert svc.list_students() == ()


def test_add_student_requires_name(state):
    svc = RosterService(state)

    with pytest.raises(ValidationError):
        svc.add_student(_draft(name="  "))


def test_id_factory_collision_is_an_error(state):
    svc = RosterService(state, id_factory=lambda: "same")
    svc.add_student(_draft("A"))

    with pytest.raises(ValidationError):
        svc.add_student(_draft("B"))
    assert len(svc.list_students()) == 1


def test_import_appends_without_name_dedupe(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    svc.add_student(_draft("A"))

    added = svc.import_students([_draft("A"), _draft("B")])

    assert [s.student_id for s in added] == ["s2", "s3"]
    assert [s.name for s in svc.list_students()] == ["A", "A", "B"]


def test_update_replaces_in_place(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    svc.add_student(_draft("A"))
    b = svc.add_student(_draft("B"))
    svc.add_student(_draft("C"))

    outcome = svc.update_student(Student.from_draft(b.student_id, _draft("B2", cell="요셉셀")))

    assert outcome == UpdateOutcome.UPDATED
    assert [s.name for s in svc.list_students()] == ["A", "B2", "C"]
    assert svc.get(b.student_id).cell_name == "요셉셀"


def test_update_unknown_id_reports_not_found(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    svc.add_student(_draft("A"))

    outcome = svc.update_student(Student.from_draft("missing", _draft("X")))

    assert outcome == UpdateOutcome.NOT_FOUND
    assert [s.name for s in svc.list_students()] == ["A"]


def test_delete_declined_is_a_no_op(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    a = svc.add_student(_draft("A"))

    assert svc.delete_student(a.student_id, decline) == DeleteOutcome.CANCELLED
    assert len(svc.list_students()) == 1


def test_delete_confirmed(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    a = svc.add_student(_draft("A"))

    assert svc.delete_student("nope", approve) == DeleteOutcome.NOT_FOUND
    assert svc.delete_student(a.student_id, approve) == DeleteOutcome.DELETED
    assert svc.list_students() == ()


def test_mutations_are_saved_to_storage(store, state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)
    svc.add_student(StudentDraft(name="A", grade="4학년", cell_name="바울셀", teacher_name="정선생", phone_number="010-1234-5678"))

    stored = json.loads(store.get("students"))

    assert stored == [
        {
            "id": "s1",
            "name": "A",
            "grade": "4학년",
            "cellName": "바울셀",
            "teacherName": "정선생",
            "phoneNumber": "010-1234-5678",
        }
    ]
