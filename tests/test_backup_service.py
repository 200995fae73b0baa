from __future__ import annotations

import json

import pytest

from church_roster.attendance.model import AttendanceRecord
from church_roster.attendance.service import AttendanceService
from church_roster.backup.service import BackupService
from church_roster.common.gates import approve, decline
from church_roster.core.enums import AttendanceStatus, RestoreOutcome
from church_roster.core.exceptions import ImportFormatError
from church_roster.state import AppState
from church_roster.storage.adapter import StorageAdapter
from church_roster.storage.store import MemoryStore
from church_roster.students.merge import add_student
from church_roster.students.model import StudentDraft


@pytest.fixture
def populated(state, sequential_ids):
    students, _ = add_student([], StudentDraft(name="김지수", grade="3학년", cell_name="다윗셀"), sequential_ids)
    state.commit(students=students)
    AttendanceService(state).save_attendance("2024-01-07", [AttendanceRecord("s1", AttendanceStatus.PRESENT)])
    return state


def test_export_document_shape(populated, fixed_now):
    text = BackupService(populated).export_database(now=fixed_now)
    doc = json.loads(text)

    assert doc["version"] == 1
    assert doc["timestamp"] == "2024-01-21T09:30:00.000Z"
    assert doc["data"]["students"][0]["cellName"] == "다윗셀"
    assert doc["data"]["attendance"] == [
        {"date": "2024-01-07", "records": [{"studentId": "s1", "status": "출석"}]}
    ]
    assert "김지수" in text


def test_restore_replaces_everything(populated, fixed_now, store):
    doc = {
        "version": 1,
        "timestamp": "2024-02-01T00:00:00.000Z",
        "data": {
            "students": [{"id": "x", "name": "이민호", "grade": "4학년", "cellName": "바울셀", "teacherName": "정선생"}],
            "attendance": [],
        },
    }

    outcome = BackupService(populated).restore(json.dumps(doc), approve)

    assert outcome == RestoreOutcome.RESTORED
    assert [s.student_id for s in populated.students] == ["x"]
    assert populated.history == {}
    assert json.loads(store.get("attendance")) == []


def test_restore_round_trip(populated, fixed_now):
    backup = BackupService(populated)
    before = populated.snapshot()
    text = backup.export_database(now=fixed_now)
    populated.commit(students=[], history={})

    backup.restore(text, approve)

    assert populated.snapshot() == before


def test_declined_restore_changes_nothing(populated):
    before = populated.snapshot()

    outcome = BackupService(populated).restore('{"data": {"students": [], "attendance": []}}', decline)

    assert outcome == RestoreOutcome.CANCELLED
    assert populated.snapshot() == before


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"version": 1}',
        '{"data": {"students": []}}',
        '{"data": {"students": {}, "attendance": []}}',
        '{"data": {"students": [{"name": "no id"}], "attendance": []}}',
        '{"data": {"students": [], "attendance": [{"date": "2024-01-07", "records": [{"studentId": "a", "status": "?"}]}]}}',
    ],
)
def test_invalid_documents_are_rejected_without_change(populated, text):
    before = populated.snapshot()

    with pytest.raises(ImportFormatError):
        BackupService(populated).restore(text, approve)

    assert populated.snapshot() == before


def test_restore_with_failing_attendance_write_keeps_old_roster_on_disk():
    class AttendanceWriteFails(MemoryStore):
        def set(self, key, text):
            if key == "attendance":
                raise OSError("disk full")
            super().set(key, text)

    old = [{"id": "old", "name": "김지수", "grade": "3학년", "cellName": "다윗셀", "teacherName": ""}]
    store = AttendanceWriteFails({"students": json.dumps(old)})
    state = AppState.load(StorageAdapter(store))
    doc = {
        "version": 1,
        "timestamp": "2024-02-01T00:00:00.000Z",
        "data": {"students": [{"id": "new", "name": "이민호"}], "attendance": []},
    }

    with pytest.raises(OSError):
        BackupService(state).restore(json.dumps(doc), approve)

    assert [s.student_id for s in state.students] == ["old"]
    assert [s["id"] for s in json.loads(store.get("students"))] == ["old"]
