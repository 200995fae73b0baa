from __future__ import annotations

from church_roster.students.csv_import import parse_roster_csv
from church_roster.students.model import Student
from church_roster.students.service import RosterService
from church_roster.serialization.csv_codec import encode_roster_csv


def test_header_row_is_skipped_and_defaults_applied():
    text = "이름,학년,셀,담임 선생님,연락처\n김지수,,다윗셀\n이민호,4학년,,정선생,010-1111-2222\n"

    result = parse_roster_csv(text)

    assert result.header_skipped is True
    assert result.kept == 2
    first, second = result.drafts
    assert (first.name, first.grade, first.cell_name, first.teacher_name, first.phone_number) == (
        "김지수", "3학년", "다윗셀", "", ""
    )
    assert (second.grade, second.cell_name, second.teacher_name, second.phone_number) == (
        "4학년", "미배정", "정선생", "010-1111-2222"
    )


def test_kept_plus_dropped_equals_data_rows():
    text = "\n".join(
        [
            "이름,학년,셀",
            "김지수,3학년,다윗셀",
            "짧은,행",
            ",3학년,요셉셀",
            "",
            "박서준 , 3학년 , 요나셀 ",
        ]
    )

    result = parse_roster_csv(text)

    assert result.kept == 2
    assert result.dropped == 3
    assert result.kept + result.dropped == 5
    assert result.drafts[1].name == "박서준"
    assert result.drafts[1].cell_name == "요나셀"


def test_first_row_without_name_heading_is_data():
    result = parse_roster_csv("김지수,3학년,다윗셀\n이민호,4학년,바울셀")

    assert result.header_skipped is False
    assert [d.name for d in result.drafts] == ["김지수", "이민호"]


def test_bom_and_crlf_are_tolerated():
    result = parse_roster_csv("\ufeff이름,학년,셀\r\n김지수,3학년,다윗셀\r\n")

    assert result.header_skipped is True
    assert [d.cell_name for d in result.drafts] == ["다윗셀"]


def test_import_csv_gives_every_row_a_new_id(state, sequential_ids):
    svc = RosterService(state, id_factory=sequential_ids)

    report = svc.import_csv("이름,학년,셀\n김지수,3학년,다윗셀\n김지수,3학년,다윗셀")

    assert [s.student_id for s in report.added] == ["s1", "s2"]
    assert report.dropped == 0


def test_export_roster_csv_has_bom_and_header():
    students = [
        Student(student_id="1", name="김지수", grade="3학년", cell_name="다윗셀", teacher_name="김선생", phone_number="010-1"),
        Student(student_id="2", name="이민호", grade="4학년", cell_name="바울셀", teacher_name="정선생"),
    ]

    text = encode_roster_csv(students)

    assert text.startswith("\ufeff")
    assert text[1:].split("\n") == [
        "이름,학년,셀,담임 선생님,연락처",
        "김지수,3학년,다윗셀,김선생,010-1",
        "이민호,4학년,바울셀,정선생,",
    ]
