from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.http import confirm_from_request, download, json_body, json_errors, uploaded_text
from ..core.enums import DeleteOutcome, UpdateOutcome
from ..core.exceptions import NotFoundError
from ..serialization.filenames import roster_csv_name
from .model import Student, StudentDraft


def _draft_from_body(body: dict) -> StudentDraft:
    phone = body.get("phoneNumber")
    return StudentDraft(
        name=str(body.get("name") or ""),
        grade=str(body.get("grade") or ""),
        cell_name=str(body.get("cellName") or ""),
        teacher_name=str(body.get("teacherName") or ""),
        phone_number=None if phone is None else str(phone),
    )


def register(app: Flask, container) -> None:
    roster = container.roster_service
    run = container.queue.submit

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @json_errors
    def list_students():
        return jsonify([s.to_dict() for s in roster.list_students()])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @json_errors
    def add_student():
        draft = _draft_from_body(json_body())
        student = run(roster.add_student, draft).result()
        return jsonify({"success": True, "student": student.to_dict()}), 201

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @json_errors
    def update_student(student_id: str):
        draft = _draft_from_body(json_body())
        student = Student.from_draft(student_id, draft)
        outcome = run(roster.update_student, student).result()
        if outcome == UpdateOutcome.NOT_FOUND:
            raise NotFoundError("Student not found")
        return jsonify({"success": True, "student": student.to_dict()})

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @json_errors
    def delete_student(student_id: str):
        outcome = run(roster.delete_student, student_id, confirm_from_request()).result()
        if outcome == DeleteOutcome.NOT_FOUND:
            raise NotFoundError("Student not found")
        return jsonify({"success": True, "outcome": outcome.value})

    @app.route("/api/students/import.csv", methods=["POST"], endpoint="import_students_csv")
    @json_errors
    def import_students_csv():
        report = run(roster.import_csv, uploaded_text()).result()
        return jsonify(
            {
                "success": bool(report.added),
                "added": len(report.added),
                "dropped": report.dropped,
                "message": f"{len(report.added)}명의 학생이 추가되었습니다." if report.added else "추가할 학생 데이터를 찾지 못했습니다.",
            }
        )

    @app.route("/api/students/export.csv", methods=["GET"], endpoint="export_students_csv")
    @json_errors
    def export_students_csv():
        return download(roster.export_csv(), filename=roster_csv_name(date.today()), mimetype="text/csv")

    @app.route("/api/students/mock", methods=["POST"], endpoint="mock_students")
    @json_errors
    def mock_students():
        drafts = container.insight_service.mock_students()
        if not drafts:
            return jsonify({"success": False, "message": "AI 데이터 생성 실패. 다시 시도해주세요."}), 502
        added = run(roster.import_students, drafts).result()
        return jsonify({"success": True, "added": len(added), "students": [s.to_dict() for s in added]})
