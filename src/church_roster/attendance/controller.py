from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.http import download, json_body, json_errors, uploaded_text
from ..common.validators import require_iso_date
from ..core.enums import UnrecognizedStatusPolicy
from ..core.exceptions import NotFoundError, ValidationError
from ..serialization.filenames import attendance_csv_name, attendance_xlsx_name
from .model import AttendanceRecord, DailyAttendance

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _policy_from_request():
    value = request.args.get("policy")
    if not value:
        return None
    try:
        return UnrecognizedStatusPolicy(value.lower())
    except ValueError as e:
        raise ValidationError(f"policy must be 'coerce' or 'reject', got {value!r}") from e


def register(app: Flask, container) -> None:
    attendance = container.attendance_service
    run = container.queue.submit

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @json_errors
    def list_attendance():
        return jsonify([d.to_dict() for d in attendance.list_days()])

    @app.route("/api/attendance/<day>", methods=["GET"], endpoint="get_attendance_day")
    @json_errors
    def get_attendance_day(day: str):
        require_iso_date(day)
        found = attendance.get_day(day)
        if found is None:
            raise NotFoundError(f"No attendance recorded for {day}")
        return jsonify(found.to_dict())

    @app.route("/api/attendance/<day>", methods=["PUT"], endpoint="save_attendance_day")
    @json_errors
    def save_attendance_day(day: str):
        raw = json_body().get("records")
        if not isinstance(raw, list):
            raise ValidationError("records must be an array")
        records = [AttendanceRecord.from_dict(r) for r in raw]
        saved = run(attendance.save_attendance, day, records).result()
        return jsonify({"success": True, "day": saved.to_dict()})

    @app.route("/api/attendance/import", methods=["POST"], endpoint="import_attendance")
    @json_errors
    def import_attendance():
        raw = json_body().get("attendance")
        if not isinstance(raw, list):
            raise ValidationError("attendance must be an array")
        days = [DailyAttendance.from_dict(d) for d in raw]
        run(attendance.import_attendance, days).result()
        return jsonify({"success": True, "dates": len(days)})

    @app.route("/api/attendance/import.csv", methods=["POST"], endpoint="import_attendance_csv")
    @json_errors
    def import_attendance_csv():
        result = run(attendance.import_csv, uploaded_text(), policy=_policy_from_request()).result()
        return jsonify(
            {
                "success": True,
                "dates": list(result.dates),
                "matched": result.matched,
                "unmatchedRows": list(result.unmatched_rows),
                "ambiguous": [{"row": a.row, "name": a.name, "cellName": a.cell_name, "candidates": a.candidates} for a in result.ambiguous],
                "warnings": [{"row": w.row, "date": w.date, "name": w.name, "value": w.raw} for w in result.warnings],
                "message": f"{len(result.dates)}일치 출석 기록을 불러왔습니다. (매칭된 학생: {result.matched}명)",
            }
        )

    @app.route("/api/attendance/export.csv", methods=["GET"], endpoint="export_attendance_csv")
    @json_errors
    def export_attendance_csv():
        return download(attendance.export_csv(), filename=attendance_csv_name(date.today()), mimetype="text/csv")

    @app.route("/api/attendance/export.xlsx", methods=["GET"], endpoint="export_attendance_xlsx")
    @json_errors
    def export_attendance_xlsx():
        return download(attendance.export_xlsx(), filename=attendance_xlsx_name(date.today()), mimetype=XLSX_MIMETYPE)
