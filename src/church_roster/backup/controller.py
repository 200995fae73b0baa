from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.http import confirm_from_request, download, json_errors, uploaded_text
from ..core.enums import RestoreOutcome
from ..serialization.filenames import database_json_name


def register(app: Flask, container) -> None:
    backup = container.backup_service

    @app.route("/api/database/export", methods=["GET"], endpoint="export_database")
    @json_errors
    def export_database():
        return download(backup.export_database(), filename=database_json_name(date.today()), mimetype="application/json")

    @app.route("/api/database/restore", methods=["POST"], endpoint="restore_database")
    @json_errors
    def restore_database():
        outcome = container.queue.submit(backup.restore, uploaded_text(), confirm_from_request()).result()
        message = "데이터베이스가 성공적으로 복원되었습니다." if outcome == RestoreOutcome.RESTORED else "복원이 취소되었습니다."
        return jsonify({"success": True, "outcome": outcome.value, "message": message})
