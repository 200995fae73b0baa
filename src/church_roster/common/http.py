"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import io
import logging
from functools import wraps
from typing import Any, Callable

from flask import jsonify, request, send_file

from ..core.exceptions import DomainError, ImportFormatError, NotFoundError, ValidationError
from .gates import Confirm, approve, decline

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y", "on"}


def json_errors(view: Callable) -> Callable:
    """Map domain errors to 4xx JSON and anything else to a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ImportFormatError as e:
            return jsonify({"success": False, "message": str(e), "rows": list(e.rows)}), 400
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal error"}), 500

    return wrapper


def confirm_from_request() -> Confirm:
    """The browser's yes/no prompt becomes a ``confirm`` flag on the request."""
    flag = request.args.get("confirm")
    if flag is None and request.is_json:
        flag = str((request.get_json(silent=True) or {}).get("confirm", ""))
    return approve if str(flag or "").strip().lower() in _TRUTHY else decline


def uploaded_text() -> str:
    """Text of an uploaded ``file`` field, or the raw request body."""
    upload = request.files.get("file")
    raw = upload.read() if upload is not None else request.get_data()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ImportFormatError("File must be UTF-8 encoded (save the CSV as 'CSV UTF-8')") from e


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def download(payload: Any, *, filename: str, mimetype: str):
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    return send_file(io.BytesIO(data), mimetype=mimetype, as_attachment=True, download_name=filename)
