from __future__ import annotations

import re
from datetime import date, datetime, timezone

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_iso_date_label(value: str) -> bool:
    """True if value has the exact YYYY-MM-DD shape (no calendar check)."""
    return bool(ISO_DATE_RE.match(value or ""))


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it easier.
    """
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix for UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"
