from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.gates import Confirm
from ..core.constants import RESTORE_CONFIRM_MESSAGE
from ..core.enums import RestoreOutcome
from ..state import AppState
from ..storage.adapter import StorageAdapter

logger = logging.getLogger(__name__)


class BackupService:
    """Use case: full-database JSON export and destructive restore."""

    def __init__(self, state: AppState, *, clock: Callable[[], datetime] = now_utc):
        self._state = state
        self._clock = clock

    def export_database(self, *, now: Optional[datetime] = None) -> str:
        students, history = self._state.snapshot()
        return StorageAdapter.export_database(list(students), history, now=now or self._clock())

    def restore(self, text: str, confirm: Confirm) -> RestoreOutcome:
        """Replace roster and history wholesale.

        The document is validated completely before anything is written; an
        invalid file raises ImportFormatError and leaves the state as it was.
        """
        if not confirm(RESTORE_CONFIRM_MESSAGE):
            return RestoreOutcome.CANCELLED

        students, history = StorageAdapter.parse_database(text)
        self._state.commit(students=students, history=history)
        logger.info("Database restored: %d students, %d attendance days", len(students), len(history))
        return RestoreOutcome.RESTORED
