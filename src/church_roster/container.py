from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from .attendance.service import AttendanceService
from .backup.service import BackupService
from .common.action_queue import ActionQueue
from .core.enums import UnrecognizedStatusPolicy
from .dashboard.service import DashboardService
from .demo import demo_history, demo_students
from .insight.generator import TextGenerator, UnavailableTextGenerator
from .insight.service import InsightService
from .preferences import ThemeService
from .state import AppState
from .storage.adapter import StorageAdapter
from .storage.store import JsonFileStore, KeyValueStore, MemoryStore
from .students.merge import IdFactory, new_student_id
from .students.service import RosterService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    adapter: StorageAdapter
    state: AppState
    queue: ActionQueue

    roster_service: RosterService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    backup_service: BackupService
    insight_service: InsightService
    theme_service: ThemeService


def build_store(settings: Any) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return JsonFileStore(getattr(settings, "DATA_DIR", "data"))
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}")


def build_generator(settings: Any) -> TextGenerator:
    api_key = getattr(settings, "GEMINI_API_KEY", "")
    if not api_key:
        return UnavailableTextGenerator()

    from .insight.gemini import GeminiTextGenerator

    return GeminiTextGenerator(api_key=api_key, model=getattr(settings, "GEMINI_MODEL", "gemini-2.5-flash"))


def build_container(
    *,
    settings: Any,
    store: Optional[KeyValueStore] = None,
    generator: Optional[TextGenerator] = None,
    id_factory: IdFactory = new_student_id,
) -> Container:
    store = store if store is not None else build_store(settings)
    adapter = StorageAdapter(store)
    state = AppState.load(adapter)

    insight_service = InsightService(generator or build_generator(settings))
    roster_service = RosterService(state, id_factory=id_factory)
    attendance_service = AttendanceService(
        state,
        unrecognized_policy=UnrecognizedStatusPolicy(getattr(settings, "UNRECOGNIZED_STATUS_POLICY", "coerce")),
    )
    dashboard_service = DashboardService(state, insight_service, window=int(getattr(settings, "TREND_WINDOW", 5)))

    return Container(
        store=store,
        adapter=adapter,
        state=state,
        queue=ActionQueue(),
        roster_service=roster_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
        backup_service=BackupService(state),
        insight_service=insight_service,
        theme_service=ThemeService(state),
    )


def seed_demo_data(container: Container, *, today: Optional[date] = None, rng: Optional[random.Random] = None) -> bool:
    """Fill an empty roster with demo students, and an empty history with five weeks."""
    rng = rng or random.Random()
    seeded = False
    if not container.state.students:
        container.roster_service.import_students(demo_students(rng))
        seeded = True
    if container.state.students and not container.state.history:
        ids = [s.student_id for s in container.state.students]
        container.attendance_service.import_attendance(demo_history(ids, today or date.today(), rng))
        seeded = True
    if seeded:
        logger.info("Demo data seeded")
    return seeded
