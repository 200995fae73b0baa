from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .backup.controller import register as register_backup
from .config import get_settings_module
from .container import build_container, seed_demo_data
from .dashboard.controller import register as register_dashboard
from .insight.generator import TextGenerator
from .storage.store import KeyValueStore
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    store: Optional[KeyValueStore] = None,
    generator: Optional[TextGenerator] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug(
        "settings=%s storage=%s data_dir=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "file"),
        getattr(settings, "DATA_DIR", ""),
    )

    container = build_container(settings=settings, store=store, generator=generator)
    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container)
    app.extensions["church_roster"] = container

    register_students(app, container)
    register_attendance(app, container)
    register_backup(app, container)
    register_dashboard(app, container)

    return app
