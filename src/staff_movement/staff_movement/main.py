from __future__ import annotations

import atexit
import importlib
import logging
import logging.config
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_REFRESH_SECONDS
from .database.bootstrap import apply_schema, ensure_admin_account
from .movements.controller import register as register_movements
from .presence.controller import register as register_presence
from .staff.controller import register as register_staff
from .sync.scheduler import PresenceRefresher

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def logging_config(settings) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": getattr(settings, "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")},
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": getattr(settings, "LOG_LEVEL", "INFO"),
            "handlers": ["default"],
        },
    }


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.config.dictConfig(logging_config(settings))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=7)

    backend = str(getattr(settings, "STORE_BACKEND", "sheet")).lower()
    logger.info("settings=%s store=%s", settings_module, backend)

    if container is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            db_config = getattr(settings, "DB_CONFIG")
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            admin_user = getattr(settings, "ADMIN_USERNAME", "")
            admin_pass = getattr(settings, "ADMIN_PASSWORD", "")
            if admin_user and admin_pass:
                ensure_admin_account(db_config, username=admin_user, password=admin_pass)
        container = build_container(settings=settings)

    app.extensions["staff_movement"] = container

    register_staff(app, container)
    register_movements(app, container)
    register_presence(app, container)

    if bool(getattr(settings, "ENABLE_SCHEDULER", False)):
        refresher = PresenceRefresher(
            container.presence_board,
            interval_seconds=int(getattr(settings, "REFRESH_INTERVAL_SECONDS", DEFAULT_REFRESH_SECONDS)),
        )
        refresher.start()
        atexit.register(refresher.shutdown)

    return app
