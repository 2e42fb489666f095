from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .database.bootstrap import apply_schema, ensure_super_admin, list_tables

from .container import Container, build_container
from .common.errors import register_error_handlers
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .payroll.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _bootstrap_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_super_admin(
            db_config,
            username=getattr(settings, "SUPER_ADMIN_USERNAME", "superadmin"),
            password=getattr(settings, "SUPER_ADMIN_PASSWORD", ""),
        )


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given (tests) the database is never touched.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        _bootstrap_database(settings, db_config)
        container = build_container(db_config=db_config, settings=settings)

    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_dashboard(app, container)

    @app.get("/api/health")
    def health():
        return jsonify({"status": "OK", "timestamp": datetime.now().isoformat(timespec="seconds")})

    return app
