from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .bunk_plans.controller import register as register_bunk_plans
from .container import build_container
from .core.exceptions import DomainError, ValidationError
from .dashboard.controller import register as register_dashboard
from .events.controller import register as register_events
from .groups.controller import register as register_groups
from .logging_config import init_logging
from .notifications.controller import register as register_notifications
from .subjects.controller import register as register_subjects
from .timetables.controller import register as register_timetables
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED_DEMO_DATA",
    "CURRENT_USER_ID",
)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        logger.exception("Domain error while handling request")
        return jsonify({"message": "Internal server error"}), 500


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.secret_key = app.config.get("SECRET_KEY")
    if overrides:
        app.config.update(overrides)

    init_logging(app)
    _register_error_handlers(app)

    container = build_container(seed_demo_data=bool(app.config.get("SEED_DEMO_DATA", True)))
    app.extensions["bunk_buddy.container"] = container

    register_users(app, container)
    register_subjects(app, container)
    register_groups(app, container)
    register_events(app, container)
    register_notifications(app, container)
    register_bunk_plans(app, container)
    register_timetables(app, container)
    register_dashboard(app, container)

    logger.info("BunkBuddy ready (settings=%s)", settings_module)
    return app
