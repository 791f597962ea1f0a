from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .config import get_settings_module
from .common.datetime_utils import now_local
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .storage.session_storage import FlaskSessionStorage
from .users.controller import register as register_users


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_DIR"] = getattr(settings, "DATA_DIR", "data")
    app.config["DEMO_PASSWORD"] = getattr(settings, "DEMO_PASSWORD", "password123")
    app.config["SIMULATED_LATENCY_SECONDS"] = float(getattr(settings, "SIMULATED_LATENCY_SECONDS", 0.0))
    app.config.update(overrides or {})

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.INFO)
        print("[school-attendance] settings=", settings_module, " data_dir=", app.config["DATA_DIR"])

    container = build_container(
        session_storage=FlaskSessionStorage(),
        data_dir=app.config["DATA_DIR"],
        storage=app.config.get("STORAGE"),
        demo_password=app.config["DEMO_PASSWORD"],
        latency_seconds=app.config["SIMULATED_LATENCY_SECONDS"],
        clock=app.config.get("CLOCK") or now_local,
    )
    app.extensions["school_attendance"] = container

    register_users(app, container)
    register_classes(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)

    return app
