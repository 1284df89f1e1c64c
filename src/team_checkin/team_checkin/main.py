from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .checkins.controller import register as register_checkins
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .roster.loader import load_roster


def load_settings(settings_module: Optional[str] = None):
    return importlib.import_module(settings_module or get_settings_module())


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    A prebuilt container skips database bootstrap (used by tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        roster = load_roster(getattr(settings, "ROSTER_FILE", "") or None)
        container = build_container(
            db_config=db_config,
            roster=roster,
            enforce_roster=bool(getattr(settings, "ENFORCE_ROSTER", False)),
        )

        if app.config["DEBUG"]:
            app.logger.info(
                "[team-checkin] settings=%s db=%s teams=%d",
                settings_module,
                container.conn.config.describe(),
                len(roster.teams()),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            app.logger.info("[team-checkin] schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["team_checkin"] = container
    register_checkins(app, container)

    return app
