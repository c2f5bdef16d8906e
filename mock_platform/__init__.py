"""
Stand-in Automation Platform Flask Application Factory.

Serves a miniature copy of the automation platform: a login page, a
dashboard, the Automation area with its Create menu, a drag-and-drop form
designer, a task bot editor, and the learning-instance REST API.  The
offline UI and integration suites run the real page objects and API client
against it.

Blueprints:
  * **views_bp** -- server-rendered pages (session login).
  * **api_bp** -- JSON REST endpoints mounted at ``/api/v1`` (bearer token).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from mock_platform.config import get_config

db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix) :].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def create_app(config_name: str | None = None, overrides: dict[str, Any] | None = None) -> Flask:
    """
    Create and configure the stand-in platform.

    Args:
        config_name: Configuration environment name. When None, uses the
            ``FLASK_ENV`` environment variable.
        overrides: Extra config values applied after the config class,
            e.g. a per-session database URI.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info("Creating mock platform app with config: %s", config_class.__name__)

    os.makedirs(app.instance_path, exist_ok=True)
    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    db.init_app(app)

    from mock_platform.routes.api import api_bp
    from mock_platform.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api/v1")
    app.register_blueprint(views_bp)

    with app.app_context():
        db.create_all()
        logger.info("Mock platform database tables created")

    return app
