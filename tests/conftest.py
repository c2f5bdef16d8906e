"""
Shared pytest fixtures for the automation platform test suite.

Two kinds of suites live under ``tests/``:

* Live suites (``e2e``, ``api``, ``smoke``) drive the real platform and
  read their targets and credentials from :class:`config.Settings`.
* Offline suites (``ui``, ``integration``, ``contracts``, ``unit``) drive
  the same page objects and API client against the stand-in platform in
  ``mock_platform``, served from a background thread on a free port.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- A real HTTP server for Playwright and requests, not a test client
- Settings objects built per suite instead of global environment reads
- Test data from Faker
"""

import os
import threading
from collections.abc import Generator

import pytest
from faker import Faker
from werkzeug.serving import make_server

# Set testing environment before importing the stand-in app
os.environ["FLASK_ENV"] = "testing"

from mock_platform import create_app, db
from mock_platform.models import Form, LearningInstance, TaskBot
from shared.config import Settings, get_settings


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Settings Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def settings() -> Settings:
    """
    Settings for the live suites, loaded from the environment and ``.env``.

    Returns:
        The process-wide Settings instance.
    """
    return get_settings()


# -----------------------------------------------------------------------------
# Stand-in Platform Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def mock_app(tmp_path_factory):
    """
    Create the stand-in platform for the test session.

    The database lives in a per-session temporary directory so runs never
    see each other's rows.

    Yields:
        Flask application instance configured for testing.
    """
    db_path = tmp_path_factory.mktemp("mock_platform") / "platform.db"
    application = create_app(
        "testing",
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}?check_same_thread=False"},
    )
    yield application


@pytest.fixture(scope="session")
def mock_server(mock_app) -> Generator[str, None, None]:
    """
    Serve the stand-in platform over real HTTP.

    Binds to port 0 so the OS picks a free port, then shuts the server
    down at the end of the session.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server("127.0.0.1", 0, mock_app, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()

    yield f"http://127.0.0.1:{server.server_port}"

    server.shutdown()
    server_thread.join(timeout=5)


@pytest.fixture(scope="session")
def mock_settings(mock_app, mock_server) -> Settings:
    """
    Settings pointing every suite component at the stand-in platform.

    Returns:
        Settings with the stand-in's URLs, credentials and token.
    """
    return Settings(
        ui_base_url=mock_server,
        ui_username=mock_app.config["MOCK_USERNAME"],
        ui_password=mock_app.config["MOCK_PASSWORD"],
        headless=True,
        api_base_url=f"{mock_server}/api/v1",
        api_token=mock_app.config["MOCK_API_TOKEN"],
    )


@pytest.fixture
def mock_db(mock_app):
    """
    Clear every stand-in table before and after a test.

    Rows are deleted rather than tables dropped, since the server thread
    keeps its own connections open.
    """
    with mock_app.app_context():
        for model in (LearningInstance, Form, TaskBot):
            db.session.query(model).delete()
        db.session.commit()
        yield db
        db.session.rollback()
        for model in (LearningInstance, Form, TaskBot):
            db.session.query(model).delete()
        db.session.commit()


@pytest.fixture
def fail_saves(mock_app) -> Generator[None, None, None]:
    """Make form and task bot saves answer 500 for the duration of a test."""
    mock_app.config["MOCK_FAIL_SAVES"] = True
    yield
    mock_app.config["MOCK_FAIL_SAVES"] = False


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def instance_description() -> str:
    """A realistic learning-instance description."""
    return fake.sentence(nb_words=8)
