"""
Suite configuration module.

This module turns the process environment (optionally seeded from a
``.env`` file) into one immutable :class:`Settings` object.  Fixtures,
the API client and the helper scripts receive that object explicitly
instead of reading ``os.environ`` on their own, which keeps them easy to
drive from tests with hand-built settings.

Environment variables:
    UI_BASE_URL   - Root URL of the web application under test.
    UI_USERNAME   - Login email/username for the UI flows.
    UI_PASSWORD   - Login password for the UI flows.
    HEADLESS      - ``"false"`` shows the browser; anything else is headless.
    API_BASE_URL  - Root URL of the REST API under test.
    API_TOKEN     - Bearer token for the REST API.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_UI_BASE_URL = "https://community.automationanywhere.com"
DEFAULT_API_BASE_URL = "https://community.automationanywhere.com/api/v1"

# Value written by the setup script when no token was entered.
API_TOKEN_PLACEHOLDER = "your_api_token_here"


def _parse_headless(raw: str | None) -> bool:
    """Return False only for an explicit ``"false"``; default to headless."""
    if raw is None:
        return True
    return raw.strip().lower() != "false"


@dataclass(frozen=True)
class Settings:
    """
    Immutable run configuration shared by every suite.

    Attributes:
        ui_base_url: Root URL of the web application.
        ui_username: Login username/email.
        ui_password: Login password.
        headless: Whether browsers launch headless.
        api_base_url: Root URL of the REST API.
        api_token: Bearer token for the REST API.
    """

    ui_base_url: str = DEFAULT_UI_BASE_URL
    ui_username: str = ""
    ui_password: str = ""
    headless: bool = True
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from an environment mapping.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A populated, frozen Settings instance.
        """
        env = os.environ if environ is None else environ
        return cls(
            ui_base_url=(env.get("UI_BASE_URL") or DEFAULT_UI_BASE_URL).rstrip("/"),
            ui_username=env.get("UI_USERNAME", ""),
            ui_password=env.get("UI_PASSWORD", ""),
            headless=_parse_headless(env.get("HEADLESS")),
            api_base_url=(env.get("API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/"),
            api_token=env.get("API_TOKEN", ""),
        )

    @property
    def ui_configured(self) -> bool:
        """True when both UI credentials are present."""
        return bool(self.ui_username and self.ui_password)

    @property
    def api_configured(self) -> bool:
        """True when an API token other than the placeholder is present."""
        return bool(self.api_token) and self.api_token != API_TOKEN_PLACEHOLDER

    @property
    def masked_token(self) -> str:
        """Token prefix safe to print in logs and summaries."""
        if not self.api_token:
            return "NOT SET"
        return f"{self.api_token[:20]}..."


def load_settings(env_file: str | os.PathLike | None = None) -> Settings:
    """
    Load ``.env`` (without overriding real variables) and build Settings.

    Args:
        env_file: Explicit dotenv path. When None, python-dotenv searches
            upwards from the working directory.

    Returns:
        Settings built from the resulting environment.
    """
    if env_file is None:
        load_dotenv(override=False)
    else:
        load_dotenv(dotenv_path=env_file, override=False)
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
