"""Fixtures for the API integration tests against the stand-in platform."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from shared.api_client import ApiClient
from shared.config import Settings


@pytest.fixture
def api_client(mock_settings: Settings, mock_db) -> Generator[ApiClient, None, None]:
    """Authenticated client bound to the stand-in's ``/api/v1``."""
    with ApiClient.from_settings(mock_settings) as client:
        yield client


@pytest.fixture
def anonymous_client(mock_settings: Settings) -> Generator[ApiClient, None, None]:
    """Client sending a token the stand-in does not accept."""
    with ApiClient(mock_settings.api_base_url, "wrong-token") as client:
        yield client
