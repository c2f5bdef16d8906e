"""
Thin HTTP client for the platform REST API.

Wraps a ``requests.Session`` that carries the bearer token and JSON
headers, and hands back a small :class:`ApiResponse` for every call.
The client deliberately does not interpret status codes: a 4xx/5xx
comes back as a normal response for the test to assert on, while
transport failures (connection refused, DNS, timeout) surface as the
underlying ``requests`` exception.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import requests

from shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class ApiResponse:
    """Decoded result of one API call."""

    status: int
    data: Any
    url: str
    elapsed_ms: float
    headers: dict[str, str] = field(default_factory=dict)
    is_json: bool = False

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status < 300


def _decode_body(response: requests.Response) -> tuple[Any, bool]:
    """
    Decode a response body.

    Returns:
        ``(data, True)`` when the body parses as JSON, ``(text, False)``
        otherwise, ``(None, False)`` when it is empty.
    """
    if not response.content:
        return None, False
    try:
        return response.json(), True
    except ValueError:
        return response.text, False


class ApiClient:
    """
    Authenticated JSON client bound to one base URL.

    Args:
        base_url: API root, e.g. ``https://host/api/v1``. Falls back to
            ``settings.api_base_url`` when None or empty.
        token: Bearer token. Falls back to ``settings.api_token`` when
            None or empty.
        settings: Settings used for the fallbacks. Defaults to the
            process-wide settings.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        *,
        settings: Settings | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not base_url or not token:
            settings = settings or get_settings()
            base_url = base_url or settings.api_base_url
            token = token or settings.api_token

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ApiClient":
        """Build a client from an explicit Settings object."""
        return cls(settings.api_base_url, settings.api_token, settings=settings, **kwargs)

    def url_for(self, path: str) -> str:
        """Join ``path`` onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, body: Any = None) -> ApiResponse:
        url = self.url_for(path)
        started = time.perf_counter()
        response = self.session.request(method, url, json=body, timeout=self.timeout)
        elapsed_ms = (time.perf_counter() - started) * 1000

        data, is_json = _decode_body(response)

        logger.info("%s %s -> %s (%.0f ms)", method, url, response.status_code, elapsed_ms)
        return ApiResponse(
            status=response.status_code,
            data=data,
            url=url,
            elapsed_ms=elapsed_ms,
            headers=dict(response.headers),
            is_json=is_json,
        )

    def post(self, path: str, body: Any) -> ApiResponse:
        """Send a JSON POST and return the decoded response."""
        return self._request("POST", path, body)

    def get(self, path: str) -> ApiResponse:
        """Send a GET and return the decoded response."""
        return self._request("GET", path)

    def close(self) -> None:
        """Close the underlying session and its pooled connections."""
        self.session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
