"""
Failure types raised by page objects and API assertions.

All of them derive from ``AssertionError`` so pytest reports them as
ordinary test failures rather than errors.  Nothing in the suite catches
and retries these; each one fails the scenario that raised it.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any


def _excerpt(payload: Any, limit: int = 800) -> str:
    """Render a payload for an error message, truncated to ``limit`` chars."""
    try:
        text = json.dumps(payload, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        text = repr(payload)
    if len(text) > limit:
        return f"{text[:limit]}... <truncated>"
    return text


class E2EError(AssertionError):
    """Base class for suite failures."""


class VisibilityTimeout(E2EError):
    """An expected element did not become visible (or match) in time."""

    def __init__(self, selector: str, timeout_ms: float, detail: str | None = None):
        self.selector = selector
        self.timeout_ms = timeout_ms
        message = f"Element not visible within {timeout_ms:.0f} ms: {selector}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class LoginVerificationError(E2EError):
    """The post-login heuristic concluded the browser is still on a login page."""

    def __init__(self, url: str, password_fields: int):
        self.url = url
        self.password_fields = password_fields
        super().__init__(
            "Login verification failed: still on login page or login form is visible.\n"
            f"URL: {url}\n"
            f"Password fields on page: {password_fields}"
        )


class HttpStatusError(E2EError):
    """A response status code was outside the expected set."""

    def __init__(self, status: int, expected: Iterable[int], body: Any = None, endpoint: str = ""):
        self.status = status
        self.expected = tuple(expected)
        self.body = body
        self.endpoint = endpoint
        super().__init__(
            "Unexpected HTTP status.\n"
            f"Endpoint: {endpoint or '<unknown>'}\n"
            f"Expected one of: {list(self.expected)}\n"
            f"Actual: {status}\n"
            f"Body:\n{_excerpt(body)}"
        )


class SchemaAssertionError(E2EError):
    """A response payload is missing a field or has the wrong shape/value."""

    def __init__(self, field: str, message: str, payload: Any = None):
        self.field = field
        self.payload = payload
        super().__init__(
            "Schema assertion failed.\n"
            f"Field: {field or '<root>'}\n"
            f"Message: {message}\n"
            f"Payload:\n{_excerpt(payload)}"
        )
