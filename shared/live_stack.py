"""Reachability probes for the live platform used by the live suites and scripts."""

from __future__ import annotations

import time
from collections.abc import Generator
from dataclasses import dataclass

import pytest
import requests

from shared.config import API_TOKEN_PLACEHOLDER


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one reachability or auth probe."""

    url: str
    reachable: bool
    status: int | None = None
    detail: str = ""

    def describe(self, name: str) -> str:
        if self.reachable:
            return f"OK    {name}: {self.url} - Accessible (Status: {self.status})"
        if self.status is not None:
            return f"WARN  {name}: {self.url} - Status: {self.status}"
        return f"FAIL  {name}: {self.url} - {self.detail}"


def probe_url(url: str, timeout: float = 5) -> ProbeResult:
    """HEAD ``url``; anything below 400 counts as reachable."""
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=False)
    except requests.ConnectionError as exc:
        if "Name or service not known" in str(exc) or "nodename nor servname" in str(exc):
            return ProbeResult(url, False, detail="Domain not found")
        return ProbeResult(url, False, detail="Connection refused")
    except requests.RequestException as exc:
        return ProbeResult(url, False, detail=f"Error: {exc}")
    return ProbeResult(url, response.status_code < 400, response.status_code)


def probe_api_auth(api_base_url: str, token: str, timeout: float = 10) -> ProbeResult:
    """
    Call ``GET /learning-instances`` with the bearer token and classify the result.

    Returns:
        ProbeResult whose ``detail`` explains 200 / 401 / 404 / other outcomes.
    """
    url = f"{api_base_url.rstrip('/')}/learning-instances"
    if not token or token == API_TOKEN_PLACEHOLDER:
        return ProbeResult(url, False, detail="API token not configured")
    try:
        response = requests.get(
            url,
            headers={"Authorization": f"Bearer {token}", "Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        return ProbeResult(url, False, detail=f"Error - {exc}")

    status = response.status_code
    if status == 200:
        detail = "SUCCESS"
    elif status == 401:
        detail = "FAILED - Unauthorized (Invalid token?)"
    elif status == 404:
        detail = "Token might be valid, but endpoint not found"
    else:
        detail = f"Status {status}"
    return ProbeResult(url, status == 200, status, detail)


def wait_for_reachable(url: str, timeout: int = 30, interval: int = 1) -> bool:
    """Poll ``url`` until it answers below 400 or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if probe_url(url, timeout=2).reachable:
            return True
        time.sleep(interval)
    return False


def live_target_url(url: str, *, suite_name: str, timeout: int = 30) -> Generator[str, None, None]:
    """
    Yield ``url`` for a live suite once it is reachable.

    Skips the calling suite when the platform does not answer in time, since
    the live suites depend on an external service outside our control.
    """
    if not wait_for_reachable(url, timeout=timeout):
        pytest.skip(f"{url} is not reachable; skipping {suite_name} tests")
    yield url
