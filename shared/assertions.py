"""
Assertion helpers for API responses.

Each helper raises one of the suite's failure types with enough context
(endpoint, expected vs. actual, payload) to diagnose the failure from the
pytest report alone.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from shared.api_client import ApiResponse
from shared.contracts import assert_matches_contract
from shared.errors import HttpStatusError, SchemaAssertionError

ID_PATTERN = re.compile(r"^[A-Za-z0-9\-_]+$")

# Status values a freshly created learning instance may report.
CREATED_STATUSES = frozenset({"active", "created", "pending", "ready"})

CONTRACT_RESPONSES = {
    "create": ("/learning-instances", "post", 201),
    "fetch": ("/learning-instances/{instance_id}", "get", 200),
}


def assert_status(response: ApiResponse, expected: Iterable[int]) -> None:
    """Fail with HttpStatusError unless ``response.status`` is in ``expected``."""
    expected = tuple(expected)
    if response.status not in expected:
        raise HttpStatusError(response.status, expected, response.data, response.url)


def assert_status_range(response: ApiResponse, low: int, high: int) -> None:
    """Fail unless ``low <= status < high``."""
    assert_status(response, range(low, high))


def assert_response_time(response: ApiResponse, max_ms: float) -> None:
    if response.elapsed_ms >= max_ms:
        raise AssertionError(
            f"{response.url} took {response.elapsed_ms:.0f} ms (limit {max_ms:.0f} ms)"
        )


def _require(payload: dict[str, Any], field: str, expected_type: type) -> Any:
    if field not in payload:
        raise SchemaAssertionError(field, "field is missing", payload)
    value = payload[field]
    if not isinstance(value, expected_type):
        raise SchemaAssertionError(
            field,
            f"expected {expected_type.__name__}, got {type(value).__name__}",
            payload,
        )
    return value


def assert_iso_timestamp(payload: dict[str, Any], field: str) -> None:
    """``payload[field]`` must be a string in any ISO-8601 form ``datetime`` accepts."""
    value = _require(payload, field, str)
    try:
        datetime.fromisoformat(value)
    except ValueError as exc:
        raise SchemaAssertionError(field, f"not an ISO-8601 timestamp: {value!r}", payload) from exc


def assert_learning_instance(
    payload: Any,
    *,
    expected_name: str | None = None,
    expected_description: str | None = None,
    operation: str = "create",
) -> dict[str, Any]:
    """
    Check a learning-instance body field by field and against the contract.

    Args:
        payload: Decoded response body.
        expected_name: When given, ``name`` must equal it.
        expected_description: When given and the body carries a
            description, it must equal this value.
        operation: ``"create"`` validates against the POST contract,
            ``"fetch"`` against the GET contract.

    Returns:
        The payload, typed as a dict, for chaining.

    Raises:
        SchemaAssertionError: On the first missing or mismatched field.
    """
    if not isinstance(payload, dict) or not payload:
        raise SchemaAssertionError("", "expected a non-empty JSON object", payload)

    instance_id = _require(payload, "id", str)
    if not instance_id:
        raise SchemaAssertionError("id", "must be non-empty", payload)
    if not ID_PATTERN.fullmatch(instance_id):
        raise SchemaAssertionError("id", f"{instance_id!r} does not match {ID_PATTERN.pattern}", payload)

    name = _require(payload, "name", str)
    if expected_name is not None and name != expected_name:
        raise SchemaAssertionError("name", f"expected {expected_name!r}, got {name!r}", payload)

    if payload.get("description") is not None:
        description = _require(payload, "description", str)
        if expected_description is not None and description != expected_description:
            raise SchemaAssertionError(
                "description",
                f"expected {expected_description!r}, got {description!r}",
                payload,
            )
    if "status" in payload:
        _require(payload, "status", str)
    if payload.get("config") is not None:
        _require(payload, "config", dict)
    for timestamp_field in ("createdAt", "updatedAt"):
        if timestamp_field in payload:
            assert_iso_timestamp(payload, timestamp_field)

    path_template, method, status_code = CONTRACT_RESPONSES[operation]
    assert_matches_contract(
        payload, path_template=path_template, method=method, status_code=status_code
    )
    return payload


def assert_instance_status(payload: dict[str, Any], allowed: Iterable[str] = CREATED_STATUSES) -> None:
    """When a status is reported, it must be one of ``allowed`` (case-insensitive)."""
    status = payload.get("status")
    if status is None:
        return
    allowed = {value.lower() for value in allowed}
    if status.lower() not in allowed:
        raise SchemaAssertionError("status", f"{status!r} not in {sorted(allowed)}", payload)


def assert_same_instance(created: dict[str, Any], fetched: Any) -> None:
    """The fetched record must carry the created record's ``id`` and ``name``."""
    if not isinstance(fetched, dict):
        raise SchemaAssertionError("", "expected a JSON object", fetched)
    for field in ("id", "name"):
        if field not in fetched:
            raise SchemaAssertionError(field, "field is missing", fetched)
        if fetched[field] != created[field]:
            raise SchemaAssertionError(
                field,
                f"fetched {fetched[field]!r} does not match created {created[field]!r}",
                fetched,
            )
