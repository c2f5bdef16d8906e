"""
OpenAPI contract loading and payload validation.

The learning-instance contract lives in ``contracts/openapi.yaml``.
OpenAPI 3.0 expresses optional-null fields with ``nullable: true`` while
jsonschema wants an explicit ``null`` type, so the document is adapted
once before validation.
"""

from __future__ import annotations

import copy
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from shared.errors import SchemaAssertionError

CONTRACT_PATH = Path(__file__).resolve().parents[1] / "contracts" / "openapi.yaml"


@lru_cache(maxsize=1)
def load_openapi_spec() -> dict[str, Any]:
    """Load the raw OpenAPI document from disk."""
    with CONTRACT_PATH.open("r", encoding="utf-8") as contract_file:
        return yaml.safe_load(contract_file)


@lru_cache(maxsize=1)
def _load_jsonschema_ready_spec() -> dict[str, Any]:
    spec_copy = copy.deepcopy(load_openapi_spec())
    convert_nullable_fields_in_place(spec_copy)
    return spec_copy


def convert_nullable_fields_in_place(node: Any) -> None:
    """
    Recursively convert OpenAPI ``nullable`` into jsonschema-compatible forms.

    Rules used:
    - ``type: X`` + ``nullable: true`` becomes ``type: [X, "null"]``.
    - ``$ref`` + ``nullable: true`` becomes ``anyOf: [{$ref: ...}, {type: "null"}]``.
    """
    if isinstance(node, dict):
        for value in list(node.values()):
            convert_nullable_fields_in_place(value)

        if node.get("nullable") is True:
            node.pop("nullable", None)

            if "type" in node:
                node_type = node["type"]
                if isinstance(node_type, list):
                    if "null" not in node_type:
                        node_type.append("null")
                else:
                    node["type"] = [node_type, "null"]
            elif "$ref" in node:
                ref_value = node.pop("$ref")
                node["anyOf"] = [{"$ref": ref_value}, {"type": "null"}]
            else:
                node["anyOf"] = [{"type": "null"}]

    elif isinstance(node, list):
        for item in node:
            convert_nullable_fields_in_place(item)


def response_schema_for(path_template: str, method: str, status_code: int) -> dict[str, Any]:
    """Extract the JSON response schema for an endpoint/status pair."""
    operation = _load_jsonschema_ready_spec()["paths"][path_template][method.lower()]
    response = operation["responses"][str(status_code)]
    if "$ref" in response:
        # Shared responses live under components/responses.
        response_name = response["$ref"].rsplit("/", 1)[-1]
        response = _load_jsonschema_ready_spec()["components"]["responses"][response_name]
    return response["content"]["application/json"]["schema"]


def assert_matches_contract(
    payload: Any,
    *,
    path_template: str,
    method: str,
    status_code: int,
) -> None:
    """
    Validate ``payload`` against the contract for one endpoint response.

    Raises:
        SchemaAssertionError: With the failing path and endpoint context.
    """
    # Root schema with components so local refs resolve.
    validation_schema = copy.deepcopy(response_schema_for(path_template, method, status_code))
    validation_schema["components"] = _load_jsonschema_ready_spec()["components"]

    try:
        jsonschema.validate(
            instance=payload,
            schema=validation_schema,
            format_checker=jsonschema.FormatChecker(),
        )
    except jsonschema.ValidationError as exc:
        field_path = "/".join(str(part) for part in exc.path)
        raise SchemaAssertionError(
            field_path,
            f"{method.upper()} {path_template} ({status_code}) contract: {exc.message}",
            payload,
        ) from exc

