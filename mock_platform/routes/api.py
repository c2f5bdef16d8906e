"""
REST API endpoints for learning instances.

Endpoints (mounted at ``/api/v1``):
    GET  /health                       - Health check (no auth)
    GET  /learning-instances           - List learning instances
    POST /learning-instances           - Create a learning instance
    GET  /learning-instances/<id>      - Fetch one learning instance
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable
from functools import wraps

from flask import Blueprint, Response, current_app, jsonify, request
from sqlalchemy import select

from mock_platform import db
from mock_platform.models import LearningInstance

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def require_token(view_func: Callable[..., tuple[Response, int] | Response]):
    """Reject requests without ``Authorization: Bearer <MOCK_API_TOKEN>``."""

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": "Missing or invalid Authorization header"}), 401
        token = auth_header[7:].strip()
        if not hmac.compare_digest(token, current_app.config["MOCK_API_TOKEN"]):
            return jsonify({"error": "Invalid token"}), 401
        return view_func(*args, **kwargs)

    return wrapper


def validate_instance_data(data: object) -> str | None:
    """
    Validate a create-learning-instance body.

    Returns:
        An error message, or None when the body is valid.
    """
    if not isinstance(data, dict):
        return "Request body must be a JSON object"
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return "'name' is required"
    if len(name) > 200:
        return "'name' must be 200 characters or less"
    if "description" in data and data["description"] is not None and not isinstance(data["description"], str):
        return "'description' must be a string"
    if "config" in data and data["config"] is not None and not isinstance(data["config"], dict):
        return "'config' must be an object"
    return None


@api_bp.route("/health", methods=["GET"])
def health() -> tuple[Response, int]:
    return jsonify({"status": "healthy", "service": "mock-platform"}), 200


@api_bp.route("/learning-instances", methods=["GET"])
@require_token
def list_learning_instances() -> tuple[Response, int]:
    """Return every learning instance, newest first."""
    stmt = select(LearningInstance).order_by(LearningInstance.created_at.desc())
    instances = db.session.scalars(stmt).all()
    return jsonify(
        {
            "learningInstances": [instance.to_dict() for instance in instances],
            "count": len(instances),
        }
    ), 200


@api_bp.route("/learning-instances", methods=["POST"])
@require_token
def create_learning_instance() -> tuple[Response, int]:
    """
    Create a learning instance.

    Returns:
        201 with the new record, 400 on an invalid body, 409 when the name
        is already taken.
    """
    data = request.get_json(silent=True)
    error = validate_instance_data(data)
    if error:
        return jsonify({"error": error}), 400

    existing = db.session.scalars(
        select(LearningInstance).where(LearningInstance.name == data["name"])
    ).first()
    if existing is not None:
        return jsonify({"error": f"Learning instance '{data['name']}' already exists"}), 409

    instance = LearningInstance(
        name=data["name"],
        description=data.get("description"),
        config=data.get("config") or {},
    )
    db.session.add(instance)
    db.session.commit()

    logger.info("Created learning instance %s (%s)", instance.id, instance.name)
    return jsonify(instance.to_dict()), 201


@api_bp.route("/learning-instances/<instance_id>", methods=["GET"])
@require_token
def get_learning_instance(instance_id: str) -> tuple[Response, int]:
    instance = db.session.get(LearningInstance, instance_id)
    if instance is None:
        return jsonify({"error": "Learning instance not found"}), 404
    return jsonify(instance.to_dict()), 200
