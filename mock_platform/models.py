"""
Database models for the stand-in automation platform.

Each model maps to one object the suite creates: learning instances over
the REST API, forms and task bots through the UI.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from mock_platform import db


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_utc_iso(value: datetime | None) -> str | None:
    """
    Convert datetime to an ISO-8601 UTC string.

    SQLite commonly returns naive datetime values even when timezone-aware
    columns are declared, so naive values are treated as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


def _new_instance_id() -> str:
    return f"li-{uuid.uuid4().hex[:16]}"


class LearningInstance(db.Model):
    """
    A learning instance created through ``POST /api/v1/learning-instances``.

    Attributes:
        id: Opaque identifier assigned on creation.
        name: Caller-supplied, unique name.
        description: Optional free text.
        config: Arbitrary JSON configuration mapping.
        status: Lifecycle status; new instances start as ``created``.
    """

    __tablename__ = "learning_instances"

    id: str = db.Column(db.String(40), primary_key=True, default=_new_instance_id)
    name: str = db.Column(db.String(200), nullable=False, unique=True)
    description: str | None = db.Column(db.Text, nullable=True)
    config: dict | None = db.Column(db.JSON, nullable=True)
    status: str = db.Column(db.String(20), nullable=False, default="created")
    created_at: datetime = db.Column(db.DateTime(timezone=True), nullable=False, default=_utc_now)
    updated_at: datetime = db.Column(
        db.DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "config": self.config,
            "status": self.status,
            "createdAt": _to_utc_iso(self.created_at),
            "updatedAt": _to_utc_iso(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<LearningInstance {self.id}: {self.name}>"


class Form(db.Model):
    """A form built in the designer; ``elements`` is the ordered placement list."""

    __tablename__ = "forms"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(200), nullable=False)
    description: str | None = db.Column(db.Text, nullable=True)
    elements: list = db.Column(db.JSON, nullable=False, default=list)
    uploaded_file: str | None = db.Column(db.String(255), nullable=True)
    saved_at: datetime | None = db.Column(db.DateTime(timezone=True), nullable=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "elements": self.elements or [],
            "uploadedFile": self.uploaded_file,
            "savedAt": _to_utc_iso(self.saved_at),
        }


class TaskBot(db.Model):
    """A task bot built in the editor; ``actions`` is the ordered action list."""

    __tablename__ = "task_bots"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(200), nullable=False)
    description: str | None = db.Column(db.Text, nullable=True)
    actions: list = db.Column(db.JSON, nullable=False, default=list)
    saved_at: datetime | None = db.Column(db.DateTime(timezone=True), nullable=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "actions": self.actions or [],
            "savedAt": _to_utc_iso(self.saved_at),
        }
