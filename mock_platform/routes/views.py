"""
HTML view routes for the stand-in platform.

Routes:
    GET/POST /login                         - Login form (session auth)
    GET      /logout                        - Clear the session
    GET      /home                          - Dashboard
    GET      /automation                    - Automation area with Create menu
    GET/POST /automation/forms/new          - Create-form dialog
    GET      /automation/forms/<id>         - Form designer
    POST     /automation/forms/<id>/upload  - Document upload from the designer
    POST     /automation/forms/<id>/save    - Save designer state (JSON)
    GET/POST /automation/taskbots/new       - Create-task-bot dialog
    GET      /automation/taskbots/<id>      - Task bot editor
    POST     /automation/taskbots/<id>/save - Save editor state (JSON)
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from functools import wraps

from flask import (
    Blueprint,
    abort,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)
from sqlalchemy import select
from werkzeug.utils import secure_filename

from mock_platform import db
from mock_platform.models import Form, TaskBot

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def login_required(view_func: Callable):
    """Redirect anonymous visitors to the login page."""

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        if not session.get("username"):
            return redirect(url_for("views.login"))
        return view_func(*args, **kwargs)

    return wrapper


def _save_rejected():
    """Answer 500 when the app is configured to fail saves."""
    if current_app.config.get("MOCK_FAIL_SAVES"):
        logger.warning("Rejecting save for %s (MOCK_FAIL_SAVES)", request.path)
        return jsonify({"error": "Save failed"}), 500
    return None


@views_bp.route("/")
def index():
    if session.get("username"):
        return redirect(url_for("views.home"))
    return redirect(url_for("views.login"))


@views_bp.route("/login", methods=["GET", "POST"])
def login():
    """Render the login form and check submitted credentials."""
    error = None
    if request.method == "POST":
        email = request.form.get("email", "")
        password = request.form.get("password", "")
        valid_user = hmac.compare_digest(email, current_app.config["MOCK_USERNAME"])
        valid_password = hmac.compare_digest(password, current_app.config["MOCK_PASSWORD"])
        if valid_user and valid_password:
            session["username"] = email
            logger.info("User %s logged in", email)
            return redirect(url_for("views.home"))
        error = "Invalid email or password"
        logger.info("Rejected login for %s", email)
    return render_template("login.html", error=error), 401 if error else 200


@views_bp.route("/logout")
def logout():
    session.clear()
    return redirect(url_for("views.login"))


@views_bp.route("/home")
@login_required
def home():
    forms = db.session.scalars(select(Form).order_by(Form.id.desc())).all()
    task_bots = db.session.scalars(select(TaskBot).order_by(TaskBot.id.desc())).all()
    return render_template("home.html", forms=forms, task_bots=task_bots)


@views_bp.route("/automation")
@login_required
def automation():
    return render_template("automation.html")


# -----------------------------------------------------------------------------
# Forms
# -----------------------------------------------------------------------------

@views_bp.route("/automation/forms/new", methods=["GET", "POST"])
@login_required
def new_form():
    """Create-form dialog; on success opens the designer."""
    error = None
    if request.method == "POST":
        name = request.form.get("formName", "").strip()
        if name:
            form = Form(name=name, description=request.form.get("description") or None, elements=[])
            db.session.add(form)
            db.session.commit()
            logger.info("Created form %s (%s)", form.id, form.name)
            return redirect(url_for("views.form_designer", form_id=form.id))
        error = "Form name is required"
    return render_template("new_form.html", error=error)


@views_bp.route("/automation/forms/<int:form_id>")
@login_required
def form_designer(form_id: int):
    form = db.session.get(Form, form_id) or abort(404)
    return render_template("form_designer.html", form=form)


@views_bp.route("/automation/forms/<int:form_id>/upload", methods=["POST"])
@login_required
def upload_document(form_id: int):
    form = db.session.get(Form, form_id) or abort(404)
    uploaded = request.files.get("document")
    if uploaded is None or not uploaded.filename:
        return jsonify({"error": "No file supplied"}), 400
    form.uploaded_file = secure_filename(uploaded.filename)
    db.session.commit()
    logger.info("Form %s received document %s", form.id, form.uploaded_file)
    return jsonify({"fileName": form.uploaded_file, "message": "Document uploaded successfully"}), 200


@views_bp.route("/automation/forms/<int:form_id>/save", methods=["POST"])
@login_required
def save_form(form_id: int):
    form = db.session.get(Form, form_id) or abort(404)
    rejected = _save_rejected()
    if rejected:
        return rejected

    data = request.get_json(silent=True) or {}
    form.elements = data.get("elements", [])
    form.saved_at = datetime.now(timezone.utc)
    db.session.commit()
    logger.info("Saved form %s with %d elements", form.id, len(form.elements))
    return jsonify(form.to_dict()), 200


# -----------------------------------------------------------------------------
# Task bots
# -----------------------------------------------------------------------------

@views_bp.route("/automation/taskbots/new", methods=["GET", "POST"])
@login_required
def new_task_bot():
    """Create-task-bot dialog; on success opens the editor."""
    error = None
    if request.method == "POST":
        name = request.form.get("taskName", "").strip()
        if name:
            task_bot = TaskBot(name=name, description=request.form.get("description") or None, actions=[])
            db.session.add(task_bot)
            db.session.commit()
            logger.info("Created task bot %s (%s)", task_bot.id, task_bot.name)
            return redirect(url_for("views.task_bot_editor", task_bot_id=task_bot.id))
        error = "Task name is required"
    return render_template("new_task_bot.html", error=error)


@views_bp.route("/automation/taskbots/<int:task_bot_id>")
@login_required
def task_bot_editor(task_bot_id: int):
    task_bot = db.session.get(TaskBot, task_bot_id) or abort(404)
    return render_template("task_bot_editor.html", task_bot=task_bot)


@views_bp.route("/automation/taskbots/<int:task_bot_id>/save", methods=["POST"])
@login_required
def save_task_bot(task_bot_id: int):
    task_bot = db.session.get(TaskBot, task_bot_id) or abort(404)
    rejected = _save_rejected()
    if rejected:
        return rejected

    data = request.get_json(silent=True) or {}
    task_bot.actions = data.get("actions", [])
    task_bot.saved_at = datetime.now(timezone.utc)
    db.session.commit()
    logger.info("Saved task bot %s with %d actions", task_bot.id, len(task_bot.actions))
    return jsonify(task_bot.to_dict()), 200
