from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..users.model import Teacher


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    """The request JSON when it is an object, otherwise an empty dict."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def make_guards(container):
    """Build the login/teacher route decorators bound to a container."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = container.auth_service.current_user()
            if user is None:
                return fail("Please sign in to continue", 401)
            g.current_user = user
            return view(*args, **kwargs)

        return wrapper

    def teacher_required(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if not isinstance(g.current_user, Teacher):
                return fail("Only teachers can do this", 403)
            return view(*args, **kwargs)

        return wrapper

    return login_required, teacher_required
