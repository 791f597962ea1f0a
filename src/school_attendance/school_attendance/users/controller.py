from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..common.web import fail, json_body, make_guards
from ..container import Container
from ..core.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required, teacher_required = make_guards(container)

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = json_body()
        email = str(payload.get("email") or "").strip()
        password = str(payload.get("password") or "")

        try:
            user = container.auth_service.sign_in(email, password)
            return jsonify({"success": True, "message": f"Welcome back, {user.name}!", "user": user.to_dict()}), 200
        except AuthenticationError as e:
            return fail(str(e), 401)
        except Exception:
            logger.exception("Sign-in failed")
            return fail("System error while signing in", 500)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.sign_out()
        return jsonify({"success": True, "message": "Logged out successfully"}), 200

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, "user": g.current_user.to_dict()}), 200

    @app.route("/api/students", endpoint="students")
    @teacher_required
    def students():
        try:
            rows = container.student_service.for_teacher(
                g.current_user,
                search=request.args.get("q", ""),
                class_name=request.args.get("class", ""),
            )
            return jsonify({"success": True, "students": rows}), 200
        except AuthorizationError as e:
            return fail(str(e), 403)
