from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import make_guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        overview = container.dashboard_service.overview(g.current_user, today=container.clock().date())
        return jsonify({"success": True, "user": g.current_user.to_dict(), **overview}), 200
