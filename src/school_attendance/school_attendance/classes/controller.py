from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import make_guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/api/classes", endpoint="classes")
    @login_required
    def classes():
        items = container.class_service.for_viewer(g.current_user, search=request.args.get("q", ""))
        return jsonify({"success": True, "classes": items}), 200
