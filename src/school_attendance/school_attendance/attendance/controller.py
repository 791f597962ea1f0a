from __future__ import annotations

import logging
from datetime import date

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_status
from ..common.web import fail, json_body, make_guards
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError
from .export import export_filename
from .filters import AttendanceFilter
from .service import parse_entries

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required, teacher_required = make_guards(container)

    def _parse_date(value: str, field_name: str) -> date:
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")

    def _parse_filter(today: date) -> AttendanceFilter:
        """Query-string filters; the range defaults to the last 30 days."""

        default = AttendanceFilter.last_days(today)
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        status_s = request.args.get("status")

        return AttendanceFilter(
            start=_parse_date(start_s, "start") if start_s else default.start,
            end=_parse_date(end_s, "end") if end_s else default.end,
            class_id=request.args.get("class_id") or None,
            status=require_status(status_s) if status_s else None,
            student_id=request.args.get("student_id") or None,
        )

    def _parse_page() -> int:
        try:
            return int(request.args.get("page") or 1)
        except ValueError:
            raise ValidationError("page must be a number")

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        try:
            flt = _parse_filter(container.clock().date())
            view = container.attendance_service.history(g.current_user, flt, page=_parse_page())
        except ValidationError as e:
            return fail(str(e), 400)

        return jsonify(
            {
                "success": True,
                "records": list(view.page.items),
                "page": view.page.page,
                "per_page": view.page.per_page,
                "total_items": view.page.total_items,
                "total_pages": view.page.total_pages,
                "stats": view.stats.to_dict(),
            }
        ), 200

    @app.route("/api/attendance.csv", methods=["GET"], endpoint="attendance_csv")
    @login_required
    def attendance_csv():
        today = container.clock().date()
        try:
            flt = _parse_filter(today)
        except ValidationError as e:
            return fail(str(e), 400)

        csv_text = container.attendance_service.export_csv(g.current_user, flt)
        return app.response_class(
            csv_text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(today)}"},
        )

    @app.route("/api/attendance/roster", methods=["GET"], endpoint="attendance_roster")
    @teacher_required
    def attendance_roster():
        try:
            roster = container.attendance_service.default_roster(g.current_user, request.args.get("class_id"))
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)

        return jsonify({"success": True, "records": [e.to_dict() for e in roster]}), 200

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_submit")
    @teacher_required
    def attendance_submit():
        payload = json_body()
        try:
            record = container.attendance_service.submit(
                g.current_user,
                class_id=payload.get("class_id"),
                date=payload.get("date"),
                entries=parse_entries(payload.get("records") or []),
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except Exception:
            logger.exception("Saving attendance failed")
            return fail("System error while saving attendance", 500)

        return jsonify({"success": True, "message": "Attendance saved successfully", "record": record.to_dict()}), 200
