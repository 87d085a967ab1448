from __future__ import annotations

from flask import Flask, request

from ..common.web import json_view, make_guards, month_args, ok
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .calendar import calendar_to_csv
from .service import StaffCalendarView

STAFF_MANAGERS = (Role.REGISTRAR, Role.PRINCIPAL)


def register(app: Flask, container: Container) -> None:
    login_required, roles_required = make_guards(container.auth_service.current_user)
    service = container.calendar_service

    def _staff_calendar(staff_id: str):
        today = container.clock()
        year, month = month_args(today.year, today.month)
        try:
            delta = int(request.args.get("delta", 0))
        except ValueError:
            raise ValidationError("delta must be a number")

        view = StaffCalendarView(service, container.bus, year=year, month=month)
        try:
            if delta:
                view.change_month(delta)
            return view.select_staff(staff_id)
        finally:
            view.close()

    @app.route("/api/staff", methods=["GET"], endpoint="api_staff_list")
    @roles_required(STAFF_MANAGERS)
    @json_view
    def api_staff_list():
        return ok(service.list_staff())

    @app.route("/api/staff/<staff_id>/calendar", methods=["GET"], endpoint="api_staff_calendar")
    @roles_required(STAFF_MANAGERS)
    @json_view
    def api_staff_calendar(staff_id: str):
        return ok(_staff_calendar(staff_id).to_dict())

    @app.route("/api/staff/<staff_id>/calendar.csv", methods=["GET"], endpoint="api_staff_calendar_csv")
    @roles_required(STAFF_MANAGERS)
    @json_view
    def api_staff_calendar_csv(staff_id: str):
        calendar = _staff_calendar(staff_id)
        filename = f"staff_{staff_id}_{calendar.year:04d}{calendar.month:02d}.csv"
        return app.response_class(
            calendar_to_csv(calendar).encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/me/calendar", methods=["GET"], endpoint="api_my_calendar")
    @login_required
    @json_view
    def api_my_calendar():
        today = container.clock()
        year, month = month_args(today.year, today.month)
        return ok(service.my_month(year, month).to_dict())
