from __future__ import annotations

from flask import Flask

from ..common.web import fail, json_view, make_guards, ok
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service.current_user)

    loaders = {
        Role.SUPER_ADMIN.value: container.admin_api.get_dashboard_data,
        Role.PRINCIPAL.value: container.principal_api.get_dashboard_data,
        Role.REGISTRAR.value: container.registrar_api.get_dashboard_data,
        Role.TEACHER.value: container.teacher_api.get_dashboard_data,
        Role.STUDENT.value: container.student_api.get_dashboard_data,
        Role.PARENT.value: container.parent_api.get_dashboard_data,
        Role.LIBRARIAN.value: container.librarian_api.get_dashboard_data,
    }

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @login_required
    @json_view
    def api_dashboard():
        user = container.auth_service.current_user()
        loader = loaders.get(user.role)
        if loader is None:
            return fail("No dashboard for this role", 404)
        return ok(loader())

    @app.route("/api/events", methods=["GET"], endpoint="api_school_events")
    @login_required
    @json_view
    def api_school_events():
        user = container.auth_service.current_user()
        if not user.branch_id:
            return ok([])
        return ok(container.shared_api.get_school_events(user.branch_id))
