from __future__ import annotations

from flask import Flask

from ..common.web import json_view, make_guards, ok, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    current_user = container.auth_service.current_user
    login_required, _ = make_guards(current_user)
    leaves = container.leave_service

    @app.route("/api/leaves", methods=["GET"], endpoint="api_my_leaves")
    @login_required
    @json_view
    def api_my_leaves():
        return ok(leaves.my_applications())

    @app.route("/api/leaves", methods=["POST"], endpoint="api_apply_leave")
    @login_required
    @json_view
    def api_apply_leave():
        application = leaves.apply(current_user(), request_json())
        return ok(application, message="Leave application submitted successfully.", status=201)

    @app.route("/api/leaves/balances", methods=["GET"], endpoint="api_leave_balances")
    @login_required
    @json_view
    def api_leave_balances():
        return ok([b.to_dict() for b in leaves.balances(current_user())])
