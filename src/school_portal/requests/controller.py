from __future__ import annotations

from flask import Flask

from ..common.web import json_view, make_guards, ok, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    current_user = container.auth_service.current_user
    login_required, _ = make_guards(current_user)
    approvals = container.approval_service

    @app.route("/api/requests", methods=["GET"], endpoint="api_request_kinds")
    @login_required
    @json_view
    def api_request_kinds():
        return ok(approvals.kinds_for(current_user().role))

    @app.route("/api/requests/<kind>", methods=["GET"], endpoint="api_pending_requests")
    @login_required
    @json_view
    def api_pending_requests(kind: str):
        return ok(approvals.pending(current_user().role, kind))

    @app.route("/api/requests/<kind>/<request_id>/decision", methods=["POST"], endpoint="api_process_request")
    @login_required
    @json_view
    def api_process_request(kind: str, request_id: str):
        decision = approvals.process(current_user().role, kind, request_id, request_json().get("decision", ""))
        return ok({"requestId": request_id, "status": decision.value}, message=f"Request {decision.value.lower()}")
