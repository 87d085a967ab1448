from __future__ import annotations

from flask import Flask

from ..common.web import json_view, make_guards, ok, request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service
    login_required, _ = make_guards(auth.current_user)

    @app.route("/api/auth/login", methods=["POST"], endpoint="api_login")
    @json_view
    def api_login():
        data = request_json()
        result = auth.login(data.get("identifier", ""), data.get("password", ""))
        if result.otp_required:
            return ok({"otpRequired": True, "userId": result.user.user_id}, message="OTP sent")
        return ok({"otpRequired": False, "user": result.user.to_api()}, message="Logged in")

    @app.route("/api/auth/verify-otp", methods=["POST"], endpoint="api_verify_otp")
    @json_view
    def api_verify_otp():
        data = request_json()
        user = auth.verify_otp(data.get("userId", ""), data.get("otp", ""))
        return ok({"user": user.to_api()}, message="Logged in")

    @app.route("/api/auth/logout", methods=["POST"], endpoint="api_logout")
    @json_view
    def api_logout():
        auth.logout()
        return ok(message="Logged out")

    @app.route("/api/auth/session", methods=["GET"], endpoint="api_session")
    @json_view
    def api_session():
        user = auth.check_session()
        return ok({"user": user.to_api() if user else None})

    @app.route("/api/profile", methods=["PUT"], endpoint="api_update_profile")
    @login_required
    @json_view
    def api_update_profile():
        user = auth.update_profile(request_json())
        return ok({"user": user.to_api()}, message="Profile updated")

    @app.route("/api/auth/change-password", methods=["POST"], endpoint="api_change_password")
    @login_required
    @json_view
    def api_change_password():
        data = request_json()
        auth.change_password(data.get("current", ""), data.get("newPassword", ""))
        return ok(message="Password changed")
