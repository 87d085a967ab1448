from __future__ import annotations

from flask import Flask

from ..common.web import json_view, make_guards, ok, request_json
from ..container import Container
from ..core.enums import Role

PAYERS = (Role.STUDENT, Role.PARENT)


def register(app: Flask, container: Container) -> None:
    current_user = container.auth_service.current_user
    _, roles_required = make_guards(current_user)
    fees = container.fee_service

    def _student_and_months():
        data = request_json()
        user = current_user()
        student_id = data.get("studentId") or (user.user_id if user.role == Role.STUDENT.value else "")
        months = data.get("months") or []
        return user, str(student_id), [str(m) for m in months], data

    @app.route("/api/fees/summary", methods=["POST"], endpoint="api_fee_summary")
    @roles_required(PAYERS)
    @json_view
    def api_fee_summary():
        user, student_id, months, _ = _student_and_months()
        return ok(fees.summary(user, student_id, months).to_dict())

    @app.route("/api/fees/checkout", methods=["POST"], endpoint="api_fee_checkout")
    @roles_required(PAYERS)
    @json_view
    def api_fee_checkout():
        user, student_id, months, _ = _student_and_months()
        return ok(fees.checkout_for(user, student_id, months))

    @app.route("/api/fees/payments", methods=["POST"], endpoint="api_record_fee_payment")
    @roles_required(PAYERS)
    @json_view
    def api_record_fee_payment():
        user, student_id, months, data = _student_and_months()
        summary = fees.summary(user, student_id, months)
        payment = fees.record_payment(
            user,
            payment_id=data.get("paymentId", ""),
            student_id=student_id,
            summary=summary,
        )
        return ok(payment, message="Payment recorded", status=201)
