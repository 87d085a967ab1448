from __future__ import annotations

import pytest

from school_portal.auth.model import SessionUser
from school_portal.core.enums import RefreshTopic
from school_portal.core.exceptions import AuthorizationError, ValidationError
from school_portal.fees.payments import build_checkout_options, compute_payment_summary

DUES = [
    {"month": "April", "year": 2024, "total": 1000, "paid": 1000, "balance": 0, "status": "Paid"},
    {"month": "May", "year": 2024, "total": 1000, "paid": 400, "balance": 600, "status": "Partially Paid"},
    {"month": "June", "year": 2024, "total": 1000, "paid": 0, "balance": 1000, "status": "Due"},
    {"month": "July", "year": 2024, "total": 1000, "paid": 0, "balance": "1000", "status": "Due"},
    None,
]


@pytest.fixture
def parent() -> SessionUser:
    return SessionUser.from_api(
        {"id": "p-1", "name": "Pat", "role": "Parent", "branchId": "br-1", "email": "pat@home.test", "phone": "555"}
    )


@pytest.fixture
def student() -> SessionUser:
    return SessionUser.from_api({"id": "s-1", "name": "Sam", "role": "Student", "branchId": "br-1"})


def test_unpaid_dues_need_positive_numeric_balance():
    summary = compute_payment_summary(DUES, None, [])

    assert [d["month"] for d in summary.unpaid_dues] == ["May", "June"]
    assert summary.total_to_pay == 0


def test_total_is_previous_dues_plus_selected_months():
    summary = compute_payment_summary(DUES, 250, ["May", "June", "April", "July"])

    assert summary.previous_dues_to_pay == 250
    assert summary.selected_months == ["May", "June"]
    assert summary.total_to_pay == 1850


def test_non_list_dues_are_treated_as_empty():
    summary = compute_payment_summary(None, 300, ["May"])

    assert summary.unpaid_dues == ()
    assert summary.total_to_pay == 300


def test_checkout_amount_in_smallest_unit():
    summary = compute_payment_summary([{"month": "May", "balance": 1234.5, "status": "Due"}], 0, ["May"])

    options = build_checkout_options(
        summary,
        branch={"id": "br-1", "name": "North High", "paymentGatewayPublicKey": "rzp_test_key"},
        student={"id": "s-1", "name": "Sam"},
    )

    assert options["key"] == "rzp_test_key"
    assert options["amount"] == 123450
    assert options["currency"] == "INR"
    assert options["notes"]["paid_months"] == "May"


def test_checkout_requires_gateway_key():
    summary = compute_payment_summary(DUES, 0, ["May"])

    with pytest.raises(ValidationError, match="not configured"):
        build_checkout_options(summary, branch={"name": "North High"}, student={"id": "s-1"})


def test_checkout_requires_something_to_pay():
    summary = compute_payment_summary(DUES, 0, [])

    with pytest.raises(ValidationError):
        build_checkout_options(summary, branch={"paymentGatewayPublicKey": "k"}, student={"id": "s-1"})


def test_parent_summary_reads_child_fee_record(container, fake_http, parent):
    fake_http.add("GET", "/parent/children/s-1/fees/record", {"monthlyDues": DUES, "previousSessionDues": 100})

    summary = container.fee_service.summary(parent, "s-1", ["June"])

    assert summary.total_to_pay == 1100


def test_student_cannot_pay_for_someone_else(container, student):
    with pytest.raises(AuthorizationError):
        container.fee_service.summary(student, "s-2", ["June"])


def test_checkout_for_parent_prefills_payer(container, fake_http, parent):
    fake_http.add("GET", "/parent/children/s-1/fees/record", {"fees": {"monthlyDues": DUES, "previousSessionDues": 0}})
    fake_http.add("GET", "/general/branches/br-1", {"id": "br-1", "name": "North High", "paymentGatewayPublicKey": "k"})
    fake_http.add("GET", "/parent/children/s-1/profile", {"student": {"id": "s-1", "name": "Sam"}})

    options = container.fee_service.checkout_for(parent, "s-1", ["May"])

    assert options["amount"] == 60000
    assert options["description"] == "Fee payment for Sam"
    assert options["prefill"] == {"name": "Pat", "email": "pat@home.test", "contact": "555"}


def test_record_payment_posts_confirmed_id_and_refreshes(container, fake_http, student):
    fake_http.add("POST", "/student/fees/record-payment", None)
    seen = []
    container.bus.subscribe(seen.append, topics=[RefreshTopic.FEES])
    summary = compute_payment_summary(DUES, 50, ["May"])

    container.fee_service.record_payment(student, payment_id="pay_123", student_id="s-1", summary=summary)

    (call,) = fake_http.calls_to("POST", "/student/fees/record-payment")
    assert call.json == {
        "razorpay_payment_id": "pay_123",
        "notes": {"studentId": "s-1", "amountPaid": 650, "paidMonths": ["May"], "previousDuesPaid": 50},
    }
    assert len(seen) == 1


def test_parent_payment_goes_to_parent_endpoint(container, fake_http, parent):
    fake_http.add("POST", "/parent/fees/record-payment", None)

    container.fee_service.record_payment(
        parent, payment_id="pay_9", student_id="s-1", summary=compute_payment_summary(DUES, 0, ["June"])
    )

    assert len(fake_http.calls_to("POST", "/parent/fees/record-payment")) == 1


def test_record_payment_requires_payment_id(container, student):
    with pytest.raises(ValidationError):
        container.fee_service.record_payment(
            student, payment_id="", student_id="s-1", summary=compute_payment_summary(DUES, 0, ["May"])
        )
