from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from ..api.parent import ParentApi
from ..api.shared import SharedApi
from ..api.student import StudentApi
from ..auth.model import SessionUser
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_PAYMENT_CURRENCY
from ..core.enums import RefreshTopic, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..events.bus import RefreshBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentSummary:
    total_to_pay: float
    previous_dues_to_pay: float
    selected_dues: tuple[dict, ...]
    unpaid_dues: tuple[dict, ...]

    @property
    def selected_months(self) -> list[str]:
        return [due["month"] for due in self.selected_dues]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalToPay": self.total_to_pay,
            "previousDuesToPay": self.previous_dues_to_pay,
            "selectedMonths": self.selected_months,
            "unpaidDues": list(self.unpaid_dues),
        }


def _is_amount(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def unpaid_dues(monthly_dues: Any) -> list[dict]:
    """Monthly dues that still need paying: not ``Paid`` and a positive numeric balance."""
    if not isinstance(monthly_dues, list):
        return []
    return [
        due
        for due in monthly_dues
        if isinstance(due, Mapping) and due.get("status") != "Paid" and _is_amount(due.get("balance")) and due["balance"] > 0
    ]


def compute_payment_summary(
    monthly_dues: Any,
    previous_session_dues: Optional[float],
    selected_months: Iterable[str],
) -> PaymentSummary:
    """Previous-session dues are always included; monthly balances only for selected months."""

    unpaid = unpaid_dues(monthly_dues)
    wanted = set(selected_months or [])
    previous = float(previous_session_dues) if _is_amount(previous_session_dues) else 0.0
    selected = [due for due in unpaid if isinstance(due.get("month"), str) and due["month"] in wanted]
    total = previous + sum(float(due["balance"]) for due in selected)
    return PaymentSummary(
        total_to_pay=total,
        previous_dues_to_pay=previous,
        selected_dues=tuple(selected),
        unpaid_dues=tuple(unpaid),
    )


def to_minor_units(amount: float) -> int:
    return int(round(amount * 100))


def build_checkout_options(
    summary: PaymentSummary,
    *,
    branch: Mapping[str, Any],
    student: Mapping[str, Any],
    payer: Optional[SessionUser] = None,
    currency: str = DEFAULT_PAYMENT_CURRENCY,
) -> dict[str, Any]:
    """Options handed to the payment gateway's checkout widget."""

    key = branch.get("paymentGatewayPublicKey")
    if not key:
        raise ValidationError("Online payment is not configured for this branch. Please contact administration.")
    if summary.total_to_pay <= 0:
        raise ValidationError("Please select at least one month to pay")

    amount = to_minor_units(summary.total_to_pay)
    prefill: dict[str, Any] = {}
    if payer is not None:
        prefill = {"name": payer.name, "email": payer.email, "contact": payer.phone}
    if not prefill.get("contact"):
        prefill["contact"] = (student.get("guardianInfo") or {}).get("phone")

    return {
        "key": key,
        "amount": amount,
        "currency": currency,
        "name": branch.get("name"),
        "description": f"Fee payment for {student.get('name', '')}".strip(),
        "prefill": prefill,
        "notes": {
            "student_id": student.get("id"),
            "student_name": student.get("name"),
            "branch_id": branch.get("id"),
            "paid_months": ", ".join(summary.selected_months),
            "previous_dues_paid": summary.previous_dues_to_pay,
            "amount_in_paise": amount,
        },
    }


class FeePaymentService:
    """Fee summaries, checkout options and recording of gateway-confirmed payments."""

    def __init__(
        self,
        student: StudentApi,
        parent: ParentApi,
        shared: SharedApi,
        bus: RefreshBus,
        *,
        currency: str = DEFAULT_PAYMENT_CURRENCY,
    ):
        self._student = student
        self._parent = parent
        self._shared = shared
        self._bus = bus
        self._currency = currency

    def _fee_record(self, user: SessionUser, student_id: str) -> Mapping[str, Any]:
        if user.role == Role.PARENT.value:
            record = self._parent.get_fee_record_for_student(student_id)
        elif user.role == Role.STUDENT.value:
            if student_id != user.user_id:
                raise AuthorizationError("Students can only pay their own fees")
            record = self._student.get_fee_record()
        else:
            raise AuthorizationError("Only students and parents can pay fees online")
        record = record or {}
        # dashboard payloads nest the record under "fees"
        return record.get("fees") or record

    def summary(self, user: SessionUser, student_id: str, selected_months: Iterable[str]) -> PaymentSummary:
        student_id = require_non_empty(student_id, "Student")
        record = self._fee_record(user, student_id)
        return compute_payment_summary(record.get("monthlyDues"), record.get("previousSessionDues"), selected_months)

    def checkout(
        self,
        user: SessionUser,
        *,
        branch: Mapping[str, Any],
        student: Mapping[str, Any],
        selected_months: Iterable[str],
    ) -> dict[str, Any]:
        summary = self.summary(user, str(student.get("id") or ""), selected_months)
        return build_checkout_options(summary, branch=branch, student=student, payer=user, currency=self._currency)

    def record_payment(
        self,
        user: SessionUser,
        *,
        payment_id: str,
        student_id: str,
        summary: PaymentSummary,
    ) -> dict[str, Any]:
        payment_id = require_non_empty(payment_id, "Payment id")
        payment = {
            "razorpay_payment_id": payment_id,
            "notes": {
                "studentId": student_id,
                "amountPaid": summary.total_to_pay,
                "paidMonths": summary.selected_months,
                "previousDuesPaid": summary.previous_dues_to_pay,
            },
        }
        if user.role == Role.PARENT.value:
            self._parent.record_fee_payment(payment)
        else:
            self._student.record_fee_payment(payment)
        logger.info("recorded payment %s for student %s (%.2f)", payment_id, student_id, summary.total_to_pay)
        self._bus.notify(RefreshTopic.FEES, "fee payment recorded", student_id=student_id)
        return payment

    def checkout_for(self, user: SessionUser, student_id: str, selected_months: Iterable[str]) -> dict[str, Any]:
        """Resolve the branch and student records, then build checkout options."""

        student_id = require_non_empty(student_id, "Student")
        if not user.branch_id:
            raise ValidationError("Your account is not linked to a school branch")
        branch = self._shared.get_branch_by_id(user.branch_id) or {}
        if user.role == Role.PARENT.value:
            profile = self._parent.get_student_profile_details(student_id) or {}
            student = profile.get("student") or profile
        else:
            student = user.to_api()
        student = {**student, "id": student.get("id") or student_id}
        return self.checkout(user, branch=branch, student=student, selected_months=selected_months)
