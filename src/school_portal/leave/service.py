from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..api.registrar import RegistrarApi
from ..api.shared import SharedApi
from ..auth.model import SessionUser
from ..common.datetime_utils import to_calendar_day
from ..common.validators import require_fields
from ..core.enums import RefreshTopic
from ..core.exceptions import ValidationError
from ..events.bus import RefreshBus
from .balances import LeaveBalance, compute_leave_balances

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, shared: SharedApi, registrar: RegistrarApi, bus: RefreshBus):
        self._shared = shared
        self._registrar = registrar
        self._bus = bus

    def apply(self, user: SessionUser, form: Mapping[str, Any]) -> dict[str, Any]:
        if not user.branch_id:
            raise ValidationError("Your account is not linked to a school branch")
        require_fields(form, ("leaveType", "startDate", "endDate", "reason"))

        start = to_calendar_day(form.get("startDate"))
        end = to_calendar_day(form.get("endDate"))
        if start is None or end is None:
            raise ValidationError("Dates must be in YYYY-MM-DD format")
        if end < start:
            raise ValidationError("End date cannot be before start date")

        application = {
            "branchId": user.branch_id,
            "applicantId": user.user_id,
            "applicantName": user.name,
            "applicantRole": user.role,
            "leaveType": str(form["leaveType"]).strip(),
            "startDate": start.isoformat(),
            "endDate": end.isoformat(),
            "isHalfDay": _truthy(form.get("isHalfDay")),
            "reason": str(form["reason"]).strip(),
        }
        self._shared.create_leave_application(application)
        logger.info("leave application submitted by %s (%s..%s)", user.user_id, start, end)
        self._bus.notify(RefreshTopic.LEAVE, "leave applied", staff_id=user.user_id)
        return application

    def my_applications(self) -> list[dict]:
        return self._shared.get_leave_applications_for_user()

    def balances(self, user: SessionUser) -> list[LeaveBalance]:
        settings_list = self._shared.get_leave_settings_for_branch()
        fresh: Optional[dict] = self._registrar.get_user_by_id(user.user_id)
        user_balances = (fresh or {}).get("leaveBalances") or user.extra.get("leaveBalances")
        return compute_leave_balances(settings_list, user.role, user_balances)


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)
