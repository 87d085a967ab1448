from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..api.principal import PrincipalApi
from ..api.registrar import RegistrarApi
from ..api.teacher import TeacherApi
from ..common.validators import require_non_empty
from ..core.enums import Decision, RefreshTopic, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..events.bus import RefreshBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApprovalQueue:
    """One kind of request a role can approve or reject."""

    role: Role
    kind: str
    list_pending: Callable[[], list[dict]]
    process: Callable[[str, str], None]
    topic: RefreshTopic


class ApprovalService:
    """Route approval decisions to the endpoint owning each request kind."""

    def __init__(self, registrar: RegistrarApi, principal: PrincipalApi, teacher: TeacherApi, bus: RefreshBus):
        self._bus = bus
        queues = [
            ApprovalQueue(Role.REGISTRAR, "rectification", registrar.get_rectification_requests,
                          registrar.process_rectification_request, RefreshTopic.ATTENDANCE),
            ApprovalQueue(Role.REGISTRAR, "exam-marks", registrar.get_exam_mark_rectification_requests,
                          registrar.process_exam_mark_rectification_request, RefreshTopic.REQUESTS),
            ApprovalQueue(Role.REGISTRAR, "syllabus", registrar.get_syllabus_change_requests,
                          registrar.process_syllabus_change_request, RefreshTopic.REQUESTS),
            ApprovalQueue(Role.REGISTRAR, "leave", registrar.get_leave_applications,
                          registrar.process_leave_application, RefreshTopic.LEAVE),
            ApprovalQueue(Role.PRINCIPAL, "fees", principal.get_fee_rectification_requests,
                          principal.process_fee_rectification_request, RefreshTopic.FEES),
            ApprovalQueue(Role.PRINCIPAL, "staff-attendance", principal.get_teacher_attendance_rectification_requests,
                          principal.process_teacher_attendance_rectification_request, RefreshTopic.ATTENDANCE),
            ApprovalQueue(Role.PRINCIPAL, "leave", principal.get_leave_applications,
                          principal.process_leave_application, RefreshTopic.LEAVE),
            ApprovalQueue(Role.TEACHER, "leave", teacher.get_student_leave_applications,
                          teacher.process_leave_application, RefreshTopic.LEAVE),
        ]
        self._queues = {(q.role.value, q.kind): q for q in queues}

    def kinds_for(self, role: str) -> list[str]:
        return [kind for (r, kind) in self._queues if r == role]

    def _queue(self, role: str, kind: str) -> ApprovalQueue:
        queue = self._queues.get((role, kind))
        if queue is None:
            if not self.kinds_for(role):
                raise AuthorizationError("You do not have permission to process requests")
            raise ValidationError(f"Unknown request type: {kind}")
        return queue

    def pending(self, role: str, kind: str) -> list[dict]:
        return self._queue(role, kind).list_pending()

    def process(self, role: str, kind: str, request_id: str, decision: str) -> Decision:
        queue = self._queue(role, kind)
        request_id = require_non_empty(request_id, "Request id")
        try:
            outcome = Decision(decision)
        except ValueError:
            raise ValidationError("Decision must be Approved or Rejected")

        queue.process(request_id, outcome.value)
        logger.info("%s %s request %s -> %s", role, kind, request_id, outcome.value)
        self._bus.notify(queue.topic, f"{kind} request {outcome.value.lower()}", request_id=request_id)
        return outcome
