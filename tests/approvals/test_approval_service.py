from __future__ import annotations

import pytest

from school_portal.core.enums import Decision, RefreshTopic
from school_portal.core.exceptions import AuthorizationError, ValidationError


def test_registrar_rectification_goes_to_its_endpoint(container, fake_http):
    path = "/registrar/requests/grade-attendance/rq-1/process"
    fake_http.add("PUT", path, None)
    seen = []
    container.bus.subscribe(seen.append)

    outcome = container.approval_service.process("Registrar", "rectification", "rq-1", "Approved")

    assert outcome == Decision.APPROVED
    assert fake_http.calls_to("PUT", path)[0].json == {"status": "Approved"}
    assert seen[0].topic == RefreshTopic.ATTENDANCE


@pytest.mark.parametrize(
    "role,kind,path",
    [
        ("Registrar", "exam-marks", "/registrar/requests/exam-marks/rq-2/process"),
        ("Registrar", "syllabus", "/registrar/requests/syllabus/rq-2/process"),
        ("Registrar", "leave", "/registrar/leaves/applications/rq-2/process"),
        ("Principal", "fees", "/principal/requests/fees/rq-2/process"),
        ("Principal", "staff-attendance", "/principal/requests/attendance/rq-2/process"),
        ("Principal", "leave", "/principal/requests/leaves/rq-2/process"),
        ("Teacher", "leave", "/teacher/leaves/applications/rq-2/process"),
    ],
)
def test_each_queue_routes_rejections(container, fake_http, role, kind, path):
    fake_http.add("PUT", path, None)

    container.approval_service.process(role, kind, "rq-2", "Rejected")

    assert fake_http.calls_to("PUT", path)[0].json == {"status": "Rejected"}


def test_unknown_decision_is_rejected_before_any_call(container, fake_http):
    with pytest.raises(ValidationError, match="Approved or Rejected"):
        container.approval_service.process("Registrar", "syllabus", "rq-1", "Maybe")

    assert fake_http.calls == []


def test_unknown_kind_for_role(container):
    with pytest.raises(ValidationError):
        container.approval_service.process("Principal", "syllabus", "rq-1", "Approved")


def test_role_without_queues_is_not_authorized(container):
    with pytest.raises(AuthorizationError):
        container.approval_service.pending("Student", "leave")


def test_kinds_and_pending_lists(container, fake_http):
    fake_http.add("GET", "/teacher/leaves/student-applications", [{"id": "lv-1"}])

    assert container.approval_service.kinds_for("Teacher") == ["leave"]
    assert container.approval_service.pending("Teacher", "leave") == [{"id": "lv-1"}]
