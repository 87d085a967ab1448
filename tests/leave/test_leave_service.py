from __future__ import annotations

import pytest

from school_portal.auth.model import SessionUser
from school_portal.core.enums import RefreshTopic
from school_portal.core.exceptions import ValidationError


@pytest.fixture
def teacher() -> SessionUser:
    return SessionUser.from_api({"id": "t-1", "name": "Tara", "role": "Teacher", "branchId": "br-1"})


def _form(**overrides):
    form = {"leaveType": "Sick", "startDate": "2024-02-05", "endDate": "2024-02-06", "reason": "Flu"}
    form.update(overrides)
    return form


def test_apply_posts_application_and_publishes_refresh(container, fake_http, teacher):
    fake_http.add("POST", "/leaves/applications", None)
    seen = []
    container.bus.subscribe(seen.append, topics=[RefreshTopic.LEAVE])

    container.leave_service.apply(teacher, _form(isHalfDay="true"))

    (call,) = fake_http.calls_to("POST", "/leaves/applications")
    assert call.json == {
        "branchId": "br-1",
        "applicantId": "t-1",
        "applicantName": "Tara",
        "applicantRole": "Teacher",
        "leaveType": "Sick",
        "startDate": "2024-02-05",
        "endDate": "2024-02-06",
        "isHalfDay": True,
        "reason": "Flu",
    }
    assert seen[0].payload == {"staff_id": "t-1"}


@pytest.mark.parametrize("missing", ["leaveType", "startDate", "endDate", "reason"])
def test_apply_requires_every_field(container, fake_http, teacher, missing):
    with pytest.raises(ValidationError, match="Please fill all fields"):
        container.leave_service.apply(teacher, _form(**{missing: "  "}))

    assert fake_http.calls == []


def test_apply_rejects_end_before_start(container, teacher):
    with pytest.raises(ValidationError, match="before start"):
        container.leave_service.apply(teacher, _form(startDate="2024-02-06", endDate="2024-02-05"))


def test_apply_rejects_unreadable_dates(container, teacher):
    with pytest.raises(ValidationError):
        container.leave_service.apply(teacher, _form(startDate="05/02/2024"))


def test_apply_requires_branch(container):
    user = SessionUser.from_api({"id": "a-1", "name": "Admin", "role": "SuperAdmin"})

    with pytest.raises(ValidationError):
        container.leave_service.apply(user, _form())


def test_balances_use_fresh_user_record(container, fake_http, teacher):
    fake_http.add("GET", "/leaves/settings", [{"role": "Teacher", "settings": {"Sick": 10, "Casual": 5}}])
    fake_http.add("GET", "/registrar/user-details/t-1", {"id": "t-1", "leaveBalances": {"sick": 9, "casual": 1}})

    balances = container.leave_service.balances(teacher)

    assert [(b.leave_type, b.remaining, b.level) for b in balances] == [("Sick", 9, "good"), ("Casual", 1, "critical")]


def test_my_applications_defaults_to_empty(container, fake_http):
    fake_http.add("GET", "/leaves/my-applications", None)

    assert container.leave_service.my_applications() == []
