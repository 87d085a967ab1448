from __future__ import annotations

import pytest

from school_portal.leave.balances import balance_level, compute_leave_balances

SETTINGS = [
    {"id": "br-1-Student", "role": "Student", "settings": {"Sick": 5}},
    {"id": "br-1-Teacher", "role": "Teacher", "settings": {"Sick": 10, "Casual": 8, "Earned": 0}},
]


def test_only_types_with_positive_totals_for_the_role():
    balances = compute_leave_balances(SETTINGS, "Teacher", {"sick": 6, "casual": 1})

    assert [b.leave_type for b in balances] == ["Sick", "Casual"]
    sick, casual = balances
    assert (sick.remaining, sick.total, sick.percentage, sick.level) == (6, 10, 60, "good")
    assert casual.percentage == pytest.approx(12.5)
    assert casual.level == "critical"


def test_balance_keys_match_case_insensitively():
    balances = compute_leave_balances(SETTINGS, "Student", {"SICK": 2})

    assert balances[0].remaining == 2
    assert balances[0].level == "warning"


def test_missing_balances_count_as_zero():
    balances = compute_leave_balances(SETTINGS, "Teacher", None)

    assert all(b.remaining == 0 and b.level == "critical" for b in balances)


def test_role_without_settings_has_no_cards():
    assert compute_leave_balances(SETTINGS, "Librarian", {"sick": 3}) == []
    assert compute_leave_balances([], "Teacher", {"sick": 3}) == []


@pytest.mark.parametrize(
    "percentage,level",
    [(100, "good"), (50.1, "good"), (50, "warning"), (20.1, "warning"), (20, "critical"), (0, "critical")],
)
def test_balance_level_thresholds(percentage, level):
    assert balance_level(percentage) == level
