from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional


@dataclass(frozen=True)
class LeaveBalance:
    leave_type: str
    remaining: float
    total: float
    percentage: float
    level: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "leaveType": self.leave_type,
            "remaining": self.remaining,
            "total": self.total,
            "percentage": self.percentage,
            "level": self.level,
        }


def balance_level(percentage: float) -> str:
    if percentage > 50:
        return "good"
    if percentage > 20:
        return "warning"
    return "critical"


def _number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def role_setting(settings_list: Iterable[Mapping[str, Any]], role: str) -> Optional[Mapping[str, Any]]:
    for entry in settings_list or []:
        if entry.get("role") == role:
            return entry
    return None


def compute_leave_balances(
    settings_list: Iterable[Mapping[str, Any]],
    role: str,
    user_balances: Optional[Mapping[str, Any]],
) -> list[LeaveBalance]:
    """Balance cards for every leave type the branch grants ``role``.

    Types with a zero total are not offered. Remaining days are looked up by
    the lower-cased type name in the user's ``leaveBalances``.
    """

    setting = role_setting(settings_list, role)
    totals = (setting or {}).get("settings") or {}
    remaining_by_type = {str(k).lower(): v for k, v in (user_balances or {}).items()}

    out: list[LeaveBalance] = []
    for leave_type, raw_total in totals.items():
        total = _number(raw_total)
        if total <= 0:
            continue
        remaining = _number(remaining_by_type.get(str(leave_type).lower(), 0))
        percentage = remaining / total * 100
        out.append(
            LeaveBalance(
                leave_type=str(leave_type),
                remaining=remaining,
                total=total,
                percentage=percentage,
                level=balance_level(percentage),
            )
        )
    return out
