from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

_KNOWN_KEYS = {"id", "name", "role", "branchId", "email", "phone", "schoolName", "enabledFeatures"}


@dataclass(frozen=True)
class SessionUser:
    """The signed-in user as cached by the session store.

    Note: ``extra`` keeps any backend fields we do not model explicitly
    (leave balances, profile flags, ...) so they survive a round trip.
    """

    user_id: str
    name: str
    role: str
    branch_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    school_name: Optional[str] = None
    enabled_features: Optional[dict[str, bool]] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "SessionUser":
        return cls(
            user_id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            role=str(data.get("role") or ""),
            branch_id=data.get("branchId"),
            email=data.get("email"),
            phone=data.get("phone"),
            school_name=data.get("schoolName"),
            enabled_features=data.get("enabledFeatures"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_api(self) -> dict[str, Any]:
        out: dict[str, Any] = dict(self.extra)
        out.update(
            {
                "id": self.user_id,
                "name": self.name,
                "role": self.role,
                "branchId": self.branch_id,
                "email": self.email,
                "phone": self.phone,
            }
        )
        if self.school_name is not None:
            out["schoolName"] = self.school_name
        if self.enabled_features is not None:
            out["enabledFeatures"] = self.enabled_features
        return out

    def merged(self, updates: Mapping[str, Any]) -> "SessionUser":
        """Return a copy with backend profile fields applied on top."""
        data = self.to_api()
        data.update(updates)
        merged = SessionUser.from_api(data)
        return replace(merged, school_name=self.school_name, enabled_features=self.enabled_features)
