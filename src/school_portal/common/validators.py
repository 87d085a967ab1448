from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise when any of ``fields`` is missing or blank in ``data``."""

    missing = [f for f in fields if data.get(f) in (None, "") or (isinstance(data.get(f), str) and not data[f].strip())]
    if missing:
        raise ValidationError("Please fill all fields: " + ", ".join(missing))

