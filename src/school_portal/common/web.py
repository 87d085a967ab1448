"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Iterable, Optional

from flask import current_app, jsonify, request

from ..auth.model import SessionUser
from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError, DomainError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, *, message: Optional[str] = None, status: int = 200):
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, ApiError):
        if error.status_code and 400 <= error.status_code < 500:
            return error.status_code
        return 502
    return 400


def json_view(view: Callable) -> Callable:
    """Translate domain errors to 4xx JSON and anything else to a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return fail(str(e), status_for(e))
        except Exception as e:
            logger.exception("unhandled error in %s %s", request.method, request.path)
            message = f"Internal server error: {e}" if current_app.debug else "Internal server error"
            return fail(message, 500)

    return wrapper


def request_json() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def month_args(today_year: int, today_month: int) -> tuple[int, int]:
    """Read ``year``/``month`` (one-based) query args, defaulting to the given month."""
    try:
        year = int(request.args.get("year", today_year))
        month = int(request.args.get("month", today_month))
    except ValueError:
        raise ValidationError("year and month must be numbers")
    return year, month


def make_guards(current_user: Callable[[], Optional[SessionUser]]):
    """Build ``login_required`` and ``roles_required`` bound to a user lookup."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if current_user() is None:
                return fail("Please log in to continue", 401)
            return view(*args, **kwargs)

        return wrapper

    def roles_required(roles: Iterable[str]):
        allowed = {getattr(r, "value", r) for r in roles}

        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                user = current_user()
                if user is None:
                    return fail("Please log in to continue", 401)
                if user.role not in allowed:
                    return fail("You do not have permission to access this page", 403)
                return view(*args, **kwargs)

            return wrapper

        return decorator

    return login_required, roles_required
