from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..api.shared import SharedApi
from ..common.validators import require_non_empty
from ..core.constants import ROLES_REQUIRING_BRANCH
from ..core.enums import RefreshTopic
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from ..events.bus import RefreshBus
from .model import SessionUser
from .store import SessionStore

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("name", "email", "phone")


@dataclass(frozen=True)
class LoginResult:
    user: Optional[SessionUser]
    otp_required: bool = False


def _extract_user(response: Any) -> Optional[Mapping[str, Any]]:
    if not isinstance(response, Mapping):
        return None
    user = response.get("user")
    if isinstance(user, Mapping):
        return user
    # some deployments answer with the user record itself
    if response.get("id"):
        return response
    return None


class AuthService:
    def __init__(self, shared: SharedApi, store: SessionStore, bus: RefreshBus):
        self._shared = shared
        self._store = store
        self._bus = bus

    def current_user(self) -> Optional[SessionUser]:
        return self._store.get_user()

    def login(self, identifier: str, password: str) -> LoginResult:
        identifier = require_non_empty(identifier, "Email or user ID")
        password = require_non_empty(password, "Password")

        self._store.clear()
        response = self._shared.login(identifier, password) or {}
        raw_user = _extract_user(response)

        if response.get("otpRequired") and raw_user:
            logger.info("login for %s requires OTP", raw_user.get("id"))
            return LoginResult(user=SessionUser.from_api(raw_user), otp_required=True)

        self._store.set_token(response.get("token"))
        user = self.hydrate(raw_user) if raw_user else None
        if user is None:
            self._store.clear()
            raise AuthenticationError("Invalid credentials")
        return LoginResult(user=user)

    def verify_otp(self, user_id: str, otp: str) -> SessionUser:
        user_id = require_non_empty(user_id, "User")
        otp = require_non_empty(otp, "OTP")

        response = self._shared.verify_otp(user_id, otp) or {}
        self._store.set_token(response.get("token"))
        raw_user = _extract_user(response)
        user = self.hydrate(raw_user) if raw_user else None
        if user is None:
            self._store.clear()
            raise AuthenticationError("Invalid or expired OTP")
        return user

    def hydrate(self, raw_user: Mapping[str, Any]) -> Optional[SessionUser]:
        """Build and cache the session user, adding branch name and enabled features.

        Returns None when the role needs a branch and the user has none.
        """

        user = SessionUser.from_api(raw_user)
        if user.role in ROLES_REQUIRING_BRANCH and not user.branch_id:
            logger.error("login rejected: role %s requires a branch", user.role)
            return None

        if user.branch_id:
            try:
                branch = self._shared.get_branch_by_id(user.branch_id) or {}
            except ApiError as e:
                logger.warning("could not load branch %s for session: %s", user.branch_id, e)
                branch = {}
            user = SessionUser.from_api(
                {**user.to_api(), "schoolName": branch.get("name"), "enabledFeatures": branch.get("enabledFeatures")}
            )

        self._store.set_user(user)
        return user

    def check_session(self) -> Optional[SessionUser]:
        """Revalidate the stored token; an invalid session is cleared."""

        if not self._store.get_token():
            return self._store.get_user()
        try:
            raw_user = self._shared.check_session()
        except ApiError as e:
            logger.info("no active session (%s)", e)
            self._store.clear()
            return None
        if not raw_user:
            self._store.clear()
            return None
        return self.hydrate(raw_user)

    def logout(self) -> None:
        try:
            self._shared.logout()
        finally:
            self._store.clear()

    def update_profile(self, updates: Mapping[str, Any]) -> SessionUser:
        user = self._store.get_user()
        if user is None:
            raise AuthenticationError("Please log in to continue")
        clean = {k: str(updates[k]).strip() for k in _PROFILE_FIELDS if updates.get(k) is not None}
        if not clean:
            raise ValidationError("Nothing to update")
        if "name" in clean:
            require_non_empty(clean["name"], "Name")

        data = self._shared.update_user_profile(clean)
        merged = user.merged(data or clean)
        self._store.set_user(merged)
        self._bus.notify(RefreshTopic.PROFILE, "profile updated", user_id=merged.user_id)
        return merged

    def change_password(self, current: str, new_password: str) -> None:
        current = require_non_empty(current, "Current password")
        new_password = require_non_empty(new_password, "New password")
        if current == new_password:
            raise ValidationError("New password must differ from the current one")
        self._shared.change_password(current, new_password)
