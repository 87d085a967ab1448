from __future__ import annotations

from typing import Any, MutableMapping, Optional, Protocol

from flask import session as flask_session

from .model import SessionUser

TOKEN_KEY = "api_token"
USER_KEY = "session_user"


class SessionStore(Protocol):
    """Explicit holder for the auth token and the cached session user.

    Services receive a store instead of reaching into ambient storage.
    """

    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def set_token(self, token: Optional[str]) -> None:
        raise NotImplementedError

    def get_user(self) -> Optional[SessionUser]:
        raise NotImplementedError

    def set_user(self, user: Optional[SessionUser]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MappingSessionStore(SessionStore):
    """Session store backed by any mutable mapping.

    Used directly with a plain dict (scripts, tests) and with ``flask.session``
    inside requests; values are kept JSON-serializable for cookie sessions.
    """

    def __init__(self, backing: Optional[MutableMapping[str, Any]] = None):
        self._data: MutableMapping[str, Any] = backing if backing is not None else {}

    def get_token(self) -> Optional[str]:
        return self._data.get(TOKEN_KEY)

    def set_token(self, token: Optional[str]) -> None:
        if token:
            self._data[TOKEN_KEY] = token
        else:
            self._data.pop(TOKEN_KEY, None)

    def get_user(self) -> Optional[SessionUser]:
        raw = self._data.get(USER_KEY)
        if not raw:
            return None
        return SessionUser.from_api(raw)

    def set_user(self, user: Optional[SessionUser]) -> None:
        if user is None:
            self._data.pop(USER_KEY, None)
        else:
            self._data[USER_KEY] = user.to_api()

    def clear(self) -> None:
        self._data.pop(TOKEN_KEY, None)
        self._data.pop(USER_KEY, None)


class FlaskSessionStore(MappingSessionStore):
    """Session store bound to the current Flask request session."""

    def __init__(self):
        super().__init__(flask_session)
