from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..auth.store import SessionStore
from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


class ApiClient:
    """Single connection to the school backend.

    Every request carries ``Authorization: Bearer <token>`` when the injected
    session store holds a token. Methods return the decoded JSON body (or None
    for an empty body) and raise ``ApiError`` for transport errors and non-2xx
    responses.
    """

    def __init__(
        self,
        base_url: str,
        store: SessionStore,
        *,
        timeout: float = DEFAULT_API_TIMEOUT,
        http: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._store = store
        self._timeout = timeout
        self._http = http or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _headers(self, *, json_body: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        token = self._store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        data: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
    ) -> Any:
        url = self.url_for(path)
        # multipart bodies let requests set their own boundary header
        headers = self._headers(json_body=files is None and data is None)
        try:
            resp = self._http.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"Could not reach the server ({e.__class__.__name__})") from e

        logger.debug("%s %s -> %s", method, path, resp.status_code)
        if resp.status_code >= 400:
            payload = _decode(resp)
            message = _error_message(payload) or f"Request failed with status {resp.status_code}"
            logger.warning("%s %s -> %s: %s", method, path, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code, payload=payload)
        return _decode(resp)

    def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def get_list(self, path: str, *, params: Optional[dict[str, Any]] = None) -> list:
        """GET a collection; a missing body becomes an empty list."""
        return self.get(path, params=params) or []

    def post(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return self.request("PUT", path, json=json, **kwargs)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def put_to_url(self, url: str, body: Any, *, content_type: str) -> None:
        """PUT raw bytes to an absolute (pre-signed) URL without the bearer token."""
        try:
            resp = self._http.put(url, data=body, headers={"Content-Type": content_type}, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("upload to storage failed: %s", e)
            raise ApiError(f"Could not upload the file ({e.__class__.__name__})") from e
        if resp.status_code >= 400:
            logger.warning("upload to storage -> %s", resp.status_code)
            raise ApiError("File upload was rejected by storage", status_code=resp.status_code, payload=_decode(resp))


def _decode(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _error_message(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    if isinstance(payload, str) and payload.strip():
        return payload.strip()[:200]
    return None


def form_fields(values: dict[str, Any]) -> dict[str, str]:
    """Flatten a record to multipart form fields, dropping empty values."""
    return {k: str(v) for k, v in values.items() if v is not None}
