from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Optional

import pytest

from school_portal.auth.store import MappingSessionStore
from school_portal.container import build_container

BASE_URL = "http://backend.test/api"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        if body is None:
            self.content = b""
        elif isinstance(body, (bytes, str)):
            self.content = body.encode() if isinstance(body, str) else body
        else:
            self.content = json.dumps(body).encode()
        self.text = self.content.decode()

    def json(self) -> Any:
        return json.loads(self.content)


@dataclass
class Call:
    method: str
    path: str
    kwargs: dict[str, Any]

    @property
    def json(self) -> Any:
        return self.kwargs.get("json")

    @property
    def params(self) -> Any:
        return self.kwargs.get("params")

    @property
    def headers(self) -> dict[str, str]:
        return self.kwargs.get("headers") or {}


@dataclass
class FakeHttp:
    """Stands in for ``requests.Session``; routes by method and path below BASE_URL."""

    routes: dict[tuple[str, str], Any] = field(default_factory=dict)
    calls: list[Call] = field(default_factory=list)

    def add(self, method: str, path: str, body: Any = None, status: int = 200) -> None:
        self.routes[(method.upper(), path)] = (status, body)

    def fail_with(self, method: str, path: str, error: Exception) -> None:
        self.routes[(method.upper(), path)] = error

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        self.calls.append(Call(method.upper(), path, kwargs))
        route = self.routes.get((method.upper(), path))
        if isinstance(route, Exception):
            raise route
        if route is None:
            return FakeResponse(404, {"message": f"No route for {method} {path}"})
        status, body = route
        if callable(body):
            body = body(kwargs)
        return FakeResponse(status, body)

    def put(self, url: str, **kwargs: Any) -> FakeResponse:
        return self.request("PUT", url, **kwargs)

    def calls_to(self, method: str, path: str) -> list[Call]:
        return [c for c in self.calls if c.method == method.upper() and c.path == path]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 20, 9, 30, 0)


@pytest.fixture
def fixed_today(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def fake_http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def store() -> MappingSessionStore:
    return MappingSessionStore()


@pytest.fixture
def make_container(fake_http, fixed_today):
    def _make(store: Optional[Any] = None, clock: Optional[Callable[[], date]] = None):
        return build_container(
            api_base_url=BASE_URL,
            api_timeout=5,
            store=store,
            http=fake_http,
            clock=clock or (lambda: fixed_today),
        )

    return _make


@pytest.fixture
def container(make_container, store):
    return make_container(store=store)


@pytest.fixture
def registrar_record() -> dict[str, Any]:
    return {"id": "reg-1", "name": "Rita Registrar", "role": "Registrar", "branchId": "br-1", "email": "rita@school.test"}
