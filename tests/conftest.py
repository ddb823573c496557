# tests/conftest.py

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from awqat_salah import AwqatClient, AwqatSettings, Credentials

BASE_URL = "https://api.test/"
ACCESS_TOKEN = "access-123"
REFRESH_TOKEN = "refresh-456"


def envelope(data, *, success: bool = True, message: str = "") -> dict:
    return {"data": data, "success": success, "message": message}


def login_ok() -> httpx.Response:
    return httpx.Response(
        200,
        json=envelope({"accessToken": ACCESS_TOKEN, "refreshToken": REFRESH_TOKEN}),
    )


class FakeApi:
    """Routes (method, path) -> response and records every request it sees."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response] | httpx.Response] = {
            ("POST", "/auth/login"): login_ok(),
        }
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, response) -> None:
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(418, text="no route")
        if callable(route):
            return route(request)
        return route

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def login_body(self) -> dict:
        return json.loads(self.requests[0].content)


@pytest.fixture
def settings() -> AwqatSettings:
    return AwqatSettings(base_url=BASE_URL, _env_file=None)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(email="user@example.com", password="s3cret")


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def http_client(fake_api):
    with httpx.Client(transport=httpx.MockTransport(fake_api)) as client:
        yield client


@pytest.fixture
def client(credentials, settings, http_client) -> AwqatClient:
    return AwqatClient(credentials, settings=settings, http_client=http_client)
