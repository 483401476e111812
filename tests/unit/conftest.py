"""Shared fixtures for unifi_udm unit tests."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest
import responses as rsps_lib

from unifi_udm.client import auth
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.session import UDMSession
from unifi_udm.vendor.udm.endpoints import LOGIN, NETWORK_APP_INFO

HOST = "udm.example.com"
BASE_URL = f"https://{HOST}"
CSRF = "3f7a9c1e-csrf"

APP_INFO: dict[str, Any] = {
    "system": {
        "device_id": "f4e2c6aa-0000",
        "host_meta": {
            "id": "ea15",
            "model_abbreviation": "UDMPRO",
            "model_fullName": "UniFi Dream Machine Pro",
            "model_name": "UniFi Dream Machine Pro",
            "model_sysid": "ea15",
            "sku": "UDM-Pro",
        },
        "hostname": "UDM-Pro",
        "name": "Home",
        "unifi_console": {"type": "UNIFI_OS", "version": "3.2.12"},
        "uptime": 86400,
        "version": "8.1.113",
    }
}

USER: dict[str, Any] = {
    "id": "u-1",
    "unique_id": "u-1",
    "username": "admin",
    "first_name": "Ada",
    "last_name": "Admin",
    "email": "admin@example.com",
    "deviceToken": "",
}


def _segment(obj: dict[str, Any]) -> str:
    return base64.urlsafe_b64encode(json.dumps(obj).encode()).rstrip(b"=").decode()


def build_jwt(claims: dict[str, Any] | None = None, signature: str = "c2lnbmF0dXJl") -> str:
    if claims is None:
        claims = {"userId": "u-1", "csrfToken": CSRF, "isRemembered": False}
    return f"{_segment({'alg': 'HS256', 'typ': 'JWT'})}.{_segment(claims)}.{signature}"


@pytest.fixture
def make_jwt() -> Callable[..., str]:
    return build_jwt


@pytest.fixture
def mocked() -> Iterator[rsps_lib.RequestsMock]:
    with rsps_lib.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def http() -> Iterator[UDMHTTP]:
    client = UDMHTTP(HOST, verify_tls=False)
    yield client
    client.close()


@pytest.fixture
def session() -> UDMSession:
    """An already-authenticated session (no HTTP involved)."""
    return UDMSession(
        hostname=HOST,
        site="default",
        session_token=build_jwt(),
        csrf_token=CSRF,
    )


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record login back-off waits instead of sleeping."""
    recorded: list[float] = []
    monkeypatch.setattr(auth.time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def add_login(mocked: rsps_lib.RequestsMock) -> Callable[..., None]:
    """Register a successful login followed by the network info fetch."""

    def _add(token: str | None = None, user: dict[str, Any] | None = None) -> None:
        token = token if token is not None else build_jwt()
        mocked.add(
            rsps_lib.POST,
            f"{BASE_URL}{LOGIN}",
            json=user if user is not None else USER,
            status=200,
            headers={"Set-Cookie": f"TOKEN={token}; Path=/; Secure; HttpOnly; SameSite=None"},
        )
        mocked.add(rsps_lib.GET, f"{BASE_URL}{NETWORK_APP_INFO}", json=APP_INFO, status=200)

    return _add


@pytest.fixture
def app_info_payload() -> dict[str, Any]:
    return APP_INFO


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return USER
