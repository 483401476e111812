"""End-to-end tests for unifi_udm.api.UDMClient against a simulated UDM."""

from __future__ import annotations

import itertools
import json
import re
from typing import Any

import pytest
import requests
import responses as rsps_lib

from unifi_udm.api import UDMClient
from unifi_udm.client.errors import UDMAuthError, UDMNotFoundError, UDMOperationError
from unifi_udm.client.http import UDMHTTP
from unifi_udm.model.config import UDMConfig
from unifi_udm.model.device import ClientDevice
from unifi_udm.model.dns import StaticDNSEntry, StaticDNSRecord
from unifi_udm.vendor.udm.endpoints import LOGIN

HOST = "udm.example.com"
BASE_URL = f"https://{HOST}"
DNS_URL = f"{BASE_URL}/proxy/network/v2/api/site/default/static-dns"
USERS_URL = f"{BASE_URL}/proxy/network/api/s/default/rest/user"


def _config(**overrides: Any) -> UDMConfig:
    kwargs: dict[str, Any] = {
        "hostname": HOST,
        "username": "admin",
        "password": "secret",
        "ignore_untrusted_ssl_certificate": True,
    }
    kwargs.update(overrides)
    return UDMConfig(**kwargs)


class FakeStaticDNS:
    """In-memory ``static-dns`` endpoint that assigns ids and defaults."""

    def __init__(self) -> None:
        self.records: dict[str, dict[str, Any]] = {}
        self._ids = (f"65a1{n:020x}" for n in itertools.count(1))

    def register(self, rsps: rsps_lib.RequestsMock) -> None:
        item = re.compile(re.escape(DNS_URL) + r"/(?P<id>[^/]+)$")
        rsps.add_callback(rsps_lib.GET, DNS_URL, callback=self._list)
        rsps.add_callback(rsps_lib.POST, DNS_URL, callback=self._create)
        rsps.add_callback(rsps_lib.PUT, item, callback=self._update)
        rsps.add_callback(rsps_lib.DELETE, item, callback=self._delete)

    @staticmethod
    def _id_of(request: requests.PreparedRequest) -> str:
        return request.url.rsplit("/", 1)[1]

    def _list(self, request: requests.PreparedRequest) -> tuple[int, dict[str, str], str]:
        return 200, {}, json.dumps(list(self.records.values()))

    def _create(self, request: requests.PreparedRequest) -> tuple[int, dict[str, str], str]:
        body = json.loads(request.body)
        record = {"enabled": True, "ttl": 0, **body, "_id": next(self._ids)}
        self.records[record["_id"]] = record
        return 200, {}, json.dumps(record)

    def _update(self, request: requests.PreparedRequest) -> tuple[int, dict[str, str], str]:
        record_id = self._id_of(request)
        if record_id not in self.records:
            return 404, {}, json.dumps({"code": "api.err.NotFound", "message": "record not found"})
        record = {**json.loads(request.body), "_id": record_id}
        self.records[record_id] = record
        return 200, {}, json.dumps(record)

    def _delete(self, request: requests.PreparedRequest) -> tuple[int, dict[str, str], str]:
        if self.records.pop(self._id_of(request), None) is None:
            return 404, {}, json.dumps({"code": "api.err.NotFound", "message": "record not found"})
        return 200, {}, ""


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def test_client_starts_unauthenticated() -> None:
    client = UDMClient(_config(site=""))
    assert client.session.site == "default"
    assert client.session.hostname == HOST
    assert not client.session.authenticated
    assert client.network_app_info is None
    client.close()


def test_context_manager_logs_in(mocked, add_login) -> None:
    add_login()
    with UDMClient(_config()) as client:
        assert client.session.authenticated
        assert client.network_app_info is not None
        assert client.network_app_info.system.version == "8.1.113"
        assert client.session.user is not None
        assert client.session.user.username == "admin"


def test_login_failure_propagates(mocked) -> None:
    mocked.add(
        rsps_lib.POST,
        f"{BASE_URL}{LOGIN}",
        json={"code": "AUTHENTICATION_FAILED_INVALID_CREDENTIALS", "message": "Invalid"},
        status=401,
    )
    client = UDMClient(_config())
    with pytest.raises(UDMAuthError):
        client.open()
    assert not client.session.authenticated
    client.close()


def test_context_manager_closes_transport_when_login_fails(mocked, monkeypatch) -> None:
    closed: list[UDMHTTP] = []
    original_close = UDMHTTP.close

    def _close(self: UDMHTTP) -> None:
        closed.append(self)
        original_close(self)

    monkeypatch.setattr(UDMHTTP, "close", _close)
    mocked.add(
        rsps_lib.POST,
        f"{BASE_URL}{LOGIN}",
        json={"code": "AUTHENTICATION_FAILED_INVALID_CREDENTIALS", "message": "Invalid"},
        status=401,
    )

    with pytest.raises(UDMAuthError):
        with UDMClient(_config()):
            pytest.fail("body must not run when login fails")

    assert len(closed) == 1


def test_get_network_app_info_hits_network_each_call(mocked, add_login) -> None:
    add_login()
    with UDMClient(_config()) as client:
        client.get_network_app_info()
        client.get_network_app_info()
    info_calls = [c for c in mocked.calls if c.request.url.endswith("/v2/api/info")]
    assert len(info_calls) == 3  # login + two explicit reads


# ---------------------------------------------------------------------------
# Scenario: client devices
# ---------------------------------------------------------------------------

def test_client_device_scenario(mocked, add_login) -> None:
    devices = [
        {"_id": f"d{n}", "mac": f"aa:bb:cc:00:00:0{n}", "name": f"device-{n}"}
        for n in range(1, 6)
    ]
    add_login()
    mocked.add(
        rsps_lib.GET, USERS_URL, json={"meta": {"rc": "ok"}, "data": devices}, status=200
    )

    with UDMClient(_config()) as client:
        listed = client.get_client_devices()
        assert len(listed) == 5

        third = client.get_client_device(listed[2].id)
        assert third == listed[2]
        assert third.name == "device-3"

        with pytest.raises(UDMNotFoundError):
            client.get_client_device("ffffffffffffffffffffffff")


def test_create_client_device(mocked, add_login) -> None:
    add_login()
    stored = {"_id": "d9", "mac": "aa:bb:cc:00:00:09", "name": "printer", "site_id": "s1"}
    mocked.add(
        rsps_lib.POST, USERS_URL, json={"meta": {"rc": "ok"}, "data": [stored]}, status=200
    )
    with UDMClient(_config()) as client:
        created = client.create_client_device(ClientDevice(mac="aa:bb:cc:00:00:09", name="printer"))
    assert created.id == "d9"
    assert created.site_id == "s1"


# ---------------------------------------------------------------------------
# Scenario: static DNS record lifecycle
# ---------------------------------------------------------------------------

def test_static_dns_record_scenario(mocked, add_login) -> None:
    add_login()
    server = FakeStaticDNS()
    server.register(mocked)

    with UDMClient(_config()) as client:
        created = client.create_static_dns_record(
            StaticDNSRecord(key="host1", record_type="A", value="10.0.0.5", ttl=300)
        )
        assert created.id
        assert created.ttl == 300

        assert client.get_static_dns_record(created.id) == created

        created.ttl = 600
        updated = client.update_static_dns_record(created.id, created)
        assert updated.ttl == 600
        assert updated.id == created.id

        client.delete_static_dns_record(created.id)
        remaining = client.get_static_dns_records()
        assert created.id not in {r.id for r in remaining}

        with pytest.raises(UDMNotFoundError):
            client.get_static_dns_record(created.id)


def test_static_dns_entry_scenario(mocked, add_login) -> None:
    add_login()
    server = FakeStaticDNS()
    server.register(mocked)

    with UDMClient(_config()) as client:
        entry = client.create_static_dns_entry(
            StaticDNSEntry(key="nas.lan", record_type="CNAME", value="host1.lan")
        )
        assert isinstance(entry, StaticDNSEntry)
        assert client.get_static_dns_entries() == [entry]
        assert client.get_static_dns_entry(entry.id) == entry

        entry.value = "host2.lan"
        assert client.update_static_dns_entry(entry.id, entry).value == "host2.lan"

        client.delete_static_dns_entry(entry.id)
        assert client.get_static_dns_entries() == []

        with pytest.raises(UDMOperationError, match="record not found"):
            client.delete_static_dns_entry(entry.id)


def test_authenticated_calls_carry_session(mocked, add_login, make_jwt) -> None:
    token = make_jwt({"csrfToken": "csrf-e2e"})
    add_login(token=token)
    mocked.add(rsps_lib.GET, DNS_URL, json=[], status=200)

    with UDMClient(_config()) as client:
        client.get_static_dns_records()

    dns_call = next(c for c in mocked.calls if c.request.url == DNS_URL)
    assert dns_call.request.headers["X-Csrf-Token"] == "csrf-e2e"
    assert dns_call.request.headers["Cookie"] == f"TOKEN={token}"
