"""UDM client: top-level entry point tying transport, session and operations."""

from __future__ import annotations

import logging
import threading

from unifi_udm.client import auth, device_ops, dns_ops, info_ops
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.session import UDMCredentials, UDMSession
from unifi_udm.model.config import UDMConfig
from unifi_udm.model.device import ClientDevice
from unifi_udm.model.dns import StaticDNSEntry, StaticDNSRecord
from unifi_udm.model.info import NetworkAppInfo

logger = logging.getLogger(__name__)


class UDMClient:
    """Session-authenticated client for a UniFi Dream Machine.

    One client holds one session.  :meth:`login` must not run concurrently
    with itself; once logged in, resource calls may be issued from several
    threads.

    Args:
        config: Connection settings and credentials.
    """

    def __init__(self, config: UDMConfig) -> None:
        self.config = config
        self._http: UDMHTTP = UDMHTTP(
            hostname=config.hostname,
            timeout_s=config.timeout_s,
            verify_tls=not config.ignore_untrusted_ssl_certificate,
        )
        self._session: UDMSession = UDMSession(
            hostname=self._http.hostname,
            site=config.site,
        )
        logger.debug(
            "UDMClient initialised: host=%s site=%s user=%s",
            self._http.hostname,
            config.site,
            config.username,
        )

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def open(self, cancel: threading.Event | None = None) -> None:
        """Log in with the configured credentials."""
        self.login(self.config.username, self.config.password, cancel=cancel)

    def login(
        self,
        username: str,
        password: str,
        *,
        remember_me: bool = False,
        cancel: threading.Event | None = None,
    ) -> UDMSession:
        """Authenticate; see :func:`unifi_udm.client.auth.login`."""
        return auth.login(
            self._http,
            self._session,
            UDMCredentials(username=username, password=password),
            remember_me=remember_me,
            cancel=cancel,
        )

    def close(self) -> None:
        """Close the HTTP session.  The UDM session simply expires."""
        self._http.close()

    def __enter__(self) -> UDMClient:
        try:
            self.open()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def session(self) -> UDMSession:
        return self._session

    @property
    def network_app_info(self) -> NetworkAppInfo | None:
        """Info cached at login (``None`` before the first login)."""
        return self._session.app_info

    # ------------------------------------------------------------------
    # Network application info
    # ------------------------------------------------------------------

    def get_network_app_info(self) -> NetworkAppInfo:
        return info_ops.get_network_app_info(self._http, self._session)

    # ------------------------------------------------------------------
    # Client devices
    # ------------------------------------------------------------------

    def get_client_devices(self) -> list[ClientDevice]:
        return device_ops.get_client_devices(self._http, self._session)

    def get_client_device(self, device_id: str) -> ClientDevice:
        return device_ops.get_client_device(self._http, self._session, device_id)

    def create_client_device(self, device: ClientDevice) -> ClientDevice:
        return device_ops.create_client_device(self._http, self._session, device)

    # ------------------------------------------------------------------
    # Static DNS entries
    # ------------------------------------------------------------------

    def get_static_dns_entries(self) -> list[StaticDNSEntry]:
        return dns_ops.get_static_dns_entries(self._http, self._session)

    def get_static_dns_entry(self, entry_id: str) -> StaticDNSEntry:
        return dns_ops.get_static_dns_entry(self._http, self._session, entry_id)

    def create_static_dns_entry(self, entry: StaticDNSEntry) -> StaticDNSEntry:
        return dns_ops.create_static_dns_entry(self._http, self._session, entry)

    def update_static_dns_entry(self, entry_id: str, entry: StaticDNSEntry) -> StaticDNSEntry:
        return dns_ops.update_static_dns_entry(self._http, self._session, entry_id, entry)

    def delete_static_dns_entry(self, entry_id: str) -> None:
        dns_ops.delete_static_dns_entry(self._http, self._session, entry_id)

    # ------------------------------------------------------------------
    # Static DNS records
    # ------------------------------------------------------------------

    def get_static_dns_records(self) -> list[StaticDNSRecord]:
        return dns_ops.get_static_dns_records(self._http, self._session)

    def get_static_dns_record(self, record_id: str) -> StaticDNSRecord:
        return dns_ops.get_static_dns_record(self._http, self._session, record_id)

    def create_static_dns_record(self, record: StaticDNSRecord) -> StaticDNSRecord:
        return dns_ops.create_static_dns_record(self._http, self._session, record)

    def update_static_dns_record(
        self, record_id: str, record: StaticDNSRecord
    ) -> StaticDNSRecord:
        return dns_ops.update_static_dns_record(self._http, self._session, record_id, record)

    def delete_static_dns_record(self, record_id: str) -> None:
        dns_ops.delete_static_dns_record(self._http, self._session, record_id)
