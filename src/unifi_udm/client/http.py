"""Low-level HTTP client wrapper for the UDM REST API."""

from __future__ import annotations

import http.cookiejar
import importlib.metadata
import logging

import requests

from unifi_udm.client.errors import UDMRequestError

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("unifi-udm-client")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"unifi-udm-client/{_VERSION}"
_REDACTED: str = "[REDACTED]"


def _normalise_hostname(hostname: str) -> str:
    """Strip any scheme and trailing slash, leaving ``host[:port]``."""
    hostname = hostname.strip().rstrip("/")
    for scheme in ("https://", "http://"):
        if hostname.startswith(scheme):
            hostname = hostname[len(scheme):]
    return hostname


class UDMHTTP:
    """Low-level HTTP wrapper around :class:`requests.Session`.

    Sends fully-built :class:`requests.Request` objects with JSON content
    negotiation, a default ``User-Agent``, timeout and TLS policy.  Transport
    failures map to :exc:`.UDMRequestError`; HTTP status codes are returned
    untouched so callers can pick the success or error envelope.

    The underlying session never stores cookies: authentication is attached
    explicitly to each request.

    Args:
        hostname: UDM hostname or IP address, e.g. ``192.168.1.1``.
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        hostname: str,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self.hostname: str = _normalise_hostname(hostname)
        self.base_url: str = f"https://{self.hostname}"
        self.timeout_s: float = timeout_s
        self.verify_tls: bool = verify_tls
        self._session: requests.Session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": _USER_AGENT,
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        self._session.cookies.set_policy(
            http.cookiejar.DefaultCookiePolicy(allowed_domains=[])
        )
        if not verify_tls:
            logger.warning(
                "TLS certificate verification is disabled for %s", self.hostname
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def url(self, path: str) -> str:
        """Return the absolute URL for an API *path*."""
        return self.base_url + path

    def send(self, request: requests.Request) -> requests.Response:
        """Send *request* and return the response, whatever its status.

        Args:
            request: A request built by :mod:`.request`.

        Returns:
            The :class:`requests.Response`.

        Raises:
            UDMRequestError: On any transport-level failure.
        """
        prepared = self._session.prepare_request(request)
        try:
            resp = self._session.send(
                prepared,
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            logger.error("%s %s failed: %s", request.method, request.url, exc)
            raise UDMRequestError(request.url, exc) from exc
        log_response(resp)
        return resp

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self._session.close()

    def __enter__(self) -> UDMHTTP:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def log_response(resp: requests.Response) -> None:
    """Dump *resp* at DEBUG level with cookie values redacted.

    Does nothing unless this module's logger is enabled for DEBUG.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    headers = {k: v for k, v in resp.headers.items() if k.lower() != "set-cookie"}
    cookies = {
        c.name: {
            "value": _REDACTED,
            "path": c.path,
            "domain": c.domain,
            "expires": c.expires,
            "secure": c.secure,
            "http_only": c.has_nonstandard_attr("HttpOnly"),
        }
        for c in resp.cookies
    }
    logger.debug(
        "response received from %s: status=%d headers=%s cookies=%s body=%s",
        resp.url,
        resp.status_code,
        headers,
        cookies,
        resp.text,
    )
