"""Authenticated identity held by a UDM client."""

from __future__ import annotations

from dataclasses import dataclass, field

from unifi_udm.model.info import NetworkAppInfo
from unifi_udm.model.user import UDMUser
from unifi_udm.vendor.udm.endpoints import DEFAULT_SITE


@dataclass(frozen=True)
class UDMCredentials:
    """Immutable credential pair for a UDM local account.

    Args:
        username: Login username.
        password: Login password.
    """

    username: str
    password: str = field(repr=False)


@dataclass
class UDMSession:
    """Session state shared by every authenticated call.

    Created empty by the client and replaced wholesale by
    :func:`~unifi_udm.client.auth.login` through :meth:`commit`, so the two
    tokens are either both set or both empty.

    Attributes:
        hostname: UDM ``host[:port]`` the session belongs to.
        site: Network site name used in resource URLs.
        session_token: Value of the ``TOKEN`` cookie (a JWT).
        csrf_token: CSRF token recovered from the JWT claims.
        user: Profile of the logged-in account.
        app_info: Network application info fetched right after login.
    """

    hostname: str
    site: str = DEFAULT_SITE
    session_token: str = field(default="", repr=False)
    csrf_token: str = field(default="", repr=False)
    user: UDMUser | None = None
    app_info: NetworkAppInfo | None = None

    @property
    def authenticated(self) -> bool:
        """True once login has stored both tokens."""
        return bool(self.session_token and self.csrf_token)

    @property
    def cookie_domain(self) -> str:
        """Hostname without any port, as used for the session cookie."""
        host = self.hostname
        if host.startswith("["):
            return host[1:].split("]", 1)[0]
        return host.rsplit(":", 1)[0] if host.count(":") == 1 else host

    def commit(self, other: UDMSession) -> None:
        """Copy every identity field of *other* into this session."""
        self.session_token = other.session_token
        self.csrf_token = other.csrf_token
        self.user = other.user
        self.app_info = other.app_info

    def log_context(self) -> dict[str, str]:
        """Identity fields attached to log records as ``extra={"udm": ...}``."""
        system = self.app_info.system if self.app_info else None
        return {
            "hostname": self.hostname,
            "site": self.site,
            "username": self.user.username if self.user else "",
            "system_name": system.name if system else "",
            "unifi_console_version": system.unifi_console.version if system else "",
            "network_app_version": system.version if system else "",
        }
