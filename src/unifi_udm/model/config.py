"""Connection configuration for a UDM client."""

from __future__ import annotations

from dataclasses import dataclass, field

from unifi_udm.client.errors import UDMConfigError
from unifi_udm.vendor.udm.endpoints import DEFAULT_SITE


@dataclass(frozen=True)
class UDMConfig:
    """Everything the client needs from its caller.

    Args:
        hostname: UDM hostname or IP address (optionally ``host:port``).
        username: Local account used for login.
        password: Password for *username*.
        site: Network site name; an empty value selects ``"default"``.
        ignore_untrusted_ssl_certificate: Skip TLS certificate verification
            (the UDM ships a self-signed certificate).
        timeout_s: Per-request timeout in seconds.

    Raises:
        UDMConfigError: If hostname, username or password is empty.
    """

    hostname: str
    username: str
    password: str = field(repr=False)
    site: str = DEFAULT_SITE
    ignore_untrusted_ssl_certificate: bool = False
    timeout_s: float = 30.0

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("hostname", "username", "password")
            if not getattr(self, name)
        ]
        if missing:
            raise UDMConfigError(f"missing UDM API setting(s): {', '.join(missing)}")
        if not self.site:
            object.__setattr__(self, "site", DEFAULT_SITE)
