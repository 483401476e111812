"""Network application info (``/proxy/network/v2/api/info``)."""

from __future__ import annotations

from unifi_udm.client import resource
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.session import UDMSession
from unifi_udm.model.info import NetworkAppInfo
from unifi_udm.vendor.udm.endpoints import NETWORK_APP_INFO

NETWORK_INFO = resource.Resource(
    kind="network info",
    model=NetworkAppInfo,
    collection=NETWORK_APP_INFO,
)


def get_network_app_info(http: UDMHTTP, session: UDMSession) -> NetworkAppInfo:
    """Fetch system name, versions, uptime and host model of the console."""
    return resource.get_singleton(http, session, NETWORK_INFO)
