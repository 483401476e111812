"""Client device operations (``/proxy/network/api/s/{site}/rest/user``).

The legacy API wraps payloads as ``{"meta": {"rc": "ok"}, "data": [...]}``;
a create returns the new record as the only element of ``data``.
"""

from __future__ import annotations

import logging

from unifi_udm.client import resource
from unifi_udm.client.envelope import decode_legacy
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.session import UDMSession
from unifi_udm.model.device import ClientDevice
from unifi_udm.vendor.udm.endpoints import CLIENT_DEVICES

logger = logging.getLogger(__name__)

CLIENT_DEVICE = resource.Resource(
    kind="client device",
    model=ClientDevice,
    collection=CLIENT_DEVICES,
    decoder=decode_legacy,
)


def get_client_devices(http: UDMHTTP, session: UDMSession) -> list[ClientDevice]:
    """Return every client device known to the site."""
    return resource.list_items(http, session, CLIENT_DEVICE)


def get_client_device(
    http: UDMHTTP,
    session: UDMSession,
    device_id: str,
) -> ClientDevice:
    """Return the client device with *device_id* (list + scan).

    Raises:
        UDMNotFoundError: If no device has that identifier.
    """
    return resource.find_item(http, session, CLIENT_DEVICE, device_id)


def create_client_device(
    http: UDMHTTP,
    session: UDMSession,
    device: ClientDevice,
) -> ClientDevice:
    """Register *device* and return the record stored by the UDM.

    Raises:
        UDMOperationError: If the UDM rejects the device (e.g. duplicate MAC).
    """
    logger.debug("Creating client device mac=%s name=%r", device.mac, device.name)
    return resource.create_item(http, session, CLIENT_DEVICE, device)
