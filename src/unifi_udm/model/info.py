"""Typed model for the network application info singleton."""

from __future__ import annotations

from dataclasses import dataclass

from unifi_udm.model.base import ApiModel, api_field


@dataclass
class HostMetadata(ApiModel):
    """Hardware model of the console hosting the network application."""

    id: str = ""
    model_abbreviation: str = ""
    model_full_name: str = api_field("model_fullName", default="")
    model_name: str = ""
    model_sysid: str = ""
    sku: str = ""


@dataclass
class UnifiConsole(ApiModel):
    type: str = ""
    version: str = ""


@dataclass
class SystemInfo(ApiModel):
    """System section of ``/proxy/network/v2/api/info``.

    Attributes:
        device_id: Console device identifier.
        host_meta: Console hardware model details.
        hostname: Console hostname.
        name: System display name.
        unifi_console: UniFi OS type and version.
        uptime: Uptime in seconds.
        version: Network application version.
    """

    device_id: str = ""
    host_meta: HostMetadata = api_field(default_factory=HostMetadata, model=HostMetadata)
    hostname: str = ""
    name: str = ""
    unifi_console: UnifiConsole = api_field(default_factory=UnifiConsole, model=UnifiConsole)
    uptime: int = 0
    version: str = ""


@dataclass
class NetworkAppInfo(ApiModel):
    """Diagnostic metadata fetched once per login."""

    system: SystemInfo = api_field(default_factory=SystemInfo, model=SystemInfo)
