"""Typed model for client device records (``rest/user``)."""

from __future__ import annotations

from dataclasses import dataclass

from unifi_udm.model.base import ApiModel, api_field


@dataclass
class ClientDevice(ApiModel):
    """A known client device as stored by the network application.

    ``id`` is empty until the UDM assigns one on create.  Only a handful of
    attributes are meaningful on create (``mac``, ``name``, ``fixed_ip``,
    ``use_fixedip``, ``local_dns_record``...); the rest are fingerprinting and
    presence data filled in by the controller.

    Attributes:
        id: Server-assigned identifier (``_id``).
        mac: Hardware (MAC) address.
        name: Display name / alias.
        hostname: Hostname reported by the device.
        fixed_ip: Reserved DHCP address, used when ``use_fixedip`` is set.
        local_dns_record: DNS name published for the device.
    """

    id: str = api_field("_id", default="", omitempty=True)
    mac: str = api_field(default="", omitempty=True)
    name: str = api_field(default="", omitempty=True)
    hostname: str = api_field(default="", omitempty=True)
    blocked: bool = api_field(default=False, omitempty=True)
    confidence: int = api_field(default=0, omitempty=True)
    dev_cat: int = 0
    dev_family: int = 0
    dev_id: int = 0
    dev_vendor: int = 0
    disconnect_timestamp: int = api_field(default=0, omitempty=True)
    fingerprint_engine_version: str = api_field(default="", omitempty=True)
    fingerprint_source: int = 0
    first_seen: int = api_field(default=0, omitempty=True)
    fixed_ip: str = api_field(default="", omitempty=True)
    use_fixedip: bool = api_field(default=False, omitempty=True)
    is_guest: bool = api_field(default=False, omitempty=True)
    is_wired: bool = api_field(default=False, omitempty=True)
    last_connection_network_id: str = api_field(default="", omitempty=True)
    last_connection_network_name: str = api_field(default="", omitempty=True)
    last_ipv6: list[str] = api_field(default_factory=list, omitempty=True)
    last_radio: str = api_field(default="", omitempty=True)
    last_seen: int = api_field(default=0, omitempty=True)
    last_uplink_mac: str = api_field(default="", omitempty=True)
    last_uplink_name: str = api_field(default="", omitempty=True)
    local_dns_record: str = api_field(default="", omitempty=True)
    local_dns_record_enabled: bool = api_field(default=False, omitempty=True)
    noted: bool = api_field(default=False, omitempty=True)
    os_class: int = api_field(default=0, omitempty=True)
    os_name: int = api_field(default=0, omitempty=True)
    oui: str = api_field(default="", omitempty=True)
    site_id: str = api_field(default="", omitempty=True)
    usergroup_id: str = api_field(default="", omitempty=True)
    virtual_network_override_enabled: bool = api_field(default=False, omitempty=True)
    virtual_network_override_id: str = ""
    wlanconf_id: str = api_field(default="", omitempty=True)
