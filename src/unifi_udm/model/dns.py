"""Typed models for static DNS entries and records."""

from __future__ import annotations

from dataclasses import dataclass

from unifi_udm.model.base import ApiModel, api_field


@dataclass
class _StaticDNS(ApiModel):
    """Wire shape shared by static DNS entries and records.

    Attributes:
        id: Server-assigned identifier (``_id``); empty until created.
        enabled: Whether the UDM resolver serves this record.
        key: Record name, e.g. ``host1.lan``.
        record_type: ``A``, ``AAAA``, ``CNAME``, ``MX``, ``NS``, ``SRV`` or ``TXT``.
        value: Record data (address, target name, text...).
        ttl: Time to live in seconds (0 lets the UDM pick its default).
        port: SRV port.
        priority: MX/SRV priority.
        weight: SRV weight.
    """

    id: str = api_field("_id", default="", omitempty=True)
    enabled: bool = True
    key: str = ""
    record_type: str = ""
    value: str = ""
    ttl: int = 0
    port: int = api_field(default=0, omitempty=True)
    priority: int = api_field(default=0, omitempty=True)
    weight: int = api_field(default=0, omitempty=True)


@dataclass
class StaticDNSEntry(_StaticDNS):
    """A static DNS entry (``static-dns`` API)."""


@dataclass
class StaticDNSRecord(_StaticDNS):
    """A static DNS record (``static-dns`` API, managed separately from entries)."""
