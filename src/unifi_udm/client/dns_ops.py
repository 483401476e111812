"""Static DNS operations (``/proxy/network/v2/api/site/{site}/static-dns``).

Entries and records are two resource kinds served by the same endpoints
with the same shape.  Payloads are bare: a create/update returns the stored
entity and a list returns a JSON array.

Example payload::

    {"_id": "65a1...", "enabled": true, "key": "host1.lan",
     "record_type": "A", "value": "10.0.0.5", "ttl": 300}
"""

from __future__ import annotations

import logging

from unifi_udm.client import resource
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.session import UDMSession
from unifi_udm.model.dns import StaticDNSEntry, StaticDNSRecord
from unifi_udm.vendor.udm.endpoints import STATIC_DNS, STATIC_DNS_ITEM

logger = logging.getLogger(__name__)

STATIC_DNS_ENTRY = resource.Resource(
    kind="static DNS entry",
    model=StaticDNSEntry,
    collection=STATIC_DNS,
    item=STATIC_DNS_ITEM,
)

STATIC_DNS_RECORD = resource.Resource(
    kind="static DNS record",
    model=StaticDNSRecord,
    collection=STATIC_DNS,
    item=STATIC_DNS_ITEM,
)


# ------------------------------------------------------------------
# Entries
# ------------------------------------------------------------------


def get_static_dns_entries(http: UDMHTTP, session: UDMSession) -> list[StaticDNSEntry]:
    return resource.list_items(http, session, STATIC_DNS_ENTRY)


def get_static_dns_entry(
    http: UDMHTTP,
    session: UDMSession,
    entry_id: str,
) -> StaticDNSEntry:
    """Return the entry with *entry_id* (list + scan).

    Raises:
        UDMNotFoundError: If no entry has that identifier.
    """
    return resource.find_item(http, session, STATIC_DNS_ENTRY, entry_id)


def create_static_dns_entry(
    http: UDMHTTP,
    session: UDMSession,
    entry: StaticDNSEntry,
) -> StaticDNSEntry:
    logger.debug(
        "Creating static DNS entry %s %s -> %s (ttl=%d)",
        entry.record_type, entry.key, entry.value, entry.ttl,
    )
    return resource.create_item(http, session, STATIC_DNS_ENTRY, entry)


def update_static_dns_entry(
    http: UDMHTTP,
    session: UDMSession,
    entry_id: str,
    entry: StaticDNSEntry,
) -> StaticDNSEntry:
    logger.debug("Updating static DNS entry %s", entry_id)
    return resource.update_item(http, session, STATIC_DNS_ENTRY, entry_id, entry)


def delete_static_dns_entry(http: UDMHTTP, session: UDMSession, entry_id: str) -> None:
    logger.debug("Deleting static DNS entry %s", entry_id)
    resource.delete_item(http, session, STATIC_DNS_ENTRY, entry_id)


# ------------------------------------------------------------------
# Records
# ------------------------------------------------------------------


def get_static_dns_records(http: UDMHTTP, session: UDMSession) -> list[StaticDNSRecord]:
    return resource.list_items(http, session, STATIC_DNS_RECORD)


def get_static_dns_record(
    http: UDMHTTP,
    session: UDMSession,
    record_id: str,
) -> StaticDNSRecord:
    """Return the record with *record_id* (list + scan).

    Raises:
        UDMNotFoundError: If no record has that identifier.
    """
    return resource.find_item(http, session, STATIC_DNS_RECORD, record_id)


def create_static_dns_record(
    http: UDMHTTP,
    session: UDMSession,
    record: StaticDNSRecord,
) -> StaticDNSRecord:
    logger.debug(
        "Creating static DNS record %s %s -> %s (ttl=%d)",
        record.record_type, record.key, record.value, record.ttl,
    )
    return resource.create_item(http, session, STATIC_DNS_RECORD, record)


def update_static_dns_record(
    http: UDMHTTP,
    session: UDMSession,
    record_id: str,
    record: StaticDNSRecord,
) -> StaticDNSRecord:
    logger.debug("Updating static DNS record %s", record_id)
    return resource.update_item(http, session, STATIC_DNS_RECORD, record_id, record)


def delete_static_dns_record(http: UDMHTTP, session: UDMSession, record_id: str) -> None:
    logger.debug("Deleting static DNS record %s", record_id)
    resource.delete_item(http, session, STATIC_DNS_RECORD, record_id)
