"""Generic CRUD template shared by every UDM resource kind.

Every operation follows the same steps: build the URL from the resource's
path template, attach session auth, send, decode the status-selected
envelope, raise :exc:`.UDMOperationError` for anything but HTTP 200 and
convert the payload into model instances.  Per-kind modules
(:mod:`.device_ops`, :mod:`.dns_ops`, :mod:`.info_ops`) only declare a
:class:`Resource` and delegate here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from requests.utils import quote

from unifi_udm.client.envelope import Decoder, Failure, decode_v2
from unifi_udm.client.errors import UDMNotFoundError, UDMOperationError, UDMParseError
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.request import new_authenticated_request
from unifi_udm.client.session import UDMSession
from unifi_udm.model.base import ApiModel

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=ApiModel)


@dataclass(frozen=True)
class Resource(Generic[E]):
    """Static description of one resource kind.

    Attributes:
        kind: Human-readable name used in logs and errors, e.g. ``"static DNS record"``.
        model: :class:`~unifi_udm.model.base.ApiModel` subclass of the entity.
        collection: Path template of the collection (``{site}`` placeholder).
        item: Path template of a single item (``{site}`` and ``{id}``), if any.
        decoder: Envelope decoder for this API family.
    """

    kind: str
    model: type[E]
    collection: str
    item: str | None = None
    decoder: Decoder = decode_v2

    def collection_path(self, session: UDMSession) -> str:
        return self.collection.format(site=session.site)

    def item_path(self, session: UDMSession, resource_id: str) -> str:
        if self.item is None:
            raise ValueError(f"{self.kind} has no single-item endpoint")
        return self.item.format(site=session.site, id=quote(resource_id, safe=""))


def call(
    http: UDMHTTP,
    session: UDMSession,
    method: str,
    path: str,
    action: str,
    kind: str,
    decoder: Decoder = decode_v2,
    body: Any = None,
) -> Any:
    """Send one authenticated request and return the success payload.

    Args:
        http: Transport.
        session: Session providing auth and the site.
        method: HTTP method.
        path: API path (already formatted).
        action: Verb for messages, e.g. ``"create"``.
        kind: Resource kind for messages.
        decoder: Envelope decoder.
        body: JSON body, if any.

    Returns:
        The decoded success payload.

    Raises:
        UDMRequestError: On transport failure.
        UDMOperationError: If the UDM answers with a non-200 status.
        UDMParseError: If a 200 body is not valid JSON.
    """
    url = http.url(path)
    logger.debug(
        "%s %s: %s %s (host=%s site=%s)",
        action, kind, method, url, session.hostname, session.site,
        extra={"udm": session.log_context()},
    )
    resp = http.send(new_authenticated_request(session, method, path, json=body))
    envelope = decoder(resp)
    if isinstance(envelope, Failure):
        logger.error(
            "failed to %s %s: status=%d code=%s error_code=%s message=%r details=%r",
            action,
            kind,
            envelope.status_code,
            envelope.code,
            envelope.error_code,
            envelope.message,
            envelope.details,
            extra={"udm": session.log_context()},
        )
        raise UDMOperationError(
            message=envelope.message or f"failed to {action} {kind}",
            status_code=envelope.status_code,
            url=url,
            code=envelope.code,
            error_code=envelope.error_code,
            details=envelope.details,
        )
    return envelope.payload


def _one(resource: Resource[E], payload: Any, url_hint: str) -> E:
    # Legacy endpoints wrap the written entity in a one-element list.
    if isinstance(payload, list):
        if not payload:
            raise UDMParseError(f"Empty data returned for {resource.kind} at {url_hint!r}")
        payload = payload[0]
    if not isinstance(payload, dict):
        raise UDMParseError(f"Unexpected {resource.kind} payload at {url_hint!r}: {payload!r}")
    return resource.model.from_api(payload)


# ----------------------------------------------------------------------
# Operations
# ----------------------------------------------------------------------


def list_items(http: UDMHTTP, session: UDMSession, resource: Resource[E]) -> list[E]:
    """Return every entity of *resource* on the session's site."""
    path = resource.collection_path(session)
    payload = call(http, session, "GET", path, "retrieve", resource.kind, resource.decoder)
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UDMParseError(f"Expected a list of {resource.kind} entries at {path!r}")
    return [resource.model.from_api(item) for item in payload]


def find_item(
    http: UDMHTTP,
    session: UDMSession,
    resource: Resource[E],
    resource_id: str,
) -> E:
    """Return the entity with *resource_id* by scanning the full list.

    The UDM has no single-item GET for these kinds, so each lookup costs one
    list fetch.

    Raises:
        UDMNotFoundError: If no entity carries *resource_id*.
    """
    for entity in list_items(http, session, resource):
        if getattr(entity, "id", None) == resource_id:
            logger.debug("%s %s was located", resource.kind, resource_id)
            return entity
    logger.warning("%s %s not found (site=%s)", resource.kind, resource_id, session.site)
    raise UDMNotFoundError(kind=resource.kind, resource_id=resource_id)


def create_item(
    http: UDMHTTP,
    session: UDMSession,
    resource: Resource[E],
    entity: E,
) -> E:
    """Create *entity* and return the UDM's authoritative copy."""
    path = resource.collection_path(session)
    payload = call(
        http, session, "POST", path, "create", resource.kind, resource.decoder,
        body=entity.to_api(),
    )
    return _one(resource, payload, path)


def update_item(
    http: UDMHTTP,
    session: UDMSession,
    resource: Resource[E],
    resource_id: str,
    entity: E,
) -> E:
    """Replace the entity with *resource_id* and return the UDM's copy."""
    path = resource.item_path(session, resource_id)
    payload = call(
        http, session, "PUT", path, "update", resource.kind, resource.decoder,
        body=entity.to_api(),
    )
    return _one(resource, payload, path)


def delete_item(
    http: UDMHTTP,
    session: UDMSession,
    resource: Resource[E],
    resource_id: str,
) -> None:
    """Delete the entity with *resource_id*."""
    path = resource.item_path(session, resource_id)
    call(
        http, session, "DELETE", path, "delete", resource.kind, resource.decoder,
        body={},
    )


def get_singleton(http: UDMHTTP, session: UDMSession, resource: Resource[E]) -> E:
    """Fetch a resource that exists exactly once per console."""
    path = resource.collection_path(session)
    payload = call(http, session, "GET", path, "retrieve", resource.kind, resource.decoder)
    return _one(resource, payload, path)
