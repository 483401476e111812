"""Success/error envelope decoding for UDM responses.

The UDM answers every call with one of two body shapes chosen by the HTTP
status.  :func:`decode_v2`, :func:`decode_legacy` and :func:`decode_login`
turn a response into exactly one of :class:`Success` or :class:`Failure`.

Shapes handled::

    v2 API       200 → bare entity or list
                 4xx → {"code", "details", "errorCode", "message"}
    legacy API   200 → {"meta": {"rc": "ok"}, "data": [...]}
                 4xx → {"meta": {"rc": "error", "msg": "api.err.Invalid"}, "data": []}
    login        200 → user profile
                 4xx → {"code", "message", "level"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Union

import requests

from unifi_udm.client.errors import UDMParseError

HTTP_OK: int = 200


@dataclass(frozen=True)
class Success:
    """Payload of a 200 response (``None`` for an empty body)."""

    payload: Any


@dataclass(frozen=True)
class Failure:
    """Error details of a non-200 response; every field may be missing."""

    status_code: int
    message: str = ""
    code: str | None = None
    error_code: int | None = None
    details: Any = None
    level: str | None = None


Envelope = Union[Success, Failure]
Decoder = Callable[[requests.Response], Envelope]


def _json_or_none(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return json.loads(resp.text)
    except (json.JSONDecodeError, ValueError):
        return None


def _success_payload(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return json.loads(resp.text)
    except (json.JSONDecodeError, ValueError) as exc:
        raise UDMParseError(
            f"Non-JSON response from {resp.url!r}: {resp.text[:200]!r}"
        ) from exc


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def decode_v2(resp: requests.Response) -> Envelope:
    """Decode a ``/proxy/network/v2`` response."""
    if resp.status_code == HTTP_OK:
        return Success(_success_payload(resp))
    body = _json_or_none(resp)
    if not isinstance(body, dict):
        return Failure(status_code=resp.status_code)
    return Failure(
        status_code=resp.status_code,
        message=str(body.get("message") or ""),
        code=body.get("code"),
        error_code=_int_or_none(body.get("errorCode")),
        details=body.get("details"),
    )


def decode_legacy(resp: requests.Response) -> Envelope:
    """Decode a ``/proxy/network/api`` response and unwrap ``data``."""
    if resp.status_code == HTTP_OK:
        body = _success_payload(resp)
        if not isinstance(body, dict):
            raise UDMParseError(f"Missing envelope in response from {resp.url!r}")
        return Success(body.get("data") or [])
    body = _json_or_none(resp)
    meta = body.get("meta") if isinstance(body, dict) else None
    if not isinstance(meta, dict):
        return Failure(status_code=resp.status_code)
    return Failure(
        status_code=resp.status_code,
        message=str(meta.get("msg") or ""),
        code=meta.get("rc"),
    )


def decode_login(resp: requests.Response) -> Envelope:
    """Decode an ``/api/auth/login`` response."""
    if resp.status_code == HTTP_OK:
        return Success(_success_payload(resp))
    body = _json_or_none(resp)
    if not isinstance(body, dict):
        return Failure(status_code=resp.status_code)
    return Failure(
        status_code=resp.status_code,
        message=str(body.get("message") or ""),
        code=body.get("code"),
        level=body.get("level"),
    )
