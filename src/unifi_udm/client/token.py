"""Decode-only reader for the JWT carried in the UDM session cookie.

The token is issued by the same UDM the client just authenticated against
and the client holds no key material, so the signature is never checked.
Only the payload segment is read to recover the ``csrfToken`` claim.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from unifi_udm.client.errors import UDMTokenDecodeError

CSRF_CLAIM: str = "csrfToken"


def _b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def decode_claims(token: str) -> dict[str, Any]:
    """Return the payload claims of *token* without verifying its signature.

    An empty or missing signature segment is accepted.

    Args:
        token: Compact-serialised JWT (``header.payload.signature``).

    Returns:
        The decoded claims object.

    Raises:
        UDMTokenDecodeError: If *token* is not three dot-separated segments,
            or the header/payload are not base64url-encoded JSON objects.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise UDMTokenDecodeError(
            f"token contains an invalid number of segments ({len(parts)})"
        )
    decoded: list[dict[str, Any]] = []
    for name, segment in (("header", parts[0]), ("payload", parts[1])):
        try:
            obj = json.loads(_b64url_decode(segment))
        except (binascii.Error, UnicodeError, ValueError) as exc:
            raise UDMTokenDecodeError(f"token {name} is malformed: {exc}") from exc
        if not isinstance(obj, dict):
            raise UDMTokenDecodeError(f"token {name} is not a JSON object")
        decoded.append(obj)
    return decoded[1]


def csrf_token_from_jwt(token: str) -> str:
    """Extract the CSRF token embedded in the session JWT.

    Raises:
        UDMTokenDecodeError: If the token is malformed, or its ``csrfToken``
            claim is missing, empty or not a string.
    """
    claim = decode_claims(token).get(CSRF_CLAIM)
    if claim is None or claim == "":
        raise UDMTokenDecodeError(f"token has no {CSRF_CLAIM} claim")
    if not isinstance(claim, str):
        raise UDMTokenDecodeError(f"{CSRF_CLAIM} claim is not a string")
    return claim
