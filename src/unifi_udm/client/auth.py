"""Login handshake for the UDM.

Flow::

    POST /api/auth/login {"username", "password", "rememberMe", "token"}
      → 200 + Set-Cookie: TOKEN=<jwt>   body: user profile
      → 4xx {"code": "AUTHENTICATION_FAILED_LIMIT_REACHED", ...}   (throttled, retried)
      → 4xx {"code": ..., "message": ..., "level": ...}            (rejected)

The JWT's ``csrfToken`` claim must be echoed in ``X-Csrf-Token`` on every
later call.  The network application info is fetched once with the new
credentials before the session is committed.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace

from unifi_udm.client.envelope import Failure, decode_login
from unifi_udm.client.errors import (
    CODE_LIMIT_REACHED,
    UDMAuthError,
    UDMCancelledError,
    UDMMissingSessionError,
)
from unifi_udm.client.http import UDMHTTP
from unifi_udm.client.info_ops import get_network_app_info
from unifi_udm.client.request import new_request
from unifi_udm.client.session import UDMCredentials, UDMSession
from unifi_udm.client.token import csrf_token_from_jwt
from unifi_udm.model.user import UDMUser
from unifi_udm.vendor.udm.endpoints import JWT_COOKIE_NAME, LOGIN

logger = logging.getLogger(__name__)

# Throttled logins are retried for up to ~25 s before giving up.
LOGIN_MAX_ATTEMPTS: int = 6
LOGIN_RETRY_DELAY_S: float = 5.0


def login(
    http: UDMHTTP,
    session: UDMSession,
    credentials: UDMCredentials,
    *,
    remember_me: bool = False,
    cancel: threading.Event | None = None,
) -> UDMSession:
    """Authenticate and populate *session*.

    Only the rate-limit rejection (``AUTHENTICATION_FAILED_LIMIT_REACHED``)
    is retried, every :data:`LOGIN_RETRY_DELAY_S` seconds for at most
    :data:`LOGIN_MAX_ATTEMPTS` attempts.  *session* is updated only once
    every step succeeded; on any error it keeps its previous contents.

    Args:
        http: Transport bound to the UDM.
        session: Session to populate.
        credentials: Username/password pair; not stored.
        remember_me: Ask the UDM for a long-lived session.
        cancel: Set this event to abort between attempts or during a
            back-off wait.

    Returns:
        *session*, now authenticated.

    Raises:
        UDMAuthError: If the UDM rejects the credentials or keeps throttling.
        UDMMissingSessionError: If the 200 response has no ``TOKEN`` cookie.
        UDMTokenDecodeError: If the cookie is not a well-formed JWT.
        UDMCancelledError: If *cancel* is set.
        UDMRequestError: On transport failure (not retried).
        UDMOperationError: If the follow-up network info fetch fails.
    """
    url = http.url(LOGIN)
    logger.debug("Authenticating user %s at %s", credentials.username, url)
    body = {
        "username": credentials.username,
        "password": credentials.password,
        "rememberMe": remember_me,
        "token": "",
    }

    attempt = 0
    while True:
        attempt += 1
        _check_cancel(cancel)
        resp = http.send(new_request(session, "POST", LOGIN, json=body))
        envelope = decode_login(resp)
        if not isinstance(envelope, Failure):
            break
        if envelope.code == CODE_LIMIT_REACHED and attempt < LOGIN_MAX_ATTEMPTS:
            logger.warning(
                "Login to %s throttled (attempt %d/%d); retrying in %.0fs",
                session.hostname, attempt, LOGIN_MAX_ATTEMPTS, LOGIN_RETRY_DELAY_S,
            )
            _wait(LOGIN_RETRY_DELAY_S, cancel)
            continue
        logger.error(
            "Failed to authenticate user %s with %s: status=%d code=%s message=%r",
            credentials.username, session.hostname,
            envelope.status_code, envelope.code, envelope.message,
            extra={"udm": session.log_context()},
        )
        raise UDMAuthError(
            envelope.message or f"HTTP {envelope.status_code}",
            code=envelope.code,
            status_code=envelope.status_code,
            attempts=attempt,
        )
    logger.debug("Authentication successful after %d attempt(s)", attempt)

    token = next((c.value for c in resp.cookies if c.name == JWT_COOKIE_NAME), "")
    if not token:
        logger.error("Failed to locate %s cookie in login response", JWT_COOKIE_NAME)
        raise UDMMissingSessionError(status_code=resp.status_code)
    csrf_token = csrf_token_from_jwt(token)
    logger.debug("Extracted CSRF token from JWT")

    profile = envelope.payload if isinstance(envelope.payload, dict) else {}
    candidate = replace(
        session,
        session_token=token,
        csrf_token=csrf_token,
        user=UDMUser.from_api(profile),
        app_info=None,
    )
    candidate.app_info = get_network_app_info(http, candidate)
    session.commit(candidate)
    logger.info(
        "Logged in to %s as %s (%s, network %s)",
        session.hostname,
        credentials.username,
        candidate.app_info.system.name,
        candidate.app_info.system.version,
        extra={"udm": session.log_context()},
    )
    return session


def _check_cancel(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise UDMCancelledError("login cancelled")


def _wait(delay_s: float, cancel: threading.Event | None) -> None:
    """Sleep *delay_s* seconds, returning early (with an error) on cancel."""
    if cancel is None:
        time.sleep(delay_s)
        return
    if cancel.wait(delay_s):
        raise UDMCancelledError("login cancelled while waiting to retry")
