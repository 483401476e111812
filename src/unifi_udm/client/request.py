"""Request construction for UDM API calls."""

from __future__ import annotations

from typing import Any

import requests
from requests.cookies import RequestsCookieJar, create_cookie

from unifi_udm.client.session import UDMSession
from unifi_udm.vendor.udm.endpoints import CSRF_HEADER, JWT_COOKIE_NAME


def new_request(
    session: UDMSession,
    method: str,
    path: str,
    json: Any = None,
) -> requests.Request:
    """Build an unauthenticated request for ``https://<hostname><path>``.

    JSON content negotiation headers are supplied by the transport.
    """
    return requests.Request(
        method=method.upper(),
        url=f"https://{session.hostname}{path}",
        json=json,
    )


def session_cookie(session: UDMSession) -> Any:
    """Return the ``TOKEN`` cookie presented on authenticated requests."""
    domain = session.cookie_domain
    # cookielib only matches an explicit domain against dotted hosts; a bare
    # hostname gets a host-only cookie instead.
    if "." not in domain:
        domain = ""
    return create_cookie(
        JWT_COOKIE_NAME,
        session.session_token,
        domain=domain,
        path="/",
        secure=True,
        rest={"HttpOnly": None, "SameSite": "None"},
    )


def attach(session: UDMSession, request: requests.Request) -> requests.Request:
    """Return a copy of *request* carrying the CSRF header and session cookie.

    *session* and *request* are left untouched.  Before login both values are
    empty strings and the UDM will reject the call.
    """
    headers = dict(request.headers or {})
    headers[CSRF_HEADER] = session.csrf_token

    jar = RequestsCookieJar()
    if isinstance(request.cookies, dict):
        jar.update(request.cookies)
    elif request.cookies:
        for cookie in request.cookies:
            jar.set_cookie(cookie)
    jar.set_cookie(session_cookie(session))

    return requests.Request(
        method=request.method,
        url=request.url,
        headers=headers,
        params=request.params,
        data=request.data,
        json=request.json,
        cookies=jar,
    )


def new_authenticated_request(
    session: UDMSession,
    method: str,
    path: str,
    json: Any = None,
) -> requests.Request:
    """Shorthand for :func:`attach` applied to :func:`new_request`."""
    return attach(session, new_request(session, method, path, json=json))
