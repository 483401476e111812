#!/usr/bin/env python3
"""Smoke-test script: log in and print the UDM network application info.

Usage::

    export UDM_HOST="192.168.1.1"
    export UDM_USERNAME="admin"
    export UDM_PASSWORD="your-password"
    export UDM_SITE="default"          # optional
    export UDM_INSECURE="true"         # optional, skip TLS verification
    python examples/get_app_info.py

Exit codes:
    0: info retrieved and printed successfully.
    1: missing environment variable or client error.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import sys


def _env(name: str, default: str | None = None) -> str:
    value = os.environ.get(name, default)
    if value is None:
        print(f"ERROR: required environment variable {name!r} is not set.", file=sys.stderr)
        sys.exit(1)
    return value


def main() -> None:
    host = _env("UDM_HOST")
    username = _env("UDM_USERNAME")
    password = _env("UDM_PASSWORD")
    site = _env("UDM_SITE", "")
    insecure = _env("UDM_INSECURE", "false").lower() in {"1", "true", "yes", "on"}
    if os.environ.get("UDM_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    # Import here so import errors surface after env var check.
    from unifi_udm.api import UDMClient
    from unifi_udm.client.errors import UDMError
    from unifi_udm.model.config import UDMConfig

    config = UDMConfig(
        hostname=host,
        username=username,
        password=password,
        site=site,
        ignore_untrusted_ssl_certificate=insecure,
    )
    try:
        with UDMClient(config) as client:
            info = client.network_app_info
    except UDMError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(dataclasses.asdict(info), indent=2))


if __name__ == "__main__":
    main()
