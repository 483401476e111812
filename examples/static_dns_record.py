#!/usr/bin/env python3
"""Create, update and delete a throw-away static DNS record.

Usage::

    export UDM_HOST="192.168.1.1"
    export UDM_USERNAME="admin"
    export UDM_PASSWORD="your-password"
    export UDM_INSECURE="true"         # optional
    python examples/static_dns_record.py [name] [ipv4]

Defaults: ``example-host.lan`` resolving to ``10.0.0.5``.
"""

from __future__ import annotations

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
    insecure = _env("UDM_INSECURE", "false").lower() in {"1", "true", "yes", "on"}
    key = sys.argv[1] if len(sys.argv) > 1 else "example-host.lan"
    value = sys.argv[2] if len(sys.argv) > 2 else "10.0.0.5"

    from unifi_udm.api import UDMClient
    from unifi_udm.client.errors import UDMError
    from unifi_udm.model.config import UDMConfig
    from unifi_udm.model.dns import StaticDNSRecord

    config = UDMConfig(
        hostname=host,
        username=username,
        password=password,
        ignore_untrusted_ssl_certificate=insecure,
    )
    try:
        with UDMClient(config) as client:
            record = client.create_static_dns_record(
                StaticDNSRecord(key=key, record_type="A", value=value, ttl=300)
            )
            print(f"created {record.id}: {record.key} A {record.value} ttl={record.ttl}")

            record.ttl = 600
            record = client.update_static_dns_record(record.id, record)
            print(f"updated {record.id}: ttl={record.ttl}")

            client.delete_static_dns_record(record.id)
            print(f"deleted {record.id}")
    except UDMError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
