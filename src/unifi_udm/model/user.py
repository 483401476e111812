"""Typed model for the user profile returned by login."""

from __future__ import annotations

from dataclasses import dataclass

from unifi_udm.model.base import ApiModel, api_field


@dataclass
class UDMUser(ApiModel):
    """Authenticated UDM account, stored verbatim from the login response.

    Attributes:
        id: Account identifier.
        username: Login name.
        first_name: Given name.
        last_name: Family name.
        email: Account e-mail address.
        device_token: Token issued for a remembered device (usually empty).
        unique_id: UI account unique identifier.
    """

    id: str = ""
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    device_token: str = api_field("deviceToken", default="")
    unique_id: str = ""
