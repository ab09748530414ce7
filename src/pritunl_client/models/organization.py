"""Organization entity."""

from __future__ import annotations

from typing import ClassVar

from pritunl_client.models.base import PritunlModel


class Organization(PritunlModel):
    """
    A Pritunl organization.

    Organizations own users and are attached to (or detached from) servers.

    Attributes:
        id: Server-assigned identifier. Empty until created.
        name: Display name.
        auth_api: Whether the organization has its own API credentials.
        auth_token: Organization API token, if ``auth_api`` is enabled.
        auth_secret: Organization API secret, if ``auth_api`` is enabled.
        user_count: Number of users in the organization (read-only).
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id", "auth_token", "auth_secret"})

    id: str = ""
    name: str = ""
    auth_api: bool = False
    auth_token: str | None = None
    auth_secret: str | None = None
    user_count: int = 0
