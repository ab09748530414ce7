"""User entity."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from pritunl_client.models.base import PritunlModel


class User(PritunlModel):
    """
    A VPN user belonging to exactly one organization.

    Users are addressed by the composite key ``(organization, id)``; the
    ``organization`` field is required on create and update because it is
    part of the request path.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = ""
    organization: str = ""
    name: str = ""
    type: str = ""
    auth_type: str = ""
    email: str = ""
    groups: list[str] = Field(default_factory=list)
    disabled: bool = False
    pin: bool | str = False
    network_links: list[str] = Field(default_factory=list)
    bypass_secondary: bool = False
    client_to_client: bool = False
    dns_servers: list[str] = Field(default_factory=list)
    dns_suffix: str = ""
    port_forwarding: list[dict[str, Any]] = Field(default_factory=list)
    mac_addresses: list[str] = Field(default_factory=list)
