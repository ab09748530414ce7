"""Host entity (a Pritunl node that servers can be attached to)."""

from __future__ import annotations

from typing import ClassVar

from pritunl_client.models.base import PritunlModel


class Host(PritunlModel):
    """A physical or administrative Pritunl node."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = ""
    name: str = ""
    hostname: str = ""
    status: str = ""
    public_addr: str = ""
    public_addr6: str = ""
    local_addr: str = ""
    local_addr6: str = ""
    availability_group: str = ""
    link_addr: str = ""
    sync_address: str = ""
