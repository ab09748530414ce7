"""
Server route entity.

Pritunl identifies a server route by the hex encoding of its network string
(``10.0.0.0/24`` becomes ``31302e302e302e302f3234``). The listing endpoint
returns that id explicitly; a route built locally has none, so ``route_id``
derives it from the network.
"""

from __future__ import annotations

from typing import ClassVar

from pritunl_client.models.base import PritunlModel


class Route(PritunlModel):
    """A network route pushed to clients of one server."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = ""
    network: str = ""
    nat: bool = False
    comment: str | None = None
    virtual_network: bool = False
    net_gateway: bool = False
    server_link: bool = False
    metric: int | None = None
    advertise: bool = False
    nat_interface: str | None = None
    nat_netmap: str | None = None

    @property
    def route_id(self) -> str:
        """Identifier used in ``/server/:id/route/:route_id`` paths."""
        if self.id:
            return self.id
        return self.network.encode().hex()
