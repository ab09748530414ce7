"""
Location entities of a site-to-site link.

A location belongs to exactly one link and, in its read representation,
embeds the full list of its routes and hosts. Neither locations nor their
children have a "get single" endpoint:

    Location       GET /link/:link_id/location, filtered by id
    LocationRoute  embedded in Location.routes
    LocationHost   embedded in Location.hosts

A location host additionally has a connection URI that is not part of the
embedded representation. It is served by its own sub-endpoint
(``/link/:link_id/location/:location_id/host/:id/uri``) whose body is decoded
into ``HostURI``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from pritunl_client.models.base import PritunlModel


class LocationRoute(PritunlModel):
    """A network routed through one location of a link."""

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = ""
    network: str = ""
    link_id: str = ""
    location_id: str = ""


class LocationHost(PritunlModel):
    """
    A connection endpoint within a location.

    The connection-state fields (``timeout``, ``backoff``, ``ping_timestamp_ttl``,
    ``address6``, ``version``, ``hosts``) are reported as ``null`` until the
    host has checked in at least once, so they are nullable here.

    Attributes:
        uri: Connection URI. Not returned by the embedded representation;
             the client fills it in from the URI sub-endpoint.
    """

    id: str = ""
    name: str = ""
    link_id: str = ""
    location_id: str = ""
    status: str = ""
    hosts: str | None = None
    hosts_state_available: int = 0
    hosts_state_total: int = 0
    timeout: int | None = None
    priority: int = 0
    backoff: int | None = None
    ping_timestamp_ttl: int | str | None = None
    static: bool = False
    public_address: str = ""
    local_address: str = ""
    address6: str | None = None
    version: str | None = None
    uri: str = ""


class HostURI(LocationHost):
    """Body of the location host URI sub-endpoint (a full host record)."""


class Location(PritunlModel):
    """A geographic or logical grouping of hosts under a link."""

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"id", "type", "ipv6", "link_type", "hosts", "routes", "peers"}
    )

    id: str = ""
    name: str = ""
    type: str = ""
    ipv6: bool = False
    link_id: str = ""
    link_type: str = ""
    hosts: list[LocationHost] = Field(default_factory=list)
    routes: list[LocationRoute] = Field(default_factory=list)
    peers: list[Any] = Field(default_factory=list)

    def find_route(self, route_id: str) -> LocationRoute | None:
        """Return the embedded route with ``route_id``, if any."""
        return next((route for route in self.routes if route.id == route_id), None)

    def find_host(self, host_id: str) -> LocationHost | None:
        """Return the embedded host with ``host_id``, if any."""
        return next((host for host in self.hosts if host.id == host_id), None)
