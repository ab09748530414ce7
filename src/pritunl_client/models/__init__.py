"""
Typed entities exchanged with the Pritunl API.

Every model mirrors the wire schema of one resource kind. Models are plain
values: the client builds a fresh one for every response and never keeps a
reference to it.
"""

from pritunl_client.models.base import PritunlModel
from pritunl_client.models.host import Host
from pritunl_client.models.link import Link, Links
from pritunl_client.models.location import HostURI, Location, LocationHost, LocationRoute
from pritunl_client.models.organization import Organization
from pritunl_client.models.route import Route
from pritunl_client.models.server import (
    NETWORK_MODE_BRIDGE,
    NETWORK_MODE_TUNNEL,
    Server,
    ServerSettings,
)
from pritunl_client.models.user import User

__all__ = [
    "NETWORK_MODE_BRIDGE",
    "NETWORK_MODE_TUNNEL",
    "Host",
    "HostURI",
    "Link",
    "Links",
    "Location",
    "LocationHost",
    "LocationRoute",
    "Organization",
    "PritunlModel",
    "Route",
    "Server",
    "ServerSettings",
    "User",
]
