"""Pritunl control-plane client.

A synchronous, typed client for the Pritunl VPN server API: organizations,
users, servers, hosts, routes, site-to-site links and their locations.

    from pritunl_client import PritunlClient, load_config

    with PritunlClient(load_config()) as client:
        org = client.create_organization("engineering")

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from pritunl_client.api import Client, PritunlClient
from pritunl_client.config import ClientConfig, load_config
from pritunl_client.errors import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    PritunlError,
    RequestError,
    UnexpectedStatusError,
    ValidationFailure,
)
from pritunl_client.models import (
    Host,
    Link,
    Location,
    LocationHost,
    LocationRoute,
    Organization,
    Route,
    Server,
    ServerSettings,
    User,
)

# ---------------------------------------------------------------------------
# Package version: read from pyproject.toml via importlib.metadata.
#
# If the package is imported without being installed we fall back to
# "0.0.0-dev" so imports still work from a source checkout.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("pritunl_client")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "AuthenticationError",
    "Client",
    "ClientConfig",
    "DecodeError",
    "Host",
    "Link",
    "Location",
    "LocationHost",
    "LocationRoute",
    "NotFoundError",
    "Organization",
    "PritunlClient",
    "PritunlError",
    "RequestError",
    "Route",
    "Server",
    "ServerSettings",
    "UnexpectedStatusError",
    "User",
    "ValidationFailure",
    "__version__",
    "load_config",
]
