"""
API client modules for the Pritunl control plane.

This package contains the signed HTTP transport and the resource client. It
uses httpx for synchronous HTTP requests.

Example:
    from pritunl_client.api import PritunlClient
    from pritunl_client.config import load_config

    with PritunlClient(load_config()) as client:
        client.test_api_call()
        servers = client.get_servers()
"""

from pritunl_client.api.auth import PritunlAuth, build_http_client, sign
from pritunl_client.api.client import Client, PritunlClient

__all__ = [
    "Client",
    "PritunlAuth",
    "PritunlClient",
    "build_http_client",
    "sign",
]
