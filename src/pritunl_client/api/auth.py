"""
Request signing for the Pritunl API.

Pritunl authenticates API calls with four headers computed per request:

    Auth-Token      the administrator API token
    Auth-Timestamp  current Unix time in whole seconds
    Auth-Nonce      a random, single-use hex string
    Auth-Signature  base64(HMAC-SHA256(secret, token&timestamp&nonce&METHOD&path))

``PritunlAuth`` plugs this scheme into httpx as an ``httpx.Auth`` so that
every request sent through the client is signed right before it goes out.
``build_http_client`` assembles the ``httpx.Client`` the resource client
uses: base URL, signing, TLS verification policy and timeout.

The signed path is relative to the configured base URL, so a deployment
served under a prefix (``https://host/pritunl``) signs ``/server`` and not
``/pritunl/server``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from collections.abc import Generator

import httpx

from pritunl_client.config import ClientConfig

HEADER_TOKEN = "Auth-Token"
HEADER_TIMESTAMP = "Auth-Timestamp"
HEADER_NONCE = "Auth-Nonce"
HEADER_SIGNATURE = "Auth-Signature"


def sign(token: str, secret: str, timestamp: str, nonce: str, method: str, path: str) -> str:
    """
    Compute the Auth-Signature header value.

    Deterministic for a fixed set of inputs; freshness comes from the
    timestamp and nonce the caller supplies.

    Args:
        token: API token.
        secret: API secret used as the HMAC key.
        timestamp: Unix time in seconds, as a string.
        nonce: Single-use random string.
        method: HTTP method; upper-cased before signing.
        path: Request path relative to the API base URL.

    Returns:
        Base64-encoded HMAC-SHA256 digest.
    """
    auth_string = "&".join([token, timestamp, nonce, method.upper(), path])
    digest = hmac.new(secret.encode(), auth_string.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class PritunlAuth(httpx.Auth):
    """
    httpx authentication flow that signs every outgoing request.

    Attributes:
        token: API token.
        base_path: Path component of the base URL, stripped before signing.
    """

    def __init__(self, token: str, secret: str, base_path: str = "") -> None:
        self.token = token
        self._secret = secret
        self.base_path = base_path.rstrip("/")

    def __repr__(self) -> str:
        return f"PritunlAuth(token={self.token!r}, base_path={self.base_path!r})"

    def signed_path(self, request: httpx.Request) -> str:
        """Return the request path as the server sees it, minus the base prefix."""
        path = request.url.path
        if self.base_path and path.startswith(self.base_path):
            path = path[len(self.base_path) :] or "/"
        return path

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        timestamp = str(int(time.time()))
        nonce = uuid.uuid4().hex
        request.headers[HEADER_TOKEN] = self.token
        request.headers[HEADER_TIMESTAMP] = timestamp
        request.headers[HEADER_NONCE] = nonce
        request.headers[HEADER_SIGNATURE] = sign(
            self.token,
            self._secret,
            timestamp,
            nonce,
            request.method,
            self.signed_path(request),
        )
        yield request


def build_http_client(
    config: ClientConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Create the signed ``httpx.Client`` used by ``PritunlClient``.

    Relative request paths are resolved against ``config.url``. When
    ``config.insecure`` is set, certificate verification is disabled. Only
    ``Accept`` is a default header; httpx adds ``Content-Type`` to requests
    that carry a JSON body.

    Args:
        config: Connection settings.
        transport: Optional custom transport (e.g. ``httpx.MockTransport``).

    Returns:
        A ready-to-use client. The caller owns it and must close it.
    """
    base_url = httpx.URL(config.url)
    return httpx.Client(
        base_url=base_url,
        auth=PritunlAuth(config.token, config.secret, base_path=base_url.path),
        verify=not config.insecure,
        timeout=config.timeout,
        headers={"Accept": "application/json"},
        transport=transport,
    )
