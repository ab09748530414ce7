"""
VPN server entities.

``Server`` is the wire representation returned by ``/server`` endpoints and
sent on update. ``ServerSettings`` is the typed input accepted by
``PritunlClient.create_server``: every recognised creation field is a named
optional attribute, and construction rejects unknown keys and values of the
wrong type.

Creation rules enforced by ``ServerSettings``:

    1. ``network_mode = "bridge"`` requires both ``network_start`` and
       ``network_end``. A violation raises ``ValidationFailure`` at
       construction, before any request could be sent.
    2. ``wg`` (WireGuard enabled) is derived, never supplied: it is true only
       when ``network_wg`` is non-empty and ``port_wg`` is strictly positive.
    3. Only fields that were actually supplied are serialised, plus ``wg``.

Example:
    settings = ServerSettings(name="office", network="10.8.0.0/24", port=1194)
    server = client.create_server(settings)

    # A loosely typed mapping is validated the same way.
    server = client.create_server({"name": "office", "port": 1194})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, model_validator

from pritunl_client.errors import ValidationFailure
from pritunl_client.models.base import PritunlModel

# =============================================================================
# CONSTANTS
# =============================================================================

NETWORK_MODE_TUNNEL = "tunnel"
NETWORK_MODE_BRIDGE = "bridge"

SERVER_STATUS_ONLINE = "online"

NetworkMode = Literal["tunnel", "bridge"]


# =============================================================================
# WIRE ENTITY
# =============================================================================


class Server(PritunlModel):
    """
    A Pritunl VPN server.

    Servers are started and stopped independently of CRUD; the server rejects
    most modifications while it is running.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset(
        {"id", "status", "network_start", "network_end"}
    )

    id: str = ""
    name: str = ""
    status: str = ""
    protocol: str = ""
    cipher: str = ""
    hash: str = ""
    network: str = ""
    port: int = 0
    bind_address: str = ""
    groups: list[str] = Field(default_factory=list)
    dns_servers: list[str] = Field(default_factory=list)

    network_wg: str = ""
    port_wg: int = 0
    wg: bool = False

    sso_auth: bool = False
    otp_auth: bool = False
    device_auth: bool = False
    dynamic_firewall: bool = False
    ipv6: bool = False

    dh_param_bits: int = 0
    ping_interval: int = 0
    ping_timeout: int = 0
    link_ping_interval: int = 0
    link_ping_timeout: int = 0
    session_timeout: int | None = None
    inactive_timeout: int | None = None
    max_clients: int = 0

    network_mode: str = ""
    network_start: str = ""
    network_end: str = ""

    mss_fix: int | None = None
    max_devices: int | None = None
    pre_connect_msg: str | None = None
    allowed_devices: str | None = None
    search_domain: str | None = None
    replica_count: int = 0

    multi_device: bool = False
    debug: bool = False
    restrict_routes: bool = False
    block_outside_dns: bool = False
    dns_mapping: bool = False
    inter_client: bool = False
    vxlan: bool = False

    @property
    def is_running(self) -> bool:
        """True when the server reports itself online."""
        return self.status == SERVER_STATUS_ONLINE


# =============================================================================
# CREATION SETTINGS
# =============================================================================


class ServerSettings(BaseModel):
    """
    Strictly typed field set for creating a server.

    Every attribute is optional; unset attributes are not sent. Integer fields
    do not accept booleans or strings, string fields do not accept numbers, and
    list fields must be lists of strings.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str | None = None
    protocol: str | None = None
    cipher: str | None = None
    network: str | None = None
    hash: str | None = None
    port: int | None = None
    bind_address: str | None = None
    groups: list[str] | None = None
    dns_servers: list[str] | None = None

    network_wg: str | None = None
    port_wg: int | None = None

    sso_auth: bool | None = None
    otp_auth: bool | None = None
    device_auth: bool | None = None
    dynamic_firewall: bool | None = None
    ipv6: bool | None = None

    dh_param_bits: int | None = None
    ping_interval: int | None = None
    ping_timeout: int | None = None
    link_ping_interval: int | None = None
    link_ping_timeout: int | None = None
    session_timeout: int | None = None
    inactive_timeout: int | None = None
    max_clients: int | None = None

    network_mode: NetworkMode | None = None
    network_start: str | None = None
    network_end: str | None = None

    mss_fix: int | None = None
    max_devices: int | None = None
    pre_connect_msg: str | None = None
    allowed_devices: str | None = None
    search_domain: str | None = None
    replica_count: int | None = None

    multi_device: bool | None = None
    debug: bool | None = None
    restrict_routes: bool | None = None
    block_outside_dns: bool | None = None
    dns_mapping: bool | None = None
    inter_client: bool | None = None
    vxlan: bool | None = None

    @model_validator(mode="after")
    def _check_bridge_range(self) -> ServerSettings:
        # Raised directly (not as ValueError) so it is not folded into a
        # pydantic ValidationError.
        if self.network_mode == NETWORK_MODE_BRIDGE and not (
            self.network_start and self.network_end
        ):
            raise ValidationFailure(
                operation="create_server",
                message=(
                    f"the attribute network_mode = {NETWORK_MODE_BRIDGE} "
                    "requires network_start and network_end attributes"
                ),
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wg(self) -> bool:
        """WireGuard is enabled when both a network and a positive port are set."""
        return bool(self.network_wg) and (self.port_wg or 0) > 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ServerSettings:
        """
        Build settings from a loosely typed mapping.

        Keys whose value is ``None`` are treated as absent.

        Args:
            data: Field name to value mapping, e.g. decoded configuration.

        Returns:
            Validated settings.

        Raises:
            ValidationFailure: On unknown keys, mistyped values, or a bridge
                network without a start and end address.
        """
        try:
            return cls.model_validate({k: v for k, v in data.items() if v is not None})
        except ValidationError as e:
            raise ValidationFailure(
                operation="create_server",
                message=f"invalid server settings: {e}",
            ) from e

    def to_payload(self) -> dict[str, Any]:
        """Serialize the supplied fields, plus the derived ``wg`` flag."""
        payload = self.model_dump(mode="json", exclude_unset=True)
        payload["wg"] = self.wg
        return payload
