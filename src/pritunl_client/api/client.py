"""
HTTP API client for the Pritunl control plane.

This module provides a synchronous client for Pritunl's REST API. It covers
organizations, users, servers (with their organizations, routes, hosts and
start/stop lifecycle), site-to-site links, locations, location routes and
location hosts.

The client is designed to be used as a context manager to ensure the
underlying connection pool is released:

    with PritunlClient(config) as client:
        client.test_api_call()
        org = client.create_organization("engineering")

Every operation follows the same steps: build the path, serialise an optional
JSON body, send the signed request, then classify the response:

    no response          -> RequestError
    status != 200        -> UnexpectedStatusError (AuthenticationError on 401)
    undecodable body     -> DecodeError
    otherwise            -> the decoded entity

Parts of the API are not fully RESTful. Links, locations, location routes and
location hosts have no "get single" endpoint, so those lookups list the
parent collection and filter by id. A lookup that finds nothing raises
NotFoundError.

The client keeps no per-call state; one instance can be shared between
threads, with concurrency bounded only by the httpx connection pool.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from pritunl_client.api.auth import build_http_client
from pritunl_client.config import ClientConfig
from pritunl_client.errors import (
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RequestError,
    UnexpectedStatusError,
    ValidationFailure,
)
from pritunl_client.models import (
    Host,
    HostURI,
    Link,
    Links,
    Location,
    LocationHost,
    LocationRoute,
    Organization,
    Route,
    Server,
    ServerSettings,
    User,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ORGANIZATION = TypeAdapter(Organization)
_ORGANIZATIONS = TypeAdapter(list[Organization])
_USER = TypeAdapter(User)
_USERS = TypeAdapter(list[User])
_SERVER = TypeAdapter(Server)
_SERVERS = TypeAdapter(list[Server])
_ROUTES = TypeAdapter(list[Route])
_HOSTS = TypeAdapter(list[Host])
_LINK = TypeAdapter(Link)
_LINKS = TypeAdapter(Links)
_LOCATION = TypeAdapter(Location)
_LOCATIONS = TypeAdapter(list[Location])
_LOCATION_ROUTE = TypeAdapter(LocationRoute)
_LOCATION_HOST = TypeAdapter(LocationHost)
_HOST_URI = TypeAdapter(HostURI)


# =============================================================================
# CAPABILITY INTERFACE
# =============================================================================


class Client(Protocol):
    """Operations exposed by a Pritunl API client, grouped by resource family."""

    def test_api_call(self) -> None: ...

    def get_organizations(self) -> list[Organization]: ...
    def get_organization(self, organization_id: str) -> Organization: ...
    def create_organization(self, name: str) -> Organization: ...
    def update_organization(self, organization_id: str, organization: Organization) -> None: ...
    def delete_organization(self, organization_id: str) -> None: ...

    def get_user(self, user_id: str, organization_id: str) -> User: ...
    def create_user(self, user: User) -> User: ...
    def update_user(self, user_id: str, user: User) -> None: ...
    def delete_user(self, user_id: str, organization_id: str) -> None: ...

    def get_servers(self) -> list[Server]: ...
    def get_server(self, server_id: str) -> Server: ...
    def create_server(self, settings: ServerSettings | Mapping[str, Any]) -> Server: ...
    def update_server(self, server_id: str, server: Server) -> None: ...
    def delete_server(self, server_id: str) -> None: ...
    def start_server(self, server_id: str) -> None: ...
    def stop_server(self, server_id: str) -> None: ...

    def get_organizations_by_server(self, server_id: str) -> list[Organization]: ...
    def attach_organization_to_server(self, organization_id: str, server_id: str) -> None: ...
    def detach_organization_from_server(self, organization_id: str, server_id: str) -> None: ...

    def get_routes_by_server(self, server_id: str) -> list[Route]: ...
    def add_route_to_server(self, server_id: str, route: Route) -> None: ...
    def add_routes_to_server(self, server_id: str, routes: list[Route]) -> None: ...
    def update_route_on_server(self, server_id: str, route: Route) -> None: ...
    def delete_route_from_server(self, server_id: str, route: Route) -> None: ...

    def get_hosts(self) -> list[Host]: ...
    def get_hosts_by_server(self, server_id: str) -> list[Host]: ...
    def attach_host_to_server(self, host_id: str, server_id: str) -> None: ...
    def detach_host_from_server(self, host_id: str, server_id: str) -> None: ...

    def get_links(self) -> list[Link]: ...
    def get_link(self, link_id: str) -> Link: ...
    def create_link(self, link: Link) -> Link: ...
    def update_link(self, link_id: str, link: Link) -> None: ...
    def delete_link(self, link_id: str) -> None: ...

    def get_locations(self, link_id: str) -> list[Location]: ...
    def get_location(self, location_id: str, link_id: str) -> Location: ...
    def create_location(self, location: Location) -> Location: ...
    def update_location(self, location_id: str, location: Location) -> None: ...
    def delete_location(self, location_id: str, link_id: str) -> None: ...

    def get_route(self, route_id: str, link_id: str, location_id: str) -> LocationRoute: ...
    def create_route(self, route: LocationRoute) -> LocationRoute: ...
    def update_route(self, route_id: str, route: LocationRoute) -> None: ...
    def delete_route(self, route_id: str, link_id: str, location_id: str) -> None: ...

    def get_host(
        self, host_id: str, link_id: str, location_id: str, uri: str | None = None
    ) -> LocationHost: ...
    def get_host_uri(self, host_id: str, link_id: str, location_id: str) -> str: ...
    def create_host(self, host: LocationHost) -> LocationHost: ...
    def update_host(self, host_id: str, host: LocationHost) -> None: ...
    def delete_host(self, host_id: str, link_id: str, location_id: str) -> None: ...


# =============================================================================
# API CLIENT
# =============================================================================


class PritunlClient:
    """
    Synchronous client for the Pritunl REST API.

    Either a ``ClientConfig`` or a pre-built ``httpx.Client`` must be given.
    A client built from a config is owned (and closed) by this instance; an
    injected one is left open for its owner.

    Example:
        config = ClientConfig(url="https://vpn.example.com", token="t", secret="s")

        with PritunlClient(config) as client:
            server = client.create_server(ServerSettings(name="office", port=1194))
            client.attach_organization_to_server(org.id, server.id)
            client.start_server(server.id)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        if config is None and http_client is None:
            raise ValueError("PritunlClient needs a ClientConfig or an httpx.Client")
        self.config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def open(self) -> PritunlClient:
        """Create the underlying signed HTTP client if it does not exist yet."""
        if self._http_client is None and self.config is not None:
            self._http_client = build_http_client(self.config)
            self._owns_http_client = True
        return self

    def close(self) -> None:
        """Release the connection pool, if this instance owns it."""
        if self._http_client is not None and self._owns_http_client:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> PritunlClient:
        return self.open()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def http_client(self) -> httpx.Client:
        """
        Get the HTTP client, ensuring it's been initialized.

        Raises:
            RuntimeError: If the client has not been opened.
        """
        if self._http_client is None:
            raise RuntimeError(
                "PritunlClient is not open. "
                "Use 'with PritunlClient(config) as client:' or call open() first"
            )
        return self._http_client

    # -------------------------------------------------------------------------
    # Request / response plumbing
    # -------------------------------------------------------------------------

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        description: str,
        payload: Any = None,
    ) -> httpx.Response:
        """
        Send one signed request and reject anything but a 200 response.

        The body is read in full before classification so that error
        payloads reach the raised exception intact.

        Raises:
            RequestError: If no response was obtained, or its body could not be
                read (transport failure, bad content encoding, redirect loop).
            AuthenticationError: On 401.
            UnexpectedStatusError: On any other non-200 status.
        """
        logger.debug("%s: %s %s", operation, method, path)
        try:
            response = self.http_client.request(method, path, json=payload)
        except httpx.RequestError as e:
            logger.warning("%s: %s %s failed: %s", operation, method, path, e)
            raise RequestError(
                operation=operation,
                message=f"Error on HTTP request {method} {path}",
                cause=e,
            ) from e

        body = response.text
        if response.status_code == 401:
            logger.warning("%s: unauthorized (invalid token or secret)", operation)
            raise AuthenticationError(
                operation=operation,
                message=f"Unauthorized response on {description}: invalid token or secret",
                status_code=response.status_code,
                body=body,
            )
        if response.status_code != 200:
            logger.warning("%s: %s %s returned %d", operation, method, path, response.status_code)
            raise UnexpectedStatusError(
                operation=operation,
                message=f"Non-200 response on {description}",
                status_code=response.status_code,
                body=body,
            )
        return response

    @staticmethod
    def _require_ids(operation: str, **ids: str) -> None:
        """Reject empty path-forming ids before any request is sent."""
        missing = [name for name, value in ids.items() if not value]
        if missing:
            raise ValidationFailure(
                operation=operation,
                message=f"missing required {', '.join(missing)}",
            )

    @staticmethod
    def _decode(operation: str, response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        """Decode a 200 response body, raising DecodeError on mismatch."""
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                operation=operation,
                message="Error on decoding the response body",
                body=response.text,
                cause=e,
            ) from e

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    def test_api_call(self) -> None:
        """
        Verify connectivity and credentials against ``/state``.

        Raises:
            AuthenticationError: If the token or secret is rejected.
            UnexpectedStatusError: On any other non-200 status.
            RequestError: If the server cannot be reached.
        """
        self._request("test_api_call", "GET", "/state", "the test api call")

    # -------------------------------------------------------------------------
    # Organizations
    # -------------------------------------------------------------------------

    def get_organizations(self) -> list[Organization]:
        op = "get_organizations"
        response = self._request(op, "GET", "/organization", "getting the organizations")
        return self._decode(op, response, _ORGANIZATIONS)

    def get_organization(self, organization_id: str) -> Organization:
        op = "get_organization"
        response = self._request(
            op, "GET", f"/organization/{organization_id}", "getting the organization"
        )
        return self._decode(op, response, _ORGANIZATION)

    def create_organization(self, name: str) -> Organization:
        op = "create_organization"
        response = self._request(
            op, "POST", "/organization", "creating the organization", payload={"name": name}
        )
        return self._decode(op, response, _ORGANIZATION)

    def update_organization(self, organization_id: str, organization: Organization) -> None:
        self._request(
            "update_organization",
            "PUT",
            f"/organization/{organization_id}",
            "updating the organization",
            payload=organization.to_payload(),
        )

    def delete_organization(self, organization_id: str) -> None:
        self._request(
            "delete_organization",
            "DELETE",
            f"/organization/{organization_id}",
            "deleting the organization",
        )

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def get_user(self, user_id: str, organization_id: str) -> User:
        op = "get_user"
        response = self._request(
            op, "GET", f"/user/{organization_id}/{user_id}", "getting the user"
        )
        return self._decode(op, response, _USER)

    def create_user(self, user: User) -> User:
        """
        Create a user in ``user.organization``.

        The endpoint answers with an array of created users; the first one is
        returned.

        Raises:
            ValidationFailure: If ``user.organization`` is empty.
            DecodeError: If the response array is empty.
        """
        op = "create_user"
        self._require_ids(op, organization=user.organization)
        response = self._request(
            op,
            "POST",
            f"/user/{user.organization}",
            "creating the user",
            payload=user.to_payload(),
        )
        users = self._decode(op, response, _USERS)
        if not users:
            raise DecodeError(operation=op, message="empty users response", body=response.text)
        return users[0]

    def update_user(self, user_id: str, user: User) -> None:
        self._require_ids("update_user", organization=user.organization, user_id=user_id)
        self._request(
            "update_user",
            "PUT",
            f"/user/{user.organization}/{user_id}",
            "updating the user",
            payload=user.to_payload(),
        )

    def delete_user(self, user_id: str, organization_id: str) -> None:
        self._request(
            "delete_user", "DELETE", f"/user/{organization_id}/{user_id}", "deleting the user"
        )

    # -------------------------------------------------------------------------
    # Servers
    # -------------------------------------------------------------------------

    def get_servers(self) -> list[Server]:
        op = "get_servers"
        response = self._request(op, "GET", "/server", "getting servers")
        return self._decode(op, response, _SERVERS)

    def get_server(self, server_id: str) -> Server:
        op = "get_server"
        response = self._request(op, "GET", f"/server/{server_id}", "getting the server")
        return self._decode(op, response, _SERVER)

    def create_server(self, settings: ServerSettings | Mapping[str, Any]) -> Server:
        """
        Create a server from typed settings or a loosely typed mapping.

        A mapping is validated into ``ServerSettings`` first, so unknown keys,
        mistyped values and an incomplete bridge range are all rejected before
        any request is sent. Only supplied fields are serialised, together
        with the derived ``wg`` flag.

        Raises:
            ValidationFailure: If the settings are invalid.
        """
        if not isinstance(settings, ServerSettings):
            settings = ServerSettings.from_mapping(settings)

        op = "create_server"
        response = self._request(
            op, "POST", "/server", "creating the server", payload=settings.to_payload()
        )
        return self._decode(op, response, _SERVER)

    def update_server(self, server_id: str, server: Server) -> None:
        self._request(
            "update_server",
            "PUT",
            f"/server/{server_id}",
            "updating the server",
            payload=server.to_payload(),
        )

    def delete_server(self, server_id: str) -> None:
        self._request("delete_server", "DELETE", f"/server/{server_id}", "deleting the server")

    def start_server(self, server_id: str) -> None:
        self._request(
            "start_server", "PUT", f"/server/{server_id}/operation/start", "starting the server"
        )

    def stop_server(self, server_id: str) -> None:
        self._request(
            "stop_server", "PUT", f"/server/{server_id}/operation/stop", "stopping the server"
        )

    # Server <-> organization

    def get_organizations_by_server(self, server_id: str) -> list[Organization]:
        op = "get_organizations_by_server"
        response = self._request(
            op,
            "GET",
            f"/server/{server_id}/organization",
            "getting organizations on the server",
        )
        return self._decode(op, response, _ORGANIZATIONS)

    def attach_organization_to_server(self, organization_id: str, server_id: str) -> None:
        self._request(
            "attach_organization_to_server",
            "PUT",
            f"/server/{server_id}/organization/{organization_id}",
            "attaching an organization to the server",
        )

    def detach_organization_from_server(self, organization_id: str, server_id: str) -> None:
        self._request(
            "detach_organization_from_server",
            "DELETE",
            f"/server/{server_id}/organization/{organization_id}",
            "detaching the organization from the server",
        )

    # Server routes

    def get_routes_by_server(self, server_id: str) -> list[Route]:
        op = "get_routes_by_server"
        response = self._request(
            op, "GET", f"/server/{server_id}/route", "getting routes on the server"
        )
        return self._decode(op, response, _ROUTES)

    def add_route_to_server(self, server_id: str, route: Route) -> None:
        self._request(
            "add_route_to_server",
            "POST",
            f"/server/{server_id}/route",
            "adding a route to the server",
            payload=route.to_payload(),
        )

    def add_routes_to_server(self, server_id: str, routes: list[Route]) -> None:
        self._request(
            "add_routes_to_server",
            "POST",
            f"/server/{server_id}/routes",
            "adding routes to the server",
            payload=[route.to_payload() for route in routes],
        )

    def update_route_on_server(self, server_id: str, route: Route) -> None:
        self._request(
            "update_route_on_server",
            "PUT",
            f"/server/{server_id}/route/{route.route_id}",
            "updating a route on the server",
            payload=route.to_payload(),
        )

    def delete_route_from_server(self, server_id: str, route: Route) -> None:
        self._request(
            "delete_route_from_server",
            "DELETE",
            f"/server/{server_id}/route/{route.route_id}",
            "deleting a route on the server",
        )

    # Hosts

    def get_hosts(self) -> list[Host]:
        op = "get_hosts"
        response = self._request(op, "GET", "/host", "getting the hosts")
        return self._decode(op, response, _HOSTS)

    def get_hosts_by_server(self, server_id: str) -> list[Host]:
        op = "get_hosts_by_server"
        response = self._request(
            op, "GET", f"/server/{server_id}/host", "getting hosts by the server"
        )
        return self._decode(op, response, _HOSTS)

    def attach_host_to_server(self, host_id: str, server_id: str) -> None:
        self._request(
            "attach_host_to_server",
            "PUT",
            f"/server/{server_id}/host/{host_id}",
            "attaching the host to the server",
        )

    def detach_host_from_server(self, host_id: str, server_id: str) -> None:
        self._request(
            "detach_host_from_server",
            "DELETE",
            f"/server/{server_id}/host/{host_id}",
            "detaching the host from the server",
        )

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    def get_links(self) -> list[Link]:
        """
        List every link.

        ``GET /link`` answers with a paged envelope. The pages after the
        first are requested with ``?page=N`` until ``page_total`` is reached,
        so lookups built on this list see every link.
        """
        op = "get_links"
        response = self._request(op, "GET", "/link", "getting the links")
        envelope = self._decode(op, response, _LINKS)
        links = list(envelope.links)
        for page in range(envelope.page + 1, envelope.page_total):
            response = self._request(op, "GET", f"/link?page={page}", "getting the links")
            links.extend(self._decode(op, response, _LINKS).links)
        return links

    def find_link(self, predicate: Callable[[Link], bool]) -> Link | None:
        """Return the first link matching ``predicate``, or None."""
        return next((link for link in self.get_links() if predicate(link)), None)

    def get_link(self, link_id: str) -> Link:
        """
        Resolve a link by id.

        There is no single-link endpoint, so this lists every link and
        selects the one with a matching id.

        Raises:
            NotFoundError: If no link has this id.
        """
        link = self.find_link(lambda candidate: candidate.id == link_id)
        if link is None:
            raise NotFoundError(operation="get_link", message=f"link {link_id!r} not found")
        return link

    def get_link_by_name(self, name: str) -> Link:
        """
        Resolve a link by its name.

        Raises:
            NotFoundError: If no link has this name.
        """
        link = self.find_link(lambda candidate: candidate.name == name)
        if link is None:
            raise NotFoundError(
                operation="get_link_by_name", message=f"could not find a link named {name!r}"
            )
        return link

    def create_link(self, link: Link) -> Link:
        op = "create_link"
        response = self._request(
            op, "POST", "/link", "creating the link", payload=link.to_payload()
        )
        return self._decode(op, response, _LINK)

    def update_link(self, link_id: str, link: Link) -> None:
        self._request(
            "update_link",
            "PUT",
            f"/link/{link_id}",
            "updating the link",
            payload=link.to_payload(),
        )

    def delete_link(self, link_id: str) -> None:
        self._request("delete_link", "DELETE", f"/link/{link_id}", "deleting the link")

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------

    def get_locations(self, link_id: str) -> list[Location]:
        op = "get_locations"
        response = self._request(
            op, "GET", f"/link/{link_id}/location", "getting the locations"
        )
        return self._decode(op, response, _LOCATIONS)

    def find_location(
        self, link_id: str, predicate: Callable[[Location], bool]
    ) -> Location | None:
        """Return the first location under ``link_id`` matching ``predicate``, or None."""
        return next(
            (location for location in self.get_locations(link_id) if predicate(location)),
            None,
        )

    def get_location(self, location_id: str, link_id: str) -> Location:
        """
        Resolve a location by id within a link.

        The parent link is resolved first; its errors (including
        NotFoundError) propagate unchanged. The location is then selected
        from the link's location list.

        Raises:
            NotFoundError: If the link or the location does not exist.
        """
        self.get_link(link_id)
        location = self.find_location(link_id, lambda candidate: candidate.id == location_id)
        if location is None:
            raise NotFoundError(
                operation="get_location",
                message=f"location {location_id!r} not found in link {link_id!r}",
            )
        return location

    def get_location_by_name(self, link_id: str, name: str) -> Location:
        """
        Resolve a location by name within a link.

        Raises:
            NotFoundError: If no location under the link has this name.
        """
        location = self.find_location(link_id, lambda candidate: candidate.name == name)
        if location is None:
            raise NotFoundError(
                operation="get_location_by_name",
                message=f"could not find a location named {name!r} in link {link_id!r}",
            )
        return location

    def create_location(self, location: Location) -> Location:
        op = "create_location"
        self._require_ids(op, link_id=location.link_id)
        response = self._request(
            op,
            "POST",
            f"/link/{location.link_id}/location",
            "creating the location",
            payload=location.to_payload(),
        )
        return self._decode(op, response, _LOCATION)

    def update_location(self, location_id: str, location: Location) -> None:
        self._require_ids(
            "update_location", link_id=location.link_id, location_id=location_id
        )
        self._request(
            "update_location",
            "PUT",
            f"/link/{location.link_id}/location/{location_id}",
            "updating the location",
            payload=location.to_payload(),
        )

    def delete_location(self, location_id: str, link_id: str) -> None:
        self._request(
            "delete_location",
            "DELETE",
            f"/link/{link_id}/location/{location_id}",
            "deleting the location",
        )

    # -------------------------------------------------------------------------
    # Location routes
    # -------------------------------------------------------------------------

    def get_route(self, route_id: str, link_id: str, location_id: str) -> LocationRoute:
        """
        Resolve a location route from its parent location's embedded routes.

        Raises:
            NotFoundError: If the link, location or route does not exist.
        """
        location = self.get_location(location_id, link_id)
        route = location.find_route(route_id)
        if route is None:
            raise NotFoundError(
                operation="get_route",
                message=f"route {route_id!r} not found in location {location_id!r}",
            )
        return route

    def create_route(self, route: LocationRoute) -> LocationRoute:
        op = "create_route"
        self._require_ids(op, link_id=route.link_id, location_id=route.location_id)
        response = self._request(
            op,
            "POST",
            f"/link/{route.link_id}/location/{route.location_id}/route",
            "creating the location route",
            payload=route.to_payload(),
        )
        return self._decode(op, response, _LOCATION_ROUTE)

    def update_route(self, route_id: str, route: LocationRoute) -> None:
        self._require_ids(
            "update_route", link_id=route.link_id, location_id=route.location_id, route_id=route_id
        )
        self._request(
            "update_route",
            "PUT",
            f"/link/{route.link_id}/location/{route.location_id}/route/{route_id}",
            "updating the route",
            payload=route.to_payload(),
        )

    def delete_route(self, route_id: str, link_id: str, location_id: str) -> None:
        self._request(
            "delete_route",
            "DELETE",
            f"/link/{link_id}/location/{location_id}/route/{route_id}",
            "deleting the route",
        )

    # -------------------------------------------------------------------------
    # Location hosts
    # -------------------------------------------------------------------------

    def get_host(
        self,
        host_id: str,
        link_id: str,
        location_id: str,
        uri: str | None = None,
    ) -> LocationHost:
        """
        Resolve a location host and its connection URI.

        The host record comes from the parent location's embedded hosts. A
        non-empty ``uri`` is trusted as-is; otherwise one request to the URI
        sub-endpoint fills it in.

        Args:
            host_id: Host id.
            link_id: Parent link id.
            location_id: Parent location id.
            uri: Already known connection URI, if any.

        Raises:
            NotFoundError: If the link, location or host does not exist.
        """
        location = self.get_location(location_id, link_id)
        host = location.find_host(host_id)
        if host is None:
            raise NotFoundError(
                operation="get_host",
                message=f"host {host_id!r} not found in location {location_id!r}",
            )

        if uri:
            host.uri = uri
        else:
            host.uri = self.get_host_uri(host_id, link_id, location_id)
        return host

    def get_host_uri(self, host_id: str, link_id: str, location_id: str) -> str:
        op = "get_host_uri"
        response = self._request(
            op,
            "GET",
            f"/link/{link_id}/location/{location_id}/host/{host_id}/uri",
            "getting the host uri",
        )
        return self._decode(op, response, _HOST_URI).uri

    def create_host(self, host: LocationHost) -> LocationHost:
        """
        Create a location host, then fetch its connection URI.

        The creation response does not include the URI, so a second request
        to the URI sub-endpoint always follows.

        Raises:
            ValidationFailure: If ``host.link_id`` or ``host.location_id`` is empty.
            DecodeError: If the creation response carries no host id.
        """
        op = "create_host"
        self._require_ids(op, link_id=host.link_id, location_id=host.location_id)
        response = self._request(
            op,
            "POST",
            f"/link/{host.link_id}/location/{host.location_id}/host",
            "creating the location host",
            payload=host.to_payload(),
        )
        created = self._decode(op, response, _LOCATION_HOST)
        if not created.id:
            raise DecodeError(
                operation=op, message="created host has no id", body=response.text
            )
        created.link_id = created.link_id or host.link_id
        created.location_id = created.location_id or host.location_id
        created.uri = self.get_host_uri(created.id, created.link_id, created.location_id)
        return created

    def update_host(self, host_id: str, host: LocationHost) -> None:
        self._require_ids(
            "update_host", link_id=host.link_id, location_id=host.location_id, host_id=host_id
        )
        self._request(
            "update_host",
            "PUT",
            f"/link/{host.link_id}/location/{host.location_id}/host/{host_id}",
            "updating the host",
            payload=host.to_payload(),
        )

    def delete_host(self, host_id: str, link_id: str, location_id: str) -> None:
        self._request(
            "delete_host",
            "DELETE",
            f"/link/{link_id}/location/{location_id}/host/{host_id}",
            "deleting the host",
        )
