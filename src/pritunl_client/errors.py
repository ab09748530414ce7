"""
Exception hierarchy for the Pritunl client.

Every client operation either returns a decoded entity or raises one of the
exceptions below. The taxonomy mirrors the points at which a call can fail:

    RequestError           no response was obtained (DNS, refused, TLS, timeout)
    UnexpectedStatusError  a response arrived with a status other than 200
    AuthenticationError    ... specifically 401, invalid token or secret
    DecodeError            status 200, but the body is not the expected shape
    ValidationFailure      a client-side precondition failed before any request
    NotFoundError          a list-then-filter lookup found no matching entity

All of them derive from PritunlError, so a consumer that only wants to surface
the message can catch the base class. Messages always embed the operation name
and, where one exists, the raw response body:

    try:
        client.get_server(server_id)
    except UnexpectedStatusError as e:
        print(f"{e.operation} failed with {e.status_code}: {e.body}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PritunlError(Exception):
    """
    Base exception for every failure raised by the client.

    Attributes:
        operation: Name of the client operation that failed (e.g. "get_server").
        message: Human-readable description of what went wrong.
    """

    operation: str
    message: str

    def __str__(self) -> str:
        """Return a formatted error message."""
        return f"{self.operation}: {self.message}"


@dataclass
class RequestError(PritunlError):
    """
    Raised when the HTTP request produced no response at all.

    Attributes:
        cause: The underlying httpx transport exception.
    """

    cause: Exception | None = None

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.operation}: {self.message}: {self.cause}"
        return f"{self.operation}: {self.message}"


@dataclass
class UnexpectedStatusError(PritunlError):
    """
    Raised when the server answered with a status code other than 200.

    The response body is read in full before this is raised, so whatever
    diagnostic payload the server sent is preserved verbatim in ``body``.

    Attributes:
        status_code: HTTP status code from the response.
        body: Raw response body.
    """

    status_code: int = 0
    body: str = ""

    def __str__(self) -> str:
        return f"{self.operation}: {self.message}\ncode={self.status_code}\nbody={self.body}"


class AuthenticationError(UnexpectedStatusError):
    """Raised on 401 responses (invalid API token or secret)."""

    pass


@dataclass
class DecodeError(PritunlError):
    """
    Raised when a 200 response body cannot be decoded into the target type.

    Attributes:
        body: Raw response body that failed to decode.
        cause: The pydantic validation error describing the mismatch.
    """

    body: str = ""
    cause: Exception | None = None

    def __str__(self) -> str:
        text = f"{self.operation}: {self.message}"
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return f"{text}\nbody={self.body}"


class ValidationFailure(PritunlError):
    """Raised when input is rejected locally, before any request is sent."""

    pass


class NotFoundError(PritunlError):
    """Raised when a list-then-filter lookup finds no entity with the given id."""

    pass
