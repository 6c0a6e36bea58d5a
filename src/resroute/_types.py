"""Capability protocols for resroute.

A registered type plays one of two roles:
- Resource is the request-scoped handler built for a matched path
- AuthenticationService decides whether the identity may use that resource

Both are constructed the same way: ``factory(identity, request)``. The
identity and request objects are opaque here; they belong to the caller.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Capability names, used in validation and error messages.
RESOURCE_HANDLER = "resource handler"
AUTHENTICATION_SERVICE = "authentication service"


@runtime_checkable
class Resource(Protocol):
    """A resource handler scoped to a single request.

    Receives the HTTP method and the positional path arguments extracted
    by the matching ResourceConfiguration.
    """

    def handle(self, method: str, /, *arguments: str) -> Any: ...


@runtime_checkable
class AuthenticationService(Protocol):
    """Authenticates the identity of a single request."""

    def authenticate(self) -> bool: ...
