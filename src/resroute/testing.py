"""Test utilities for resroute.

Provides stand-in resource and authentication types for tests and examples.
These are NOT real handlers — they record what they were built with so a
caller can assert on it.

For real applications, register your own factories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from resroute._registry import RegistryBuilder


@dataclass(frozen=True, slots=True)
class StubRequest:
    """A minimal inbound request: method, path, headers and body."""

    method: str = "GET"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class StubResource:
    """Resource that echoes the method and arguments it handles.

    >>> from resroute.testing import StubRequest, StubResource
    >>> StubResource("alice", StubRequest()).handle("GET", "42")
    ('alice', 'GET', ('42',))
    """

    def __init__(self, identity: Any, request: Any) -> None:
        self.identity = identity
        self.request = request

    def handle(self, method: str, /, *arguments: str) -> Any:
        return (self.identity, method, arguments)


class StubAuthenticationService:
    """Authenticates any identity that is not None."""

    def __init__(self, identity: Any, request: Any) -> None:
        self.identity = identity
        self.request = request

    def authenticate(self) -> bool:
        return self.identity is not None


STUB_RESOURCE = "resroute.testing.StubResource"
STUB_AUTHENTICATION = "resroute.testing.StubAuthenticationService"


def register(builder: RegistryBuilder[Any, Any]) -> RegistryBuilder[Any, Any]:
    """Register the stub types under STUB_RESOURCE and STUB_AUTHENTICATION."""
    return builder.resource(STUB_RESOURCE, StubResource).authentication(
        STUB_AUTHENTICATION, StubAuthenticationService
    )
