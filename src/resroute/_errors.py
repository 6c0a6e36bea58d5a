"""Error types for resroute.

All errors derive from ResourceError. Class validation failures carry the
offending key, the capability it was checked against, and the keys that
*are* registered for that capability, so a misconfigured route table can be
fixed from the message alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ResourceError(Exception):
    """Base class for all resroute errors."""


class ClassNotValidError(ResourceError):
    """A type key does not exist or does not provide the required capability."""

    kind = "class"

    def __init__(
        self,
        type_name: str,
        capability: str,
        available: Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.capability = capability
        self.available = sorted(available)
        self.reason = reason
        if reason is not None:
            msg = f"{self.kind} {type_name!r} is not a valid {capability}: {reason}"
        elif self.available:
            registered = ", ".join(self.available)
            msg = (
                f"{self.kind} {type_name!r} does not exist or is not a "
                f"{capability} (registered: {registered})"
            )
        else:
            msg = (
                f"{self.kind} {type_name!r} does not exist or is not a "
                f"{capability} (no {capability} types are registered)"
            )
        super().__init__(msg)


class ResourceClassInvalidError(ClassNotValidError):
    """The resource class is unknown or is not a resource handler."""

    kind = "resource class"


class AuthClassInvalidError(ClassNotValidError):
    """The authentication class is unknown or is not an authentication service."""

    kind = "authentication class"


class RegistrationError(ResourceError):
    """A factory could not be registered under the given key."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"cannot register {key!r}: {reason}")
