"""Type registry for resource and authentication factories.

Resource configurations name their handler and authentication service by a
stable string key. The registry maps those keys to factories, so nothing is
ever instantiated by reflecting on a class name.

Architecture:
- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (identity, request) → instance
- Capabilities are checked when a factory is registered, and keys are
  checked when a ResourceConfiguration is built against the registry

Example::

    builder = RegistryBuilder()
    builder.resource("items.ItemResource", ItemResource)
    builder.authentication("auth.Anonymous", AnonymousAuth)
    registry = builder.build()

    config = registry.configure("items/%", "items", "items.ItemResource", "auth.Anonymous")
    resource = config.invoke_resource(user, request)
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from resroute._errors import (
    AuthClassInvalidError,
    ClassNotValidError,
    RegistrationError,
    ResourceClassInvalidError,
)
from resroute._resource import ResourceConfiguration
from resroute._types import (
    AUTHENTICATION_SERVICE,
    RESOURCE_HANDLER,
    AuthenticationService,
    Resource,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from resroute._config import ResourceDeclaration

logger = logging.getLogger("resroute")

# Factory type aliases
type ResourceFactory[Identity, Request] = Callable[[Identity, Request], Resource]
type AuthFactory[Identity, Request] = Callable[
    [Identity, Request], AuthenticationService
]

_ERRORS: dict[str, type[ClassNotValidError]] = {
    RESOURCE_HANDLER: ResourceClassInvalidError,
    AUTHENTICATION_SERVICE: AuthClassInvalidError,
}

_PROTOCOLS: dict[str, type] = {
    RESOURCE_HANDLER: Resource,
    AUTHENTICATION_SERVICE: AuthenticationService,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder[Identity, Request]:
    """Builder for constructing a Registry.

    Register resource and authentication factories under string keys, then
    call build() to produce an immutable Registry.

    Every factory is checked on registration: it must be callable as
    ``factory(identity, request)``, and a class must implement the protocol
    of its role.
    """

    def __init__(self) -> None:
        self._resource_factories: dict[str, ResourceFactory[Identity, Request]] = {}
        self._auth_factories: dict[str, AuthFactory[Identity, Request]] = {}

    def resource(
        self, key: str, factory: ResourceFactory[Identity, Request]
    ) -> RegistryBuilder[Identity, Request]:
        """Register a resource handler factory under a key.

        Raises:
            RegistrationError: key is empty or already registered
            ResourceClassInvalidError: factory is not a resource handler
        """
        _check_key(key, self._resource_factories)
        _check_factory(key, factory, RESOURCE_HANDLER)
        self._resource_factories[key] = factory
        return self

    def authentication(
        self, key: str, factory: AuthFactory[Identity, Request]
    ) -> RegistryBuilder[Identity, Request]:
        """Register an authentication service factory under a key.

        Raises:
            RegistrationError: key is empty or already registered
            AuthClassInvalidError: factory is not an authentication service
        """
        _check_key(key, self._auth_factories)
        _check_factory(key, factory, AUTHENTICATION_SERVICE)
        self._auth_factories[key] = factory
        return self

    def build(self) -> Registry[Identity, Request]:
        """Freeze the registry. No further registration is possible."""
        logger.debug(
            "registry built: %d resource, %d authentication factories",
            len(self._resource_factories),
            len(self._auth_factories),
        )
        return Registry(
            _resource_factories=MappingProxyType(dict(self._resource_factories)),
            _auth_factories=MappingProxyType(dict(self._auth_factories)),
        )


def _check_key(key: str, registered: dict[str, Any]) -> None:
    if not isinstance(key, str) or not key.strip():
        raise RegistrationError(str(key), "key must be a non-empty string")
    if key in registered:
        raise RegistrationError(key, "key is already registered")


def _check_factory(key: str, factory: Any, capability: str) -> None:
    """Assert that factory can play the role named by capability."""
    error = _ERRORS[capability]
    if not callable(factory):
        raise error(key, capability, reason="factory is not callable")

    protocol = _PROTOCOLS[capability]
    if isinstance(factory, type) and not issubclass(factory, protocol):
        raise error(
            key,
            capability,
            reason=f"{factory.__qualname__} does not implement {protocol.__name__}",
        )

    target, args = factory, (None, None)
    if isinstance(factory, type):
        init = _effective_init(factory)
        if init is not None:
            # Unbound __init__ also takes the instance.
            target, args = init, (None, None, None)
        elif factory.__new__ is object.__new__:
            raise error(
                key,
                capability,
                reason=(
                    f"{factory.__qualname__} defines no __init__ accepting "
                    "(identity, request)"
                ),
            )

    try:
        signature = inspect.signature(target)
    except ValueError:
        # No introspectable signature (some C callables): accept as is.
        return
    try:
        signature.bind(*args)
    except TypeError as e:
        raise error(
            key,
            capability,
            reason=f"factory cannot be called with (identity, request): {e}",
        ) from e


def _effective_init(cls: type) -> Callable[..., Any] | None:
    """Return the __init__ instances of cls run, or None for object's.

    Protocol classes install a placeholder __init__ that rejects every
    argument; it is skipped so the concrete class's own __init__ is found.
    """
    for base in cls.__mro__:
        if base is object or getattr(base, "_is_protocol", False):
            continue
        init = base.__dict__.get("__init__")
        if init is object.__init__:
            # Installed on first instantiation of a protocol subclass.
            return None
        if init is not None:
            return init
    return None


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry[Identity, Request]:
    """Immutable registry of resource and authentication factories.

    Constructed via RegistryBuilder. Use configure() or load_resources()
    to build ResourceConfigurations that resolve against it.
    """

    _resource_factories: MappingProxyType[str, ResourceFactory[Identity, Request]] = (
        field(default_factory=lambda: MappingProxyType({}))
    )
    _auth_factories: MappingProxyType[str, AuthFactory[Identity, Request]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def validate(self, type_name: str, capability: str) -> None:
        """Check that type_name is registered with the given capability.

        Raises:
            ResourceClassInvalidError: capability is RESOURCE_HANDLER
            AuthClassInvalidError: capability is AUTHENTICATION_SERVICE
            ValueError: capability is not a known capability
        """
        factories = self._factories(capability)
        if type_name not in factories:
            raise _ERRORS[capability](type_name, capability, factories.keys())

    def configure(
        self,
        path: str,
        module: str,
        resource_class: str,
        auth_class: str,
        url_prefix: str | None = None,
    ) -> ResourceConfiguration[Identity, Request]:
        """Build a ResourceConfiguration bound to this registry.

        Raises:
            ResourceClassInvalidError: resource_class is not registered
            AuthClassInvalidError: auth_class is not registered
        """
        return ResourceConfiguration(
            path, module, resource_class, auth_class, self, url_prefix
        )

    def load_resources(
        self, declarations: Iterable[ResourceDeclaration]
    ) -> tuple[ResourceConfiguration[Identity, Request], ...]:
        """Build configurations for parsed declarations, in order.

        Stops at the first invalid declaration; its error propagates as is.
        """
        return tuple(
            self.configure(
                d.path, d.module, d.resource_class, d.auth_class, d.url_prefix
            )
            for d in declarations
        )

    @property
    def resource_count(self) -> int:
        """Number of registered resource factories."""
        return len(self._resource_factories)

    @property
    def authentication_count(self) -> int:
        """Number of registered authentication factories."""
        return len(self._auth_factories)

    def contains_resource(self, key: str) -> bool:
        return key in self._resource_factories

    def contains_authentication(self, key: str) -> bool:
        return key in self._auth_factories

    def resource_keys(self) -> list[str]:
        """Return all registered resource keys (sorted)."""
        return sorted(self._resource_factories.keys())

    def authentication_keys(self) -> list[str]:
        """Return all registered authentication keys (sorted)."""
        return sorted(self._auth_factories.keys())

    def resource_factory(self, key: str) -> ResourceFactory[Identity, Request]:
        """Look up a resource factory.

        Raises:
            ResourceClassInvalidError: key is not registered
        """
        self.validate(key, RESOURCE_HANDLER)
        return self._resource_factories[key]

    def authentication_factory(self, key: str) -> AuthFactory[Identity, Request]:
        """Look up an authentication factory.

        Raises:
            AuthClassInvalidError: key is not registered
        """
        self.validate(key, AUTHENTICATION_SERVICE)
        return self._auth_factories[key]

    # ── Private ────────────────────────────────────────────────────────────

    def _factories(self, capability: str) -> MappingProxyType[str, Any]:
        if capability == RESOURCE_HANDLER:
            return self._resource_factories
        if capability == AUTHENTICATION_SERVICE:
            return self._auth_factories
        msg = f"unknown capability: {capability!r}"
        raise ValueError(msg)
