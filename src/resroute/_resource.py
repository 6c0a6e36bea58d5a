"""ResourceConfiguration — routing and instantiation metadata for one resource.

A configuration is built once per registered resource, usually while the
route table is assembled, and then consulted for every request:

- matches_path() / arguments_for_path() decide whether a request path
  belongs to this resource and which values its ``%`` wildcards bind
- invoke_resource() / invoke_authentication_service() build fresh,
  request-scoped instances through the registry's factories

Construction fails fast if either class key is unknown to the registry.
Everything after construction is a pure query over frozen state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from resroute._path import PathPattern, resolve_true_path
from resroute._types import AUTHENTICATION_SERVICE, RESOURCE_HANDLER

if TYPE_CHECKING:
    from resroute._registry import Registry
    from resroute._types import AuthenticationService, Resource

logger = logging.getLogger("resroute")


@dataclass(frozen=True, slots=True)
class ResourceConfiguration[Identity, Request]:
    """A configuration object for a resource.

    ``path`` is the effective path: ``raw_path`` with ``url_prefix`` applied
    exactly once. ``module`` and ``url_prefix`` are carried for
    introspection only.

    Equality and hashing cover the declared values and the effective path,
    not ``registry``: configurations naming the same keys against different
    registries compare equal even if the keys resolve to different factories.

    Raises:
        ResourceClassInvalidError: resource_class is not a registered resource handler
        AuthClassInvalidError: auth_class is not a registered authentication service
    """

    raw_path: str
    module: str
    resource_class: str
    auth_class: str
    registry: Registry[Identity, Request] = field(repr=False, compare=False)
    url_prefix: str | None = None
    path: str = field(init=False)
    _pattern: PathPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.registry.validate(self.resource_class, RESOURCE_HANDLER)
        self.registry.validate(self.auth_class, AUTHENTICATION_SERVICE)

        path = resolve_true_path(self.raw_path, self.url_prefix)
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "_pattern", PathPattern(path))
        logger.debug(
            "configured %s -> %s (module %s, auth %s)",
            path,
            self.resource_class,
            self.module,
            self.auth_class,
        )

    # ── Matching ───────────────────────────────────────────────────────────

    def matches_path(self, path: str) -> bool:
        """Determine if this resource is matched by the provided path.

        Matches either the raw pattern (``items/%/thing``) or a real path
        (``items/123/thing``).
        """
        return self._pattern.matches(path)

    def arguments_for_path(self, path: str) -> tuple[str, ...]:
        """Return the wildcard arguments bound by path, left to right.

        A path that does not match yields no arguments.
        """
        return self._pattern.arguments_for(path)

    @property
    def arg_indexes(self) -> tuple[int, ...]:
        """Segment indexes of the wildcards within path."""
        return self._pattern.arg_indexes

    # ── Factories ──────────────────────────────────────────────────────────

    def invoke_resource(self, identity: Identity, request: Request) -> Resource:
        """Instantiate the resource for one request.

        Exceptions raised by the factory propagate unchanged.
        """
        factory = self.registry.resource_factory(self.resource_class)
        return factory(identity, request)

    def invoke_authentication_service(
        self, identity: Identity, request: Request
    ) -> AuthenticationService:
        """Instantiate the authentication service for one request.

        Exceptions raised by the factory propagate unchanged.
        """
        factory = self.registry.authentication_factory(self.auth_class)
        return factory(identity, request)
