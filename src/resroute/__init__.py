"""resroute — Resource configuration, path matching and handler factories.

All public types are exported from this module for flat imports:

    from resroute import RegistryBuilder, ResourceConfiguration, resolve_true_path
"""

__version__ = "0.1.0"

# Declarations — see resroute._config for details
from resroute._config import (
    ConfigParseError,
    ResourceDeclaration,
    parse_resource_declarations,
)

# Errors
from resroute._errors import (
    AuthClassInvalidError,
    ClassNotValidError,
    RegistrationError,
    ResourceClassInvalidError,
    ResourceError,
)

# Path matching
from resroute._path import (
    SEPARATOR,
    WILDCARD,
    PathPattern,
    mask_path,
    resolve_true_path,
)

# Registry — see resroute._registry for details
from resroute._registry import (
    AuthFactory,
    Registry,
    RegistryBuilder,
    ResourceFactory,
)
from resroute._resource import ResourceConfiguration
from resroute._types import (
    AUTHENTICATION_SERVICE,
    RESOURCE_HANDLER,
    AuthenticationService,
    Resource,
)

__all__ = [
    # Protocols
    "Resource",
    "AuthenticationService",
    "RESOURCE_HANDLER",
    "AUTHENTICATION_SERVICE",
    # Path matching
    "PathPattern",
    "mask_path",
    "resolve_true_path",
    "WILDCARD",
    "SEPARATOR",
    # Configuration
    "ResourceConfiguration",
    # Registry
    "RegistryBuilder",
    "Registry",
    "ResourceFactory",
    "AuthFactory",
    # Declarations
    "ResourceDeclaration",
    "ConfigParseError",
    "parse_resource_declarations",
    # Errors
    "ResourceError",
    "ClassNotValidError",
    "ResourceClassInvalidError",
    "AuthClassInvalidError",
    "RegistrationError",
]
