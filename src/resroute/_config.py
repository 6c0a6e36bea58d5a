"""Declaration types for config-driven route tables.

Resources can be declared as plain data (JSON/YAML dicts) and loaded in two
steps:
  dict → parse_resource_declarations() → ResourceDeclaration
       → Registry.load_resources() → ResourceConfiguration

Accepted shape::

    url_prefix: /api          # optional, applies to entries without their own
    resources:
      - path: items/%/thing
        module: items
        class: items.ItemResource
        auth_class: auth.Anonymous
        url_prefix: /v2       # optional
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from resroute._errors import ResourceError


@dataclass(frozen=True, slots=True)
class ResourceDeclaration:
    """One resource as declared by its module, before validation."""

    path: str
    module: str
    resource_class: str
    auth_class: str
    url_prefix: str | None = None


class ConfigParseError(ResourceError):
    """Error parsing a config dict into declarations."""


# Config key → ResourceDeclaration field
_REQUIRED_FIELDS = {
    "path": "path",
    "module": "module",
    "class": "resource_class",
    "auth_class": "auth_class",
}


def parse_resource_declarations(data: dict[str, Any]) -> tuple[ResourceDeclaration, ...]:
    """Parse a dict into resource declarations.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_resources = data.get("resources")
    if raw_resources is None:
        msg = "missing required field 'resources'"
        raise ConfigParseError(msg)
    if not isinstance(raw_resources, list):
        msg = f"'resources' must be a list, got {type(raw_resources).__name__}"
        raise ConfigParseError(msg)

    default_prefix = _optional_string(data, "url_prefix", "config")
    return tuple(
        _parse_declaration(entry, index, default_prefix)
        for index, entry in enumerate(raw_resources)
    )


def _parse_declaration(
    data: Any, index: int, default_prefix: str | None
) -> ResourceDeclaration:
    where = f"resources[{index}]"
    if not isinstance(data, dict):
        msg = f"{where} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    values: dict[str, str] = {}
    for key, attr in _REQUIRED_FIELDS.items():
        if key not in data:
            msg = f"{where} missing required field {key!r}"
            raise ConfigParseError(msg)
        value = data[key]
        if not isinstance(value, str):
            msg = f"{where} {key!r} must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
        values[attr] = value

    url_prefix = default_prefix
    if "url_prefix" in data:
        url_prefix = _optional_string(data, "url_prefix", where)

    return ResourceDeclaration(url_prefix=url_prefix, **values)


def _optional_string(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        msg = f"{where} {key!r} must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value
