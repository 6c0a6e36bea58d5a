"""Path resolution and wildcard matching.

A resource path is a ``/``-separated pattern where a segment equal to ``%``
binds exactly one non-empty, slash-free segment of the request path:

    items/%/thing   matches  items/42/thing
                    rejects  items/42/43/thing, items//thing

The pattern is masked into an anchored regex and compiled with ``google-re2``,
so matching is linear in the length of the request path. Literal segments
are escaped: ``v1.0`` matches only ``v1.0``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import re2

WILDCARD = "%"
SEPARATOR = "/"

# One or more characters that are not the separator.
_SEGMENT_PATTERN = "[^/]+"


def resolve_true_path(path: str, prefix: str | None = None) -> str:
    """Apply a URL prefix to a raw resource path.

    Without a prefix the path is returned unchanged. Otherwise surrounding
    whitespace is trimmed from both, the leading ``/`` is dropped from the
    path, leading and trailing ``/`` are dropped from the prefix, and the
    two are joined with a single ``/``.

    Not idempotent: resolving an already resolved path prefixes it twice.

    >>> resolve_true_path("items/%/thing", "/api/")
    'api/items/%/thing'
    """
    if not prefix:
        return path

    path = path.strip().lstrip(SEPARATOR)
    prefix = prefix.strip().strip(SEPARATOR)
    return f"{prefix}{SEPARATOR}{path}"


def mask_path(path: str) -> str:
    """Translate a resource path into an anchored RE2 pattern."""
    parts = (
        _SEGMENT_PATTERN if segment == WILDCARD else re2.escape(segment)
        for segment in path.split(SEPARATOR)
    )
    return "^" + SEPARATOR.join(parts) + "$"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled resource path.

    Argument indexes and the masked regex are computed once at
    construction; all queries are pure.
    """

    path: str
    _masked: str = field(init=False, repr=False)
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)
    _arg_indexes: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        masked = mask_path(self.path)
        object.__setattr__(self, "_masked", masked)
        object.__setattr__(self, "_compiled", re2.compile(masked))
        object.__setattr__(
            self,
            "_arg_indexes",
            tuple(
                index
                for index, segment in enumerate(self.path.split(SEPARATOR))
                if segment == WILDCARD
            ),
        )

    @property
    def masked(self) -> str:
        """The anchored regex this pattern compiles to."""
        return self._masked

    @property
    def arg_indexes(self) -> tuple[int, ...]:
        """Zero-based segment indexes of the ``%`` wildcards."""
        return self._arg_indexes

    def matches(self, candidate: str, /) -> bool:
        """True if candidate equals the raw path or fits the masked pattern."""
        if not isinstance(candidate, str):
            return False
        return candidate == self.path or self._compiled.search(candidate) is not None

    def arguments_for(self, candidate: str, /) -> tuple[str, ...]:
        """Return the segments bound to each wildcard, left to right.

        A candidate that does not match yields an empty tuple.
        """
        if not self.matches(candidate):
            return ()
        segments = candidate.split(SEPARATOR)
        return tuple(segments[index] for index in self._arg_indexes)
