"""Perch exception hierarchy.

Shared across the trie, segment parser, manifest builder, discovery and
CLI so every module raises and catches the same types.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when route files or conventions are invalid.

    Aborts the whole manifest build; these are authoring errors, not
    something to recover from per route.
    """


class InvalidInputError(PerchError, ValueError):
    """Raised when an internal structure receives unusable input.

    The trie raises this for empty identifiers, which points at a bug
    upstream of the manifest builder.
    """


@dataclass(frozen=True, slots=True)
class InvalidSegmentError(ConfigurationError):
    """A route segment contains a reserved character.

    ``*``, ``:`` and ``/`` are reserved for splat, parameter and
    separator syntax, so a segment spelling them literally would make
    the generated path template ambiguous.
    """

    segment: str
    route_id: str
    char: str

    def __str__(self) -> str:
        return f'Route segment "{self.segment}" for "{self.route_id}" cannot contain "{self.char}".'


class RouteDiscoveryError(ConfigurationError):
    """Raised when an app directory cannot be scanned for routes."""


class RootRouteNotFoundError(RouteDiscoveryError):
    """Raised when an app directory has no ``root`` route module."""
