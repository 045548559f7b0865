"""Route identifier to URL path template conversion.

A small state machine reads an identifier one character at a time and
builds two strings per segment: the *display* text that ends up in the
path template and the *raw* source text used only to classify the
segment afterwards.

Conventions::

    app.projects.$id        -> "app/projects/:id"
    files.$                 -> "files/*"
    _auth.login             -> "login"          (pathless "_auth")
    app_.projects           -> "app/projects"   (opts out of nesting)
    ($lang).about           -> ":lang?/about"
    sitemap[.]xml           -> "sitemap.xml"    (escaped literal)
    blog._index             -> "blog"           (index route)
"""

from dataclasses import dataclass, field
from enum import Enum

from perch.errors import InvalidSegmentError
from perch.routing.separators import is_segment_separator

INDEX_SUFFIX = "_index"

PARAM_PREFIX = "$"
ESCAPE_START = "["
ESCAPE_END = "]"
OPTIONAL_START = "("
OPTIONAL_END = ")"

# Characters a segment may not spell literally, even when escaped
_RESERVED_CHARS = ("*", ":", "/")


class SegmentState(Enum):
    """Parser state while reading a route identifier."""

    NORMAL = "normal"
    ESCAPE = "escape"
    OPTIONAL = "optional"
    OPTIONAL_ESCAPE = "optional_escape"


@dataclass(slots=True)
class _SegmentAccumulator:
    """Segment text collected so far for one identifier."""

    route_id: str
    display: str = ""
    raw: str = ""
    segments: list[tuple[str, str]] = field(default_factory=list)

    def append(self, display: str, raw: str) -> None:
        self.display += display
        self.raw += raw

    def flush(self) -> None:
        """Close the current segment, validating it if it is not empty."""
        if self.display:
            for char in _RESERVED_CHARS:
                if char in self.raw:
                    segment = self.display if char == "/" else self.raw
                    raise InvalidSegmentError(segment=segment, route_id=self.route_id, char=char)
            self.segments.append((self.display, self.raw))
        self.display = ""
        self.raw = ""


def _param_marker(is_last: bool) -> str:
    # A trailing bare "$" is a splat, otherwise it names a parameter
    return "*" if is_last else ":"


def _step(state: SegmentState, char: str, acc: _SegmentAccumulator, is_last: bool) -> SegmentState:
    """Apply one character to the accumulator and return the next state."""
    match state:
        case SegmentState.NORMAL:
            if is_segment_separator(char):
                acc.flush()
                return SegmentState.NORMAL
            if char == ESCAPE_START:
                acc.append("", char)
                return SegmentState.ESCAPE
            if char == OPTIONAL_START:
                acc.append("", char)
                return SegmentState.OPTIONAL
            if char == PARAM_PREFIX and not acc.display:
                acc.append(_param_marker(is_last), char)
                return SegmentState.NORMAL
            acc.append(char, char)
            return SegmentState.NORMAL

        case SegmentState.ESCAPE:
            if char == ESCAPE_END:
                acc.append("", char)
                return SegmentState.NORMAL
            acc.append(char, char)
            return SegmentState.ESCAPE

        case SegmentState.OPTIONAL:
            if char == OPTIONAL_END:
                acc.append("?", char)
                return SegmentState.NORMAL
            if char == ESCAPE_START:
                acc.append("", char)
                return SegmentState.OPTIONAL_ESCAPE
            if char == PARAM_PREFIX and not acc.display:
                acc.append(_param_marker(is_last), char)
                return SegmentState.OPTIONAL
            acc.append(char, char)
            return SegmentState.OPTIONAL

        case SegmentState.OPTIONAL_ESCAPE:
            if char == ESCAPE_END:
                acc.append("", char)
                return SegmentState.OPTIONAL
            acc.append(char, char)
            return SegmentState.OPTIONAL_ESCAPE


def split_route_segments(route_id: str) -> list[tuple[str, str]]:
    """Split an identifier into ``(display, raw)`` segment pairs.

    Raises:
        InvalidSegmentError: If a segment contains ``*``, ``:`` or ``/``.
    """
    acc = _SegmentAccumulator(route_id)
    state = SegmentState.NORMAL
    last = len(route_id) - 1
    for position, char in enumerate(route_id):
        state = _step(state, char, acc, position == last)
    acc.flush()
    return acc.segments


def is_index_route(route_id: str) -> bool:
    return route_id.endswith(INDEX_SUFFIX)


def _is_pathless(display: str, raw: str) -> bool:
    # "(_[i]ndex)" is pathless too, so ignore an opening paren in the raw text
    return display.startswith("_") and raw.replace(OPTIONAL_START, "", 1).startswith("_")


def get_route_path(route_id: str) -> str | None:
    """Convert a route identifier into a URL path template.

    Returns ``None`` when no segment contributes to the URL, as for
    pathless layouts and the root index.

    Raises:
        InvalidSegmentError: If a segment contains ``*``, ``:`` or ``/``.
    """
    segments = split_route_segments(route_id)
    if is_index_route(route_id) and segments:
        segments.pop()

    parts: list[str] = []
    for display, raw in segments:
        if _is_pathless(display, raw):
            continue
        if display.endswith("_") and raw.endswith("_"):
            parts.append(display[:-1])
        else:
            parts.append(display)

    return "/".join(parts) if parts else None
