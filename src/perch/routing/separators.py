"""Segment separators shared by the parser, extractor and trie filter."""

import ntpath

SEGMENT_SEPARATORS = frozenset({".", "/", ntpath.sep})


def is_segment_separator(char: str) -> bool:
    """Return True for ``.``, ``/`` and the Windows path separator."""
    return char in SEGMENT_SEPARATORS


def normalize_slashes(file: str) -> str:
    """Convert Windows path separators to forward slashes."""
    return file.replace(ntpath.sep, "/")


def is_boundary_descendant(ancestor: str, candidate: str) -> bool:
    """Whether *candidate* nests under *ancestor* at a segment boundary.

    ``"app"`` is an ancestor of ``"app.projects"`` and ``"app/x"`` but not
    of ``"apple"`` or ``"app_.projects"``.
    """
    return candidate.startswith(ancestor) and candidate[len(ancestor) : len(ancestor) + 1] in {".", "/"}
