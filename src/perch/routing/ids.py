"""Route identifier extraction from file paths.

Each file path becomes one dot-delimited route identifier::

    routes/app.projects.$id.tsx        -> "app.projects.$id"
    routes/dashboard/route.tsx         -> "dashboard"      (folder index)
    routes/blog+/new.tsx               -> "blog.new"       ("+" folder groups)
    routes/blog+/archive/$post.tsx     -> "blog.$post"

When several files produce the same identifier the first one wins and
the collision is reported.
"""

import posixpath
from collections.abc import Iterable

from perch.routing.messages import Reporter, resolve_reporter, route_id_collision_message
from perch.routing.separators import normalize_slashes

_GROUP_MARKER = "+"


def _route_id_for(file: str, *, prefix: str, suffix: str, index_names: frozenset[str]) -> str:
    extension = posixpath.splitext(file)[1]
    cut = len(extension) + len(suffix)
    path = file[:-cut] if cut else file

    if posixpath.basename(path) in index_names:
        segments = [segment for segment in path.split("/") if not segment.endswith(_GROUP_MARKER)]
        # One segment is the app directory, two is the site index;
        # deeper than that the folder itself names the route.
        if len(segments) > 2:
            segments.pop()
            path = "/".join(segments)

    ancestors = [segment[:-1] for segment in path.split("/") if segment.endswith(_GROUP_MARKER)]
    basename = posixpath.basename(path)
    return ".".join([*ancestors, basename[len(prefix) :]])


def extract_route_ids(
    files: Iterable[str],
    *,
    prefix: str = "",
    suffix: str = "",
    index_names: Iterable[str] = (),
    report: Reporter | None = None,
) -> list[tuple[str, str]]:
    """Map route files to unique route identifiers.

    Args:
        files: Route file paths, relative to the app directory.
        prefix: Prefix stripped from each file's basename.
        suffix: Suffix stripped before the extension (e.g. ``".route"``).
        index_names: Basenames that make their folder the route
            (e.g. ``"route"`` in ``dashboard/route.tsx``).
        report: Receives one message per identifier collision.
            Defaults to a warning on the ``perch.routing`` logger.

    Returns:
        ``(route_id, file)`` pairs ordered longest identifier first.
        Identifiers of equal length keep their input order.
    """
    names = frozenset(index_names)
    route_ids: dict[str, str] = {}
    conflicts: dict[str, list[str]] = {}

    for raw_file in files:
        file = normalize_slashes(raw_file)
        route_id = _route_id_for(file, prefix=prefix, suffix=suffix, index_names=names)

        taken = route_ids.get(route_id)
        if taken is not None:
            conflicts.setdefault(route_id, [taken]).append(file)
            continue
        route_ids[route_id] = file

    emit = resolve_reporter(report)
    for route_id, conflicting in conflicts.items():
        emit(route_id_collision_message(route_id, conflicting))

    # sorted() is stable, so equal lengths keep encounter order
    return sorted(route_ids.items(), key=lambda item: len(item[0]), reverse=True)
