"""Route manifest construction.

Takes ``(route_id, file)`` pairs ordered longest identifier first and
links every route to its nearest existing ancestor.  Because longer
identifiers are processed first, all descendants of an identifier are
already in the trie when that identifier is reached; taking them out of
the trie as they are claimed leaves each route with its *nearest*
ancestor only.

Paths are then made relative to the parent's path, and routes that
resolve to the same URL are reduced to the first one.
"""

from collections.abc import Iterable
from functools import partial

from perch.routing.messages import Reporter, resolve_reporter, route_path_collision_message
from perch.routing.route import ROOT_ID, Route, RouteManifest
from perch.routing.segments import get_route_path, is_index_route
from perch.routing.separators import is_boundary_descendant
from perch.routing.trie import PrefixTrie


def _link_parents(sorted_ids: list[tuple[str, str]]) -> RouteManifest:
    manifest: RouteManifest = {}
    trie = PrefixTrie()

    for route_id, file in sorted_ids:
        manifest[route_id] = Route(
            file=file,
            id=route_id,
            index=is_index_route(route_id),
            path=get_route_path(route_id),
        )

        # Claim before inserting so the route never claims itself
        for child_id in trie.take_descendants(route_id, partial(is_boundary_descendant, route_id)):
            manifest[child_id].parent_id = route_id
        trie.insert(route_id)

    return manifest


def _relative_path(route: Route, parent: Route | None) -> str | None:
    path = route.path
    if parent is not None and parent.path and path and path.startswith(parent.path):
        path = path[len(parent.path) :].removeprefix("/").removesuffix("/")
    return path or None


def build_route_manifest(
    sorted_ids: Iterable[tuple[str, str]],
    *,
    report: Reporter | None = None,
) -> RouteManifest:
    """Build a route manifest from ``(route_id, file)`` pairs.

    Args:
        sorted_ids: Pairs ordered by identifier length, longest first,
            as returned by :func:`~perch.routing.ids.extract_route_ids`.
        report: Receives one message per URL path collision.  Defaults
            to a warning on the ``perch.routing`` logger.

    Returns:
        Mapping of route id to :class:`Route`, in build order.

    Raises:
        InvalidSegmentError: If an identifier spells a reserved
            character in one of its segments.
        InvalidInputError: If an identifier is empty.
    """
    pairs = list(sorted_ids)
    manifest = _link_parents(pairs)

    first_by_key: dict[str, Route] = {}
    # key -> (absolute path, colliding routes, winner first)
    conflicts: dict[str, tuple[str, list[Route]]] = {}

    # Children are visited before their parents, so parent paths are
    # still absolute when a child is made relative to them.
    for route_id, _file in pairs:
        route = manifest[route_id]
        absolute = route.path or ""
        parent = manifest.get(route.parent_id) if route.parent_id is not None else None

        route.path = _relative_path(route, parent)
        if route.parent_id is None:
            route.parent_id = ROOT_ID

        key = absolute + ("?index" if route.index else "")
        first = first_by_key.setdefault(key, route)
        # Pathless layouts share the empty key without colliding
        if first is not route and (absolute or route.index):
            conflicts.setdefault(key, (absolute, [first]))[1].append(route)

    emit = resolve_reporter(report)
    for pathname, routes in conflicts.values():
        for dropped in routes[1:]:
            del manifest[dropped.id]
        emit(route_path_collision_message(pathname, [r.file for r in routes]))

    return manifest
