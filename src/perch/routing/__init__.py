"""Routing — route identifiers, path templates and the route manifest.

Pure, in-memory functions: no filesystem access, no shared state
between calls.

Usage::

    from perch.routing import build_route_manifest, extract_route_ids

    route_ids = extract_route_ids(files, index_names=("index", "route"))
    manifest = build_route_manifest(route_ids)
"""

from perch.routing.ids import extract_route_ids
from perch.routing.manifest import build_route_manifest
from perch.routing.messages import Reporter, route_id_collision_message, route_path_collision_message
from perch.routing.route import ROOT_ID, Route, RouteManifest
from perch.routing.segments import get_route_path, is_index_route
from perch.routing.trie import PrefixTrie

__all__ = [
    "ROOT_ID",
    "PrefixTrie",
    "Reporter",
    "Route",
    "RouteManifest",
    "build_route_manifest",
    "extract_route_ids",
    "get_route_path",
    "is_index_route",
    "route_id_collision_message",
    "route_path_collision_message",
]
