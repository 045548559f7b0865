"""Perch — nested route manifests from flat route files.

A directory of files describes a whole nested-routing tree through its
file names: dots nest, ``$`` names parameters, a leading ``_`` makes a
pathless layout, a trailing ``_`` opts out of nesting, ``(...)`` marks
optional segments and ``[...]`` escapes.

Basic usage::

    from perch import flat_routes

    manifest = flat_routes("app")
    for route in manifest.values():
        print(route.id, route.parent_id, route.path)

Working from an existing file list::

    from perch import build_route_manifest, extract_route_ids

    route_ids = extract_route_ids(files, index_names=("index", "route"))
    manifest = build_route_manifest(route_ids)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "FLAT_ROUTES",
    "ROOT_ID",
    "ROUTE_EXTENSIONS",
    "ConfigurationError",
    "ConventionConfig",
    "InvalidInputError",
    "InvalidSegmentError",
    "PerchError",
    "RootRouteNotFoundError",
    "Route",
    "RouteDiscoveryError",
    "build_route_manifest",
    "ensure_root_route_exists",
    "extract_route_ids",
    "flat_routes",
    "get_route_path",
    "route_extensions",
    "scan_route_files",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name in ("ConventionConfig", "FLAT_ROUTES", "ROUTE_EXTENSIONS"):
        from perch import config as _config

        return getattr(_config, name)

    if name in ("build_route_manifest", "extract_route_ids", "get_route_path", "Route", "ROOT_ID"):
        from perch import routing as _routing

        return getattr(_routing, name)

    if name in ("flat_routes", "route_extensions"):
        from perch import conventions as _conventions

        return getattr(_conventions, name)

    if name in ("ensure_root_route_exists", "scan_route_files"):
        from perch import discovery as _discovery

        return getattr(_discovery, name)

    if name in (
        "ConfigurationError",
        "InvalidInputError",
        "InvalidSegmentError",
        "PerchError",
        "RootRouteNotFoundError",
        "RouteDiscoveryError",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
