"""Ready-made manifest builders for the built-in file conventions.

Flat routes (``routes/`` directory, dots for nesting)::

    app/
      root.tsx
      routes/
        _index.tsx              # /
        app.tsx                 # /app           (layout)
        app.projects.$id.tsx    # /app/projects/:id
        blog+/new.tsx           # /blog/new

Route extensions (any file ending in ``.route``)::

    app/
      root.tsx
      dashboard.route.tsx       # /dashboard
      dashboard.settings.route.tsx
"""

from collections.abc import Iterable
from pathlib import Path

from perch.config import FLAT_ROUTES, ROUTE_EXTENSIONS, ConventionConfig
from perch.discovery import ensure_root_route_exists, scan_route_files
from perch.routing.ids import extract_route_ids
from perch.routing.manifest import build_route_manifest
from perch.routing.messages import Reporter
from perch.routing.route import RouteManifest


def manifest_from_files(
    files: Iterable[str],
    config: ConventionConfig,
    *,
    report: Reporter | None = None,
) -> RouteManifest:
    """Build a manifest from already-discovered route files."""
    route_ids = extract_route_ids(
        files,
        prefix=config.prefix,
        suffix=config.suffix,
        index_names=config.index_names,
        report=report,
    )
    return build_route_manifest(route_ids, report=report)


def manifest_from_directory(
    app_dir: str | Path,
    config: ConventionConfig,
    *,
    report: Reporter | None = None,
) -> RouteManifest:
    """Scan *app_dir*, require a root route, and build its manifest.

    Raises:
        RouteDiscoveryError: If *app_dir* does not exist.
        RootRouteNotFoundError: If *app_dir* has no root route module.
    """
    files = scan_route_files(app_dir, config)
    ensure_root_route_exists(app_dir, config.root_extensions)
    return manifest_from_files(files, config, report=report)


def flat_routes_from_files(files: Iterable[str], *, report: Reporter | None = None) -> RouteManifest:
    return manifest_from_files(files, FLAT_ROUTES, report=report)


def route_extensions_from_files(files: Iterable[str], *, report: Reporter | None = None) -> RouteManifest:
    return manifest_from_files(files, ROUTE_EXTENSIONS, report=report)


def flat_routes(app_dir: str | Path, *, report: Reporter | None = None) -> RouteManifest:
    """Manifest for an app using the flat ``routes/`` convention."""
    return manifest_from_directory(app_dir, FLAT_ROUTES, report=report)


def route_extensions(app_dir: str | Path, *, report: Reporter | None = None) -> RouteManifest:
    """Manifest for an app using ``*.route.<ext>`` files anywhere in the tree."""
    return manifest_from_directory(app_dir, ROUTE_EXTENSIONS, report=report)
