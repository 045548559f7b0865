"""Filesystem discovery of route files.

Walks an app directory with the globs of a :class:`ConventionConfig`
and returns route file paths relative to it, ready for
:func:`~perch.routing.ids.extract_route_ids`.
"""

import logging
from pathlib import Path

from perch.config import ROOT_ROUTE_EXTENSIONS, ConventionConfig
from perch.errors import RootRouteNotFoundError, RouteDiscoveryError

logger = logging.getLogger("perch.discovery")

_GLOB_CHARS = frozenset("*?[")


def _pattern_base(pattern: str) -> str:
    """Leading folders of a glob pattern, up to the first wildcard part."""
    base: list[str] = []
    for part in pattern.split("/"):
        if any(char in _GLOB_CHARS for char in part):
            break
        base.append(part)
    return "/".join(base)


def _in_route_folder(relative: Path, index_names: tuple[str, ...]) -> bool:
    """Whether a file below the routes folder is a route module.

    Files directly in the routes folder and inside ``+`` group folders
    are routes.  In a plain folder only an index file (``route.tsx``,
    ``index.tsx``) is, and it stands for the folder itself.
    """
    *folders, _name = relative.parts
    plain = [folder for folder in folders if not folder.endswith("+")]
    if not plain:
        return True
    return len(plain) == 1 and folders[-1] == plain[0] and relative.stem in index_names


def scan_route_files(app_dir: str | Path, config: ConventionConfig) -> list[str]:
    """Find route files in *app_dir*.

    Hidden files and directories are skipped.  When the convention has
    a suffix, only files whose stem ends with it are kept.  With
    ``route_folders_only``, modules colocated in a plain folder next to
    its ``route.tsx`` are skipped.

    Args:
        app_dir: Path to the app directory.
        config: Convention supplying globs, extensions and suffix.

    Returns:
        Sorted POSIX paths relative to *app_dir*.

    Raises:
        RouteDiscoveryError: If *app_dir* is not a directory.
    """
    root = Path(app_dir)
    if not root.is_dir():
        msg = f"App directory not found: {root}"
        raise RouteDiscoveryError(msg)

    found: set[str] = set()
    for pattern in config.patterns:
        for item in root.glob(pattern):
            if not item.is_file() or item.suffix not in config.extensions:
                continue
            relative = item.relative_to(root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if config.suffix and not item.stem.endswith(config.suffix):
                continue
            if config.route_folders_only and not _in_route_folder(
                item.relative_to(root / _pattern_base(pattern)), config.index_names
            ):
                continue
            found.add(relative.as_posix())

    files = sorted(found)
    logger.debug("Discovered %d route files in %s (%s)", len(files), root, config.name)
    return files


def ensure_root_route_exists(
    app_dir: str | Path,
    extensions: tuple[str, ...] = ROOT_ROUTE_EXTENSIONS,
) -> Path:
    """Return the app's ``root`` route module.

    Extensions are tried in order; the first existing ``root<ext>``
    wins.

    Raises:
        RootRouteNotFoundError: If no root module exists.
    """
    root = Path(app_dir)
    for ext in extensions:
        candidate = root / f"root{ext}"
        if candidate.is_file():
            return candidate

    msg = f"Could not find a root route module in the app directory: {root}"
    raise RootRouteNotFoundError(msg)
