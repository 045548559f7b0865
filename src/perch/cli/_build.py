"""Manifest loading shared by ``perch routes`` and ``perch check``."""

import argparse
import sys

from perch.config import get_convention
from perch.conventions import manifest_from_directory
from perch.errors import ConfigurationError
from perch.routing.route import RouteManifest


def load_manifest(args: argparse.Namespace) -> tuple[RouteManifest, list[str]]:
    """Build the manifest for ``args.app_dir`` with ``args.convention``.

    Returns the manifest and the collision messages reported while
    building it.  Configuration and discovery errors print
    ``Error: ...`` to stderr and exit with code 1.
    """
    messages: list[str] = []
    try:
        config = get_convention(args.convention)
        manifest = manifest_from_directory(args.app_dir, config, report=messages.append)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return manifest, messages
