"""``perch check`` — route collision validation command.

Builds the manifest for an app directory and exits with code 1 if any
route ID or URL path collision was reported.
"""

import argparse
import sys

from perch.cli._build import load_manifest


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.app_dir``, printing collisions to stderr."""
    manifest, messages = load_manifest(args)
    if messages:
        for message in messages:
            print(message, file=sys.stderr)
        print(f"{len(messages)} route collision(s) found.", file=sys.stderr)
        raise SystemExit(1)

    print(f"No route collisions. {len(manifest)} route(s).")
