"""``perch routes`` — print the route manifest.

Builds the manifest for an app directory and prints a table of ID,
PARENT, PATH and FILE, or the manifest itself as JSON.
"""

import argparse
import json
import sys

from perch.cli._build import load_manifest


def run_routes(args: argparse.Namespace) -> None:
    """Print the manifest for ``args.app_dir``.

    Collision messages go to stderr; the manifest goes to stdout.
    """
    manifest, messages = load_manifest(args)
    for message in messages:
        print(message, file=sys.stderr)

    if args.json:
        print(json.dumps({route_id: route.to_dict() for route_id, route in manifest.items()}, indent=2))
        return

    if not manifest:
        print("No routes found.")
        return

    # Build rows: (id, parent, path, file)
    rows: list[tuple[str, str, str, str]] = []
    for route in manifest.values():
        path = route.path or ""
        if route.index:
            path = f"{path} (index)".lstrip()
        rows.append((route.id, route.parent_id or "", path, route.file))

    # Column widths, at least as wide as the headers
    max_id = max(max(len(r[0]) for r in rows), 2)
    max_parent = max(max(len(r[1]) for r in rows), 6)
    max_path = max(max(len(r[2]) for r in rows), 4)

    fmt = f"{{:<{max_id}}}  {{:<{max_parent}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("ID", "PARENT", "PATH", "FILE"))
    sep_len = max_id + max_parent + max_path + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
