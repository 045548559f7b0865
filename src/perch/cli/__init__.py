"""Perch CLI — inspect and validate route manifests.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys

from perch.config import CONVENTIONS


def _add_app_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("app_dir", help="App directory containing root route module")
    parser.add_argument(
        "--convention",
        choices=sorted(CONVENTIONS),
        default="flat",
        help="Route file convention (default: flat)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — nested route manifests from flat route files.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print the route manifest")
    _add_app_arguments(routes_parser)
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the manifest as JSON",
    )

    # -- perch check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Fail on route ID or path collisions")
    _add_app_arguments(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from perch.cli._check import run_check

        run_check(args)
