"""Collision diagnostics.

The wording is stable: tooling that greps build output for these
headers depends on it.
"""

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

logger = logging.getLogger("perch.routing")

Reporter: TypeAlias = Callable[[str], None]

_WARNING = "\u26a0\ufe0f"
_TAKEN = "\U0001f7e2"
_DROPPED = "\u2b55\ufe0f\ufe0f"


def _collision_message(header: str, explanation: str, files: Sequence[str]) -> str:
    taken, *others = files
    return (
        f"{header}\n\n"
        f"{explanation}\n\n"
        f"{_TAKEN} {taken}\n" + "\n".join(f"{_DROPPED} {file}" for file in others) + "\n"
    )


def route_id_collision_message(route_id: str, files: Sequence[str]) -> str:
    """Message for files that produce the same route id; the first file wins."""
    return _collision_message(
        f'{_WARNING} Route ID Collision: "{route_id}"',
        "The following routes all define the same Route ID, only the first one will be used",
        files,
    )


def route_path_collision_message(pathname: str, files: Sequence[str]) -> str:
    """Message for routes that resolve to the same URL; the first route wins."""
    if not pathname.startswith("/"):
        pathname = "/" + pathname
    return _collision_message(
        f'{_WARNING} Route Path Collision: "{pathname}"',
        "The following routes all define the same URL, only the first one will be used",
        files,
    )


def log_report(message: str) -> None:
    """Default reporter: emit the message on the ``perch.routing`` logger."""
    logger.warning("%s", message)


def resolve_reporter(report: Reporter | None) -> Reporter:
    return report if report is not None else log_report
