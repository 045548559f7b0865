"""Route record and manifest alias."""

from dataclasses import dataclass
from typing import Any, TypeAlias

ROOT_ID = "root"


@dataclass(slots=True)
class Route:
    """One entry in a route manifest.

    Mutable while the manifest is being built (parents are assigned in
    a first pass, paths made relative in a second); treat as read-only
    afterwards.

    Attributes:
        file: Source file path, forward-slash normalized.
        id: Unique dot-delimited route identifier.
        index: Whether the route is an index route.
        path: URL path template relative to the parent's path,
            ``None`` for pathless layout routes.
        parent_id: Identifier of the parent route, ``"root"`` when no
            ancestor exists.
    """

    file: str
    id: str
    index: bool = False
    path: str | None = None
    parent_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest entry in its wire shape (``parentId``, no empty ``path``)."""
        data: dict[str, Any] = {
            "file": self.file,
            "id": self.id,
            "index": self.index,
        }
        if self.path is not None:
            data["path"] = self.path
        data["parentId"] = self.parent_id
        return data


RouteManifest: TypeAlias = dict[str, Route]
