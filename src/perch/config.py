"""Route file conventions.

Conventions are frozen dataclasses, so a preset can be shared freely and
varied with ``dataclasses.replace``.
"""

from dataclasses import dataclass

from perch.errors import ConfigurationError

ROUTE_MODULE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".md", ".mdx")
ROOT_ROUTE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")


@dataclass(frozen=True, slots=True)
class ConventionConfig:
    """How route files are found and turned into route identifiers.

    Override what you need::

        config = ConventionConfig(name="pages", patterns=("pages/**/*",))
    """

    name: str = "flat"

    # Discovery
    patterns: tuple[str, ...] = ("routes/**/*",)  # Globs relative to the app directory
    extensions: tuple[str, ...] = ROUTE_MODULE_EXTENSIONS
    root_extensions: tuple[str, ...] = ROOT_ROUTE_EXTENSIONS
    # Below a pattern's base folder, keep only files in "+" group folders
    # and index files of plain folders; other colocated modules are not routes
    route_folders_only: bool = False

    # Identifier extraction
    prefix: str = ""  # Stripped from each basename
    suffix: str = ""  # Stripped before the extension (e.g. ".route")
    index_names: tuple[str, ...] = ()  # Basenames that stand for their folder


FLAT_ROUTES = ConventionConfig(
    name="flat",
    patterns=("routes/**/*",),
    index_names=("index", "route", "_index", "_route"),
    route_folders_only=True,
)

ROUTE_EXTENSIONS = ConventionConfig(
    name="extensions",
    patterns=("**/*",),
    suffix=".route",
)

CONVENTIONS: dict[str, ConventionConfig] = {
    FLAT_ROUTES.name: FLAT_ROUTES,
    ROUTE_EXTENSIONS.name: ROUTE_EXTENSIONS,
}


def get_convention(name: str) -> ConventionConfig:
    """Look up a built-in convention by name."""
    try:
        return CONVENTIONS[name]
    except KeyError:
        known = ", ".join(sorted(CONVENTIONS))
        msg = f"Unknown route convention {name!r}. Expected one of: {known}"
        raise ConfigurationError(msg) from None
