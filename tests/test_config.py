"""Tests for perch.config — ConventionConfig frozen dataclass and presets."""

import pytest

from perch.config import CONVENTIONS, FLAT_ROUTES, ROUTE_EXTENSIONS, ConventionConfig, get_convention
from perch.errors import ConfigurationError


class TestConventionConfig:
    def test_defaults(self) -> None:
        cfg = ConventionConfig()

        assert cfg.name == "flat"
        assert cfg.patterns == ("routes/**/*",)
        assert cfg.extensions == (".js", ".jsx", ".ts", ".tsx", ".md", ".mdx")
        assert cfg.root_extensions == (".js", ".jsx", ".ts", ".tsx")
        assert cfg.prefix == ""
        assert cfg.suffix == ""
        assert cfg.index_names == ()
        assert cfg.route_folders_only is False

    def test_override(self) -> None:
        cfg = ConventionConfig(name="pages", patterns=("pages/**/*",), prefix="page.")

        assert cfg.name == "pages"
        assert cfg.patterns == ("pages/**/*",)
        assert cfg.prefix == "page."

    def test_frozen(self) -> None:
        cfg = ConventionConfig()

        with pytest.raises(AttributeError):
            cfg.suffix = ".route"  # type: ignore[misc]


class TestPresets:
    def test_flat_routes(self) -> None:
        assert FLAT_ROUTES.index_names == ("index", "route", "_index", "_route")
        assert FLAT_ROUTES.suffix == ""
        assert FLAT_ROUTES.route_folders_only is True

    def test_route_extensions(self) -> None:
        assert ROUTE_EXTENSIONS.suffix == ".route"
        assert ROUTE_EXTENSIONS.index_names == ()
        assert ROUTE_EXTENSIONS.route_folders_only is False

    def test_registry(self) -> None:
        assert CONVENTIONS == {"flat": FLAT_ROUTES, "extensions": ROUTE_EXTENSIONS}


class TestGetConvention:
    def test_known(self) -> None:
        assert get_convention("extensions") is ROUTE_EXTENSIONS

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown route convention 'nested'"):
            get_convention("nested")
