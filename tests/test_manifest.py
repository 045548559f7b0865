"""Tests for perch.routing.manifest — hierarchy and path resolution."""

import pytest

from perch.errors import InvalidInputError, InvalidSegmentError
from perch.routing.ids import extract_route_ids
from perch.routing.manifest import build_route_manifest
from perch.routing.messages import route_path_collision_message
from perch.routing.route import ROOT_ID, Route

FLAT_INDEX_NAMES = ("index", "route", "_index", "_route")


def _build(files: list[str], messages: list[str] | None = None) -> dict[str, Route]:
    report = messages.append if messages is not None else None
    route_ids = extract_route_ids(files, index_names=FLAT_INDEX_NAMES, report=report)
    return build_route_manifest(route_ids, report=report)


class TestHierarchy:
    def test_child_of_existing_parent(self) -> None:
        manifest = _build(["routes/app.tsx", "routes/app.projects.tsx"])
        assert manifest["app.projects"].parent_id == "app"
        assert manifest["app.projects"].path == "projects"
        assert manifest["app"].parent_id == ROOT_ID
        assert manifest["app"].path == "app"

    def test_nearest_ancestor_wins(self) -> None:
        manifest = _build(["routes/app.tsx", "routes/app.projects.tsx", "routes/app.projects.$id.tsx"])
        assert manifest["app.projects.$id"].parent_id == "app.projects"
        assert manifest["app.projects.$id"].path == ":id"

    def test_missing_intermediate_ancestor_skipped(self) -> None:
        manifest = _build(["routes/app.tsx", "routes/app.calendar.$day.tsx"])
        assert manifest["app.calendar.$day"].parent_id == "app"
        assert manifest["app.calendar.$day"].path == "calendar/:day"

    def test_string_prefix_is_not_ancestry(self) -> None:
        manifest = _build(["routes/sneakers.tsx", "routes/sneakersRoom.tsx"])
        assert manifest["sneakersRoom"].parent_id == ROOT_ID
        assert manifest["sneakersRoom"].path == "sneakersRoom"

    def test_trailing_underscore_opts_out(self) -> None:
        manifest = _build(["routes/app.tsx", "routes/app_.projects.$id.roadmap.tsx"])
        route = manifest["app_.projects.$id.roadmap"]
        assert route.parent_id == ROOT_ID
        assert route.path == "app/projects/:id/roadmap"

    def test_trailing_underscore_is_not_a_boundary(self) -> None:
        # "app.skip" followed by "_" is not a segment boundary
        manifest = _build(["routes/app.tsx", "routes/app.skip.tsx", "routes/app.skip_.layout.tsx"])
        assert manifest["app.skip_.layout"].parent_id == "app"
        assert manifest["app.skip_.layout"].path == "skip/layout"

    def test_pathless_parent_keeps_child_path(self) -> None:
        manifest = _build(["routes/_auth.tsx", "routes/_auth.login.tsx"])
        assert manifest["_auth"].path is None
        assert manifest["_auth.login"].parent_id == "_auth"
        assert manifest["_auth.login"].path == "login"

    def test_group_folder_child(self) -> None:
        manifest = _build(["routes/blog.tsx", "routes/blog+/new.tsx"])
        assert manifest["blog.new"].parent_id == "blog"
        assert manifest["blog.new"].path == "new"

    def test_index_of_parent_has_no_path(self) -> None:
        manifest = _build(["routes/brand/index.tsx", "routes/brand._index.tsx"])
        route = manifest["brand._index"]
        assert route.parent_id == "brand"
        assert route.index is True
        assert route.path is None

    def test_optional_under_root(self) -> None:
        manifest = _build(["routes/(nested)._layout.($slug).tsx"])
        assert manifest["(nested)._layout.($slug)"].path == "nested?/:slug?"
        assert manifest["(nested)._layout.($slug)"].parent_id == ROOT_ID

    def test_parent_path_not_a_prefix_keeps_absolute_path(self) -> None:
        manifest = _build(["routes/$.tsx", "routes/$.x.tsx"])
        assert manifest["$.x"].parent_id == "$"
        assert manifest["$.x"].path == ":/x"

    def test_build_order_is_longest_first(self) -> None:
        manifest = _build(["routes/a.tsx", "routes/a.b.tsx", "routes/a.b.c.tsx"])
        assert list(manifest) == ["a.b.c", "a.b", "a"]


class TestPathCollisions:
    def test_index_routes_collide_at_root(self) -> None:
        messages: list[str] = []
        files = ["routes/_dashboard._index.tsx", "routes/_landing._index.tsx", "routes/_index.tsx"]
        manifest = _build(files, messages)
        assert list(manifest) == ["_dashboard._index"]
        assert messages == [route_path_collision_message("/", files)]

    def test_same_path_collides(self) -> None:
        messages: list[str] = []
        files = ["routes/(app).about.tsx", "routes/_layout.about.tsx", "routes/about.tsx"]
        manifest = _build(files, messages)
        assert "_layout.about" in manifest
        assert "about" not in manifest
        assert messages == [route_path_collision_message("about", ["routes/_layout.about.tsx", "routes/about.tsx"])]

    def test_pathless_layouts_do_not_collide(self) -> None:
        messages: list[str] = []
        manifest = _build(["routes/_auth.tsx", "routes/_landing.tsx", "routes/_layout.tsx"], messages)
        assert len(manifest) == 3
        assert messages == []

    def test_index_and_layout_with_same_path_do_not_collide(self) -> None:
        messages: list[str] = []
        manifest = _build(["routes/blog.tsx", "routes/blog._index.tsx"], messages)
        assert len(manifest) == 2
        assert messages == []

    def test_same_shape_different_literals(self) -> None:
        messages: list[str] = []
        manifest = _build(["routes/_user.$username.tsx", "routes/sneakers.$sneakerId.tsx"], messages)
        assert len(manifest) == 2
        assert messages == []

    def test_separate_keys_reported_separately(self) -> None:
        messages: list[str] = []
        files = [
            "routes/_a.blog.tsx",
            "routes/blog.tsx",
            "routes/_a.blog._index.tsx",
            "routes/blog._index.tsx",
        ]
        manifest = _build(files, messages)
        assert set(manifest) == {"_a.blog._index", "_a.blog"}
        assert len(messages) == 2

    def test_ids_unique(self) -> None:
        manifest = _build(["routes/a.tsx", "routes/a.jsx", "routes/a.b.tsx"], [])
        assert len(manifest) == len({route.id for route in manifest.values()})


class TestErrors:
    def test_reserved_character_aborts(self) -> None:
        with pytest.raises(InvalidSegmentError):
            build_route_manifest([("files.*", "routes/files.*.tsx")])

    def test_empty_identifier_aborts(self) -> None:
        with pytest.raises(InvalidInputError):
            build_route_manifest([("", "routes/.tsx")])

    def test_empty_input(self) -> None:
        assert build_route_manifest([]) == {}
