"""Tests for routetree.routing.node — RouteNode and IndexRoute."""

import pytest

from routetree.errors import ConfigurationError
from routetree.routing.node import IndexRoute, RouteNode


class App:
    pass


class Index:
    pass


def _on_enter(next_state: object, replace_state: object) -> None:
    return None


class TestIndexRoute:
    def test_empty_by_default(self) -> None:
        assert IndexRoute().is_empty

    def test_from_none(self) -> None:
        assert IndexRoute.from_config(None).is_empty

    def test_from_mapping_keeps_extra_keys(self) -> None:
        index = IndexRoute.from_config({"component": Index, "title": "Start"})
        assert index.component is Index
        assert index.extra == {"title": "Start"}
        assert index.to_dict() == {"component": Index, "title": "Start"}

    def test_from_index_route_copies(self) -> None:
        original = IndexRoute(component=Index, extra={"title": "Start"})
        copy = IndexRoute.from_config(original)
        copy.extra["title"] = "Other"
        assert original.extra == {"title": "Start"}

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="index_route"):
            IndexRoute.from_config(["component"])  # type: ignore[arg-type]


class TestRouteNodeDefaults:
    def test_defaults(self) -> None:
        node = RouteNode()
        assert node.path == "/"
        assert node.component is None
        assert node.index_route.is_empty
        assert node.child_routes == []
        assert node.redirect_to is None
        assert node.on_enter is None
        assert node.name is None

    def test_defaults_not_shared(self) -> None:
        first = RouteNode()
        second = RouteNode()
        first.index_route.component = Index
        first.extra["x"] = 1
        assert second.index_route.component is None
        assert second.extra == {}
        assert first.child_routes is not second.child_routes


class TestFromMapping:
    def test_known_fields(self) -> None:
        node = RouteNode.from_mapping(
            {
                "path": "/customer",
                "component": App,
                "index_route": {"component": Index},
                "redirect_to": "list",
                "on_enter": _on_enter,
                "name": "customer",
            }
        )
        assert node.path == "/customer"
        assert node.component is App
        assert node.index_route.component is Index
        assert node.redirect_to == "list"
        assert node.on_enter is _on_enter
        assert node.name == "customer"

    def test_missing_path_uses_default(self) -> None:
        node = RouteNode.from_mapping({"name": "*"}, default_path="/")
        assert node.path == "/"
        assert node.name == "*"

    def test_unknown_keys_kept(self) -> None:
        node = RouteNode.from_mapping({"path": "/x", "title": "X", "meta": {"auth": True}})
        assert node.extra == {"title": "X", "meta": {"auth": True}}

    def test_child_routes_not_copied(self) -> None:
        node = RouteNode.from_mapping({"path": "/x", "child_routes": [{"path": "/y"}]})
        assert node.child_routes == []
        assert "child_routes" not in node.extra

    def test_rejects_non_string_path(self) -> None:
        with pytest.raises(ConfigurationError, match="'path'"):
            RouteNode.from_mapping({"path": 1})

    def test_rejects_non_string_redirect(self) -> None:
        with pytest.raises(ConfigurationError, match="'redirect_to'"):
            RouteNode.from_mapping({"path": "/", "redirect_to": ["a"]})

    def test_rejects_non_callable_on_enter(self) -> None:
        with pytest.raises(ConfigurationError, match="on_enter"):
            RouteNode.from_mapping({"path": "/", "on_enter": "go"})


class TestToDict:
    def test_leaf_round_trip(self) -> None:
        config = {"path": "/x", "component": App}
        assert RouteNode.from_mapping(config).to_dict() == config

    def test_omits_absent_fields(self) -> None:
        assert RouteNode(path="/x").to_dict() == {"path": "/x"}

    def test_includes_present_fields(self) -> None:
        node = RouteNode(path="/x", name="x", redirect_to="y", on_enter=_on_enter)
        node.index_route.component = Index
        assert node.to_dict() == {
            "path": "/x",
            "name": "x",
            "redirect_to": "y",
            "on_enter": _on_enter,
            "index_route": {"component": Index},
        }

    def test_extra_passed_through(self) -> None:
        node = RouteNode.from_mapping({"path": "/x", "title": "X"})
        assert node.to_dict() == {"path": "/x", "title": "X"}


class TestDetached:
    def test_copies_fields_without_children(self) -> None:
        node = RouteNode.from_mapping({"path": "/x", "component": App, "title": "X"})
        node.child_routes.append(object())  # type: ignore[arg-type]
        copy = node.detached()
        assert copy.path == "/x"
        assert copy.component is App
        assert copy.extra == {"title": "X"}
        assert copy.child_routes == []

    def test_copy_is_independent(self) -> None:
        node = RouteNode.from_mapping({"path": "/x", "index_route": {"component": Index}})
        copy = node.detached()
        copy.index_route.component = App
        copy.extra["title"] = "Y"
        assert node.index_route.component is Index
        assert node.extra == {}
