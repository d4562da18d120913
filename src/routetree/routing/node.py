"""RouteNode and IndexRoute — the configuration payload of one tree position.

Nodes are built fresh per tree from a plain configuration mapping; no
default record is ever shared between instances. Keys the node does not
know are kept in ``extra`` and written back out by ``to_dict()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from routetree._internal.types import Component, EnterHook, RouteConfig
from routetree.errors import ConfigurationError

if TYPE_CHECKING:
    from routetree.routing.tree import RouteTree

# Keys with a dedicated field on RouteNode; everything else lands in ``extra``
NODE_KEYS = frozenset(
    {"path", "component", "index_route", "child_routes", "redirect_to", "on_enter", "name"}
)


def _optional_str(config: Mapping[str, Any], key: str) -> str | None:
    value = config.get(key)
    if value is not None and not isinstance(value, str):
        msg = f"Route {key!r} must be a string, got {type(value).__name__}: {value!r}"
        raise ConfigurationError(msg)
    return value


@dataclass(slots=True)
class IndexRoute:
    """The default child shown when no deeper path is given.

    Only ``component`` is ever set by the tree; other keys supplied by
    the application are carried in ``extra``.
    """

    component: Component = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: IndexRoute | Mapping[str, Any] | None) -> IndexRoute:
        match config:
            case None:
                return cls()
            case IndexRoute():
                return cls(component=config.component, extra=dict(config.extra))
            case Mapping():
                extra = {k: v for k, v in config.items() if k != "component"}
                return cls(component=config.get("component"), extra=extra)
            case _:
                msg = f"index_route must be a mapping, got {type(config).__name__}: {config!r}"
                raise ConfigurationError(msg)

    @property
    def is_empty(self) -> bool:
        return self.component is None and not self.extra

    def to_dict(self) -> dict[str, Any]:
        record = dict(self.extra)
        if self.component is not None:
            record["component"] = self.component
        return record


@dataclass(slots=True)
class RouteNode:
    """One route record: path, handler, children and redirect rule.

    ``child_routes`` holds wrapped ``RouteTree`` instances only; the
    owning tree is responsible for keeping a catch-all child last.
    """

    path: str = "/"
    component: Component = None
    index_route: IndexRoute = field(default_factory=IndexRoute)
    child_routes: list[RouteTree] = field(default_factory=list)
    redirect_to: str | None = None
    on_enter: EnterHook | None = None
    name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, config: RouteConfig, default_path: str = "/") -> RouteNode:
        """Build a childless node from a configuration mapping.

        ``child_routes`` is ignored here: the tree re-inserts children one
        by one so ordering rules apply to them.

        Raises:
            ConfigurationError: If a known key carries a value of the wrong type.
        """
        path = _optional_str(config, "path")
        on_enter = config.get("on_enter")
        if on_enter is not None and not callable(on_enter):
            msg = f"Route 'on_enter' must be callable, got {type(on_enter).__name__}"
            raise ConfigurationError(msg)

        return cls(
            path=default_path if path is None else path,
            component=config.get("component"),
            index_route=IndexRoute.from_config(config.get("index_route")),
            redirect_to=_optional_str(config, "redirect_to"),
            on_enter=on_enter,
            name=_optional_str(config, "name"),
            extra={k: v for k, v in config.items() if k not in NODE_KEYS},
        )

    def detached(self) -> RouteNode:
        """Copy every field except the children."""
        return RouteNode(
            path=self.path,
            component=self.component,
            index_route=IndexRoute(
                component=self.index_route.component, extra=dict(self.index_route.extra)
            ),
            redirect_to=self.redirect_to,
            on_enter=self.on_enter,
            name=self.name,
            extra=dict(self.extra),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain record of this node without children.

        ``path`` is always present; every other field only when set, so a
        childless input mapping comes back out unchanged.
        """
        record: dict[str, Any] = {"path": self.path}
        if self.name is not None:
            record["name"] = self.name
        if self.component is not None:
            record["component"] = self.component
        if not self.index_route.is_empty:
            record["index_route"] = self.index_route.to_dict()
        if self.redirect_to is not None:
            record["redirect_to"] = self.redirect_to
        if self.on_enter is not None:
            record["on_enter"] = self.on_enter
        record.update(self.extra)
        return record
