"""RouteTree — a recursive, dynamically extensible route tree.

Each tree wraps one ``RouteNode`` and exclusively owns its child trees.
Applications build a tree from a declarative mapping, keep registering
routes afterwards (in any order), then export a plain nested mapping for
the rendering layer or resolve paths against the tree directly.

Usage::

    routes = RouteTree({"path": "/", "component": App})
    routes.add_no_match_route(NoMatch)
    routes.add_child_routes([
        {"path": "/home", "component": Home},
        {"path": "/about", "component": About},
    ])
    routes.add_redirect_route("/index", "/home")

    routes.export()            # plain nested dicts, catch-all last
    routes.resolve("/about")   # About
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from routetree._internal.types import Component, RouteConfig
from routetree.config import TreeConfig
from routetree.errors import ConfigurationError
from routetree.routing.node import RouteNode
from routetree.routing.paths import paths_equal, split_segments
from routetree.routing.redirects import Navigation, RedirectHook, resolve_redirects

if TYPE_CHECKING:
    from routetree.history import History
    from routetree.mounting import Mount

logger = logging.getLogger("routetree.tree")

# Either an already-built tree or a plain configuration mapping
type RouteLike = RouteTree | RouteConfig


def _child_configs(config: RouteConfig) -> list[Any]:
    children = config.get("child_routes")
    if children is None:
        return []
    if isinstance(children, (str, bytes, Mapping)) or not isinstance(children, Iterable):
        msg = f"child_routes must be a sequence of routes, got {type(children).__name__}"
        raise ConfigurationError(msg)
    return list(children)


class RouteTree:
    """A route node plus its ordered child trees.

    Invariants kept by every mutation:

    - at most one catch-all child, always the last one;
    - every child is a ``RouteTree``, never a bare mapping;
    - child operations never touch this node's own ``path`` or ``name``.

    Subclasses customise node semantics by overriding ``wrap()``; all
    other algorithms are reused as-is.
    """

    __slots__ = ("_node", "settings")

    def __init__(
        self,
        config: RouteLike | None = None,
        *,
        settings: TreeConfig | None = None,
    ) -> None:
        """Build a tree from a configuration mapping or another tree.

        ``None`` is treated as an empty configuration (a bare root).
        Passing a ``RouteTree`` copies it: node fields are duplicated and
        children re-wrapped, so the new tree shares nothing with the old.

        Raises:
            ConfigurationError: If ``config`` is neither a mapping nor a tree,
                or carries malformed fields.
        """
        if settings is None and isinstance(config, RouteTree):
            settings = config.settings
        self.settings = settings or TreeConfig()

        children: list[Any]
        match config:
            case None:
                self._node = RouteNode(path=self.settings.root_path)
                children = []
            case RouteTree():
                self._node = config.node.detached()
                children = [type(self)(child, settings=self.settings) for child in config]
            case Mapping():
                self._node = RouteNode.from_mapping(config, default_path=self.settings.root_path)
                children = _child_configs(config)
            case _:
                msg = f"Route configuration must be a mapping, got {type(config).__name__}: {config!r}"
                raise ConfigurationError(msg)

        # Re-insert through the mutation API so pre-built input obeys ordering
        self.add_child_routes(children)

    # -- Introspection --------------------------------------------------------

    @property
    def node(self) -> RouteNode:
        return self._node

    @property
    def path(self) -> str:
        return self._node.path

    @property
    def name(self) -> str | None:
        return self._node.name

    @property
    def component(self) -> Component:
        return self._node.component

    @property
    def children(self) -> tuple[RouteTree, ...]:
        return tuple(self._node.child_routes)

    def __iter__(self) -> Iterator[RouteTree]:
        return iter(self._node.child_routes)

    def __len__(self) -> int:
        return len(self._node.child_routes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, children={len(self)})"

    def walk(self, prefix: str = "") -> Iterator[tuple[str, RouteTree]]:
        """Yield ``(full_path, tree)`` for this tree and every descendant.

        Depth-first, in child order. Full paths are built from the
        segments of every ancestor::

            for full_path, tree in routes.walk():
                print(full_path, tree.component)
        """
        segments = split_segments(prefix) + split_segments(self.path)
        full_path = "/" + "/".join(segments)
        yield full_path, self
        for child in self._node.child_routes:
            yield from child.walk(full_path)

    # -- Classification -------------------------------------------------------

    def is_valid_route(self, candidate: object) -> bool:
        """True for a tree, or a mapping carrying a ``path`` or ``name`` key."""
        if isinstance(candidate, RouteTree):
            return True
        return isinstance(candidate, Mapping) and ("path" in candidate or "name" in candidate)

    def is_catch_all_route(self, candidate: object) -> bool:
        """True when the candidate's ``path`` or ``name`` is the catch-all marker."""
        marker = self.settings.catch_all
        match candidate:
            case RouteTree():
                return candidate.path == marker or candidate.name == marker
            case Mapping():
                return candidate.get("path") == marker or candidate.get("name") == marker
            case _:
                return False

    def wrap(self, candidate: RouteLike) -> RouteTree:
        """Return ``candidate`` if it is a tree, else a new tree of this type."""
        match candidate:
            case RouteTree():
                return candidate
            case _:
                return type(self)(candidate, settings=self.settings)

    # -- Mutation -------------------------------------------------------------

    def add_child_route(self, candidate: Any) -> RouteTree:
        """Insert a child, keeping any catch-all child last.

        Invalid candidates are dropped without raising so that late or
        out-of-order module registration never breaks the whole tree.
        Returns ``self`` for chaining.
        """
        if not self.is_valid_route(candidate):
            logger.debug("Dropping invalid route %r under %r", candidate, self.path)
            return self

        child = self.wrap(candidate)
        children = self._node.child_routes
        if children and self.is_catch_all_route(children[-1]):
            children.insert(len(children) - 1, child)
            logger.debug("Inserted %r before catch-all under %r", child.path, self.path)
        else:
            children.append(child)
            logger.debug("Appended %r under %r", child.path, self.path)
        return self

    def add_child_routes(self, candidates: Iterable[Any]) -> RouteTree:
        for candidate in candidates:
            self.add_child_route(candidate)
        return self

    def add_index_route(self, component: Component) -> RouteTree:
        self._node.index_route.component = component
        return self

    def add_no_match_route(self, component: Component) -> RouteTree:
        """Register the catch-all child, typically a 404 view."""
        return self.add_child_route({"path": self.settings.catch_all, "component": component})

    def add_redirect_route(self, from_path: str, to_path: str) -> RouteTree:
        """Register a sibling-level redirect from ``from_path`` to ``to_path``.

        The router calls the installed ``on_enter`` hook, which replaces
        the location with ``to_path`` unconditionally. Use ``redirect_to``
        in the configuration instead when a node redirects to one of its
        own children.
        """
        return self.add_child_route({"path": from_path, "on_enter": RedirectHook(to_path)})

    # -- Export / resolution --------------------------------------------------

    def export(self) -> dict[str, Any]:
        """Return the plain nested configuration for the rendering layer.

        Every call builds fresh dicts; mutating the result never reaches
        the tree.
        """
        record = self._node.to_dict()
        if self._node.child_routes:
            record["child_routes"] = [child.export() for child in self._node.child_routes]
        return record

    def resolve_redirects(self, navigation: Navigation) -> int:
        """Run the redirect walk over this tree. Returns the redirects fired."""
        return resolve_redirects(self, navigation)

    def resolve(self, path: str) -> Component:
        """Return the component registered for ``path``, or ``None``.

        With the default ``resolve_mode="segments"``, each level consumes
        as many segments as its own path has, so ``"/customer/list"``
        matches either a single child with that path or a ``/customer``
        child holding a ``list`` child. ``resolve_mode="legacy"`` strips
        exactly one segment per level.
        """
        if self.settings.resolve_mode == "legacy":
            return self._resolve_legacy(path)
        return self._resolve_segments(split_segments(path))

    def _resolve_legacy(self, path: str) -> Component:
        parts = path.split("/")
        if len(parts) == 1 and paths_equal(parts[0], self.path):
            return self.component

        rest = "/".join(parts[1:])
        for child in self._node.child_routes:
            component = child._resolve_legacy(rest)
            if component is not None:
                return component
        return None

    def _resolve_segments(self, segments: list[str]) -> Component:
        if self.is_catch_all_route(self):
            return self.component if segments else None

        own = split_segments(self.path)
        if segments[: len(own)] != own:
            return None

        rest = segments[len(own) :]
        if not rest:
            found = self.component
            if found is None:
                found = self._node.index_route.component
            if found is not None:
                return found

        for child in self._node.child_routes:
            component = child._resolve_segments(rest)
            if component is not None:
                return component
        return None

    def mount(
        self,
        history: History,
        render: Callable[[dict[str, Any], Callable[..., Any]], Any],
    ) -> Mount:
        """Shortcut for ``routetree.mounting.mount(self, history, render)``."""
        from routetree.mounting import mount

        return mount(self, history, render)
