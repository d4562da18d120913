"""Redirect handling across parent/child boundaries.

Two mechanisms live here:

- ``resolve_redirects()`` — the walk run on every navigation event. Each
  node with ``redirect_to`` whose own path equals the current location
  rewrites the location to ``<own path>/<redirect_to>``. Targets stay
  relative to their owning node, so moving a subtree keeps its internal
  redirects intact.
- ``RedirectHook`` — the ``on_enter`` hook installed by
  ``RouteTree.add_redirect_route()`` for sibling-to-sibling redirects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from routetree._internal.types import ReplaceState
from routetree.routing.paths import join_paths, paths_equal

if TYPE_CHECKING:
    from routetree.history import History, Location
    from routetree.routing.tree import RouteTree

logger = logging.getLogger("routetree.redirects")


@dataclass(frozen=True, slots=True)
class Navigation:
    """The navigation event handed to the redirect walk.

    Carries the location path at the moment the event fired and the
    history collaborator to issue replacements on.
    """

    pathname: str
    history: History


@dataclass(frozen=True, slots=True)
class RedirectHook:
    """``on_enter`` hook that always replaces the location with ``to_path``.

    Called by the external router as ``hook(next_state, replace_state)``.
    """

    to_path: str

    def __call__(self, next_state: Any, replace_state: ReplaceState) -> None:
        logger.debug("Redirect route entered, replacing location with %r", self.to_path)
        replace_state(None, self.to_path)


def resolve_redirects(tree: RouteTree, navigation: Navigation) -> int:
    """Walk ``tree`` and fire every redirect matching ``navigation.pathname``.

    The walk never stops early: every descendant is visited whether or
    not a redirect fired above it, so independent rules at different
    depths are all evaluated. A replacement may re-enter the navigation
    listener synchronously; the outer walk then carries on with the
    pathname it started with.

    Returns:
        Number of replacements issued by this walk (nested walks excluded).
    """
    fired = 0
    node = tree.node
    if node.redirect_to and paths_equal(node.path, navigation.pathname):
        target = join_paths(node.path, node.redirect_to)
        logger.info("Redirecting %r -> %r", navigation.pathname, target)
        navigation.history.replace_state(None, target)
        fired += 1

    for child in tree:
        fired += resolve_redirects(child, navigation)
    return fired


def create_listener(tree: RouteTree, history: History) -> Callable[..., int]:
    """Build the navigation listener to register on ``history``.

    The listener accepts the new location (as passed by
    ``History.listen`` callbacks) or nothing, in which case the current
    location is read from the history.
    """

    def listener(location: Location | None = None) -> int:
        current = location if location is not None else history.location
        return resolve_redirects(tree, Navigation(pathname=current.pathname, history=history))

    return listener
