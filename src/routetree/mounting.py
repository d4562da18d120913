"""Mounting — hand a route tree to the rendering layer.

The rendering layer is external. ``mount()`` wires the pieces it needs:
the redirect listener registered on the history, and the plain exported
configuration::

    def render(routes, on_update):
        ...  # build the UI from ``routes``, call ``on_update`` on navigation

    mounted = mount(routes, MemoryHistory("/"), render)
    mounted.unlisten()
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from routetree.history import History
from routetree.routing.redirects import create_listener
from routetree.routing.tree import RouteTree

logger = logging.getLogger("routetree.mounting")

# render(exported_routes, listener) -> whatever the rendering layer returns
type Renderer = Callable[[dict[str, Any], Callable[..., Any]], Any]


@dataclass(frozen=True, slots=True)
class Mount:
    """Result of ``mount()``."""

    routes: dict[str, Any]
    listener: Callable[..., Any]
    unlisten: Callable[[], None]
    rendered: Any = None


def mount(tree: RouteTree, history: History, render: Renderer) -> Mount:
    """Register redirects on ``history``, export ``tree`` and render it.

    The listener runs once against the current location before the
    render call, so a redirect configured for the start page is applied
    before anything is drawn.
    """
    listener = create_listener(tree, history)
    unlisten = history.listen(listener)
    listener(history.location)

    routes = tree.export()
    logger.info(
        "Mounting %d top-level routes at %r",
        len(routes.get("child_routes", ())),
        history.location.pathname,
    )
    rendered = render(routes, listener)
    return Mount(routes=routes, listener=listener, unlisten=unlisten, rendered=rendered)
