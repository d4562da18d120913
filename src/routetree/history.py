"""History collaborator contract and an in-memory implementation.

The tree never implements navigation itself. It needs something that:

- exposes the current ``location`` (with a ``pathname``);
- can ``replace_state(state, path)``;
- calls registered listeners after every location change.

A browser-backed history satisfies this shape. ``MemoryHistory`` is the
in-process implementation used for tests, server-side rendering and
command-line tooling.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from routetree.config import TreeConfig
from routetree.errors import RedirectLoopError

logger = logging.getLogger("routetree.history")


@dataclass(frozen=True, slots=True)
class Location:
    """A single history entry."""

    pathname: str
    state: Any = None
    key: int = 0


# Called with the new location after every change
type Listener = Callable[[Location], Any]


@runtime_checkable
class History(Protocol):
    """Protocol for navigation history collaborators.

    No base class required. The tree checks the shape, not the lineage.
    """

    @property
    def location(self) -> Location: ...

    def replace_state(self, state: Any, path: str) -> None: ...

    def listen(self, listener: Listener) -> Callable[[], None]: ...


class MemoryHistory:
    """A history stack kept in memory.

    Listeners run synchronously inside ``push_state``/``replace_state``,
    so a listener that replaces the location re-enters itself. Nested
    dispatches are counted; past ``config.max_redirects`` levels a
    ``RedirectLoopError`` is raised instead of recursing forever.

    Usage::

        history = MemoryHistory("/")
        history.listen(lambda location: print(location.pathname))
        history.push_state(None, "/about")
    """

    __slots__ = ("_depth", "_entries", "_listeners", "_next_key", "max_depth")

    def __init__(self, initial: str = "/", *, config: TreeConfig | None = None) -> None:
        self.max_depth = (config or TreeConfig()).max_redirects
        self._entries: list[Location] = [Location(pathname=initial)]
        self._listeners: list[Listener] = []
        self._next_key = 1
        self._depth = 0

    def __repr__(self) -> str:
        return f"MemoryHistory({self.location.pathname!r}, entries={len(self._entries)})"

    @property
    def location(self) -> Location:
        return self._entries[-1]

    @property
    def entries(self) -> tuple[Location, ...]:
        return tuple(self._entries)

    def listen(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unlisten() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unlisten

    def push_state(self, state: Any, path: str) -> None:
        self._entries.append(self._make_location(state, path))
        self._notify()

    def replace_state(self, state: Any, path: str) -> None:
        self._entries[-1] = self._make_location(state, path)
        self._notify()

    def _make_location(self, state: Any, path: str) -> Location:
        location = Location(pathname=path, state=state, key=self._next_key)
        self._next_key += 1
        return location

    def _notify(self) -> None:
        location = self.location
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                raise RedirectLoopError(location.pathname, self._depth - 1)
            logger.debug("Location changed to %r", location.pathname)
            for listener in list(self._listeners):
                listener(location)
        finally:
            self._depth -= 1
