"""routetree exception hierarchy.

Shared across the tree, the redirect walk, the history and the CLI so
every module raises and catches the same types.
"""


class RouteTreeError(Exception):
    """Base for all routetree-specific errors."""


class ConfigurationError(RouteTreeError):
    """Raised when route configuration is malformed.

    Only raised at construction boundaries (``RouteTree(...)``,
    ``TreeConfig(...)``). Invalid candidates handed to
    ``add_child_route()`` are dropped instead.
    """


class RedirectLoopError(RouteTreeError):
    """Raised when redirects keep re-entering the navigation listener.

    ``MemoryHistory`` counts nested listener dispatches and gives up once
    the configured depth is exceeded.
    """

    def __init__(self, path: str, depth: int) -> None:
        self.path = path
        self.depth = depth
        super().__init__(f"Redirect loop detected at {path!r} after {depth} nested redirects")
