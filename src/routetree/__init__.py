"""routetree — declarative route trees that grow at runtime.

Describe navigable paths as nested configuration, let modules register
their own sub-trees later, keep the catch-all route last, propagate
parent-to-child redirects on every navigation, and resolve paths to
the component responsible for them.

Basic usage::

    from routetree import MemoryHistory, RouteTree, mount

    routes = RouteTree({"path": "/", "component": App})
    routes.add_child_route({"path": "/about", "component": About})
    routes.add_no_match_route(NoMatch)

    mount(routes, MemoryHistory("/"), render)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "History",
    "Location",
    "MemoryHistory",
    "Mount",
    "Navigation",
    "RedirectHook",
    "RedirectLoopError",
    "RouteNode",
    "RouteTree",
    "RouteTreeError",
    "TreeConfig",
    "mount",
    "paths_equal",
    "resolve_redirects",
]

# Public name -> defining module, imported on first access
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "routetree.errors",
    "History": "routetree.history",
    "Location": "routetree.history",
    "MemoryHistory": "routetree.history",
    "Mount": "routetree.mounting",
    "Navigation": "routetree.routing.redirects",
    "RedirectHook": "routetree.routing.redirects",
    "RedirectLoopError": "routetree.errors",
    "RouteNode": "routetree.routing.node",
    "RouteTree": "routetree.routing.tree",
    "RouteTreeError": "routetree.errors",
    "TreeConfig": "routetree.config",
    "mount": "routetree.mounting",
    "paths_equal": "routetree.routing.paths",
    "resolve_redirects": "routetree.routing.redirects",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetree`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
