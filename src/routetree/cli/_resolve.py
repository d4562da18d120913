"""Tree import resolution — resolves ``"module:attribute"`` strings to RouteTrees.

Shared utility used by ``routetree routes`` and ``routetree resolve`` to
locate a route tree from a user-supplied import string.
"""

import importlib
from collections.abc import Mapping

from routetree.config import TreeConfig
from routetree.routing.tree import RouteTree


def resolve_tree(import_string: str, *, settings: TreeConfig | None = None) -> RouteTree:
    """Resolve an import string to a RouteTree.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    The attribute may be a ``RouteTree``, a plain configuration mapping
    (wrapped into a tree), or a factory returning either.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:routes"``, ``"myapp.nav:build_routes"``).
        settings: Configuration for the resolved tree. When given, the
            tree is rebuilt with it; otherwise trees keep their own.

    Returns:
        The resolved ``RouteTree``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is neither a tree nor a mapping.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions - call them if they're not already a tree
    if callable(obj) and not isinstance(obj, RouteTree):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteTree):
        return obj if settings is None else RouteTree(obj, settings=settings)
    if isinstance(obj, Mapping):
        return RouteTree(obj, settings=settings)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteTree or mapping"
    raise TypeError(msg)
