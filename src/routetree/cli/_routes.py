"""``routetree routes`` — list every route in a tree.

Resolves an import string to a RouteTree and prints one row per node
with its full path, component and flags.
"""

import argparse
import sys

from routetree.cli._resolve import resolve_tree
from routetree.errors import RouteTreeError
from routetree.routing.tree import RouteTree


def describe_component(component: object) -> str:
    """Readable name for an opaque component reference."""
    if component is None:
        return "-"
    return getattr(component, "__name__", None) or repr(component)


def _flags(tree: RouteTree) -> str:
    node = tree.node
    flags: list[str] = []
    if tree.is_catch_all_route(tree):
        flags.append("catch-all")
    if node.index_route.component is not None:
        flags.append(f"index={describe_component(node.index_route.component)}")
    if node.redirect_to:
        flags.append(f"redirect_to={node.redirect_to}")
    if node.on_enter is not None:
        target = getattr(node.on_enter, "to_path", None)
        flags.append(f"redirect -> {target}" if target is not None else "on_enter")
    return ", ".join(flags)


def run_routes(args: argparse.Namespace) -> None:
    """List every route of a tree.

    Resolves ``args.tree`` and prints a table of PATH, COMPONENT and
    FLAGS, depth-first in child order (catch-alls therefore last among
    their siblings).
    """
    try:
        tree = resolve_tree(args.tree)
    except (ModuleNotFoundError, AttributeError, TypeError, RouteTreeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [
        (full_path, describe_component(child.component), _flags(child))
        for full_path, child in tree.walk()
    ]

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_component = max(max(len(r[1]) for r in rows), 9)  # "COMPONENT" header

    # Print table
    fmt = f"{{:<{max_path}}}  {{:<{max_component}}}  {{}}"
    print(fmt.format("PATH", "COMPONENT", "FLAGS"))
    sep_len = max_path + max_component + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for full_path, component, flags in rows:
        print(fmt.format(full_path, component, flags).rstrip())
