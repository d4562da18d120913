"""``routetree resolve`` — show which component handles a path.

Exits with code 1 when no component is registered for the path.
"""

import argparse
import sys

from routetree.cli._resolve import resolve_tree
from routetree.cli._routes import describe_component
from routetree.config import TreeConfig
from routetree.errors import RouteTreeError


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` against the tree named by ``args.tree``."""
    settings = TreeConfig(resolve_mode="legacy") if args.legacy else None
    try:
        tree = resolve_tree(args.tree, settings=settings)
    except (ModuleNotFoundError, AttributeError, TypeError, RouteTreeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    component = tree.resolve(args.path)
    if component is None:
        print(f"No component registered for {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(describe_component(component))
