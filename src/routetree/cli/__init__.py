"""routetree CLI — inspect route trees from the command line.

Entry point registered as ``routetree`` in ``pyproject.toml``::

    [project.scripts]
    routetree = "routetree.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routetree`` command."""
    parser = argparse.ArgumentParser(
        prog="routetree",
        description="routetree — declarative route trees that grow at runtime.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log tree construction and redirect decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routetree routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every route in a tree")
    routes_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp.routes:routes)",
    )

    # -- routetree resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show the component for a path")
    resolve_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp.routes:routes)",
    )
    resolve_parser.add_argument("path", help="Path to resolve (e.g. /customer/list)")
    resolve_parser.add_argument(
        "--legacy",
        action="store_true",
        help="Strip exactly one segment per tree level when matching",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routetree.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from routetree.cli._lookup import run_resolve

        run_resolve(args)
