"""Routing — the route tree, its path rules and redirect handling.

Trees are built from declarative configuration, extended at runtime,
then exported for the rendering layer or queried with ``resolve()``.
"""
