"""Shared type aliases used across routetree modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# View component, opaque to the tree
Component: TypeAlias = Any

# Plain route configuration as written by applications
RouteConfig: TypeAlias = Mapping[str, Any]

# The ``replace_state(state, path)`` half of the history contract
ReplaceState: TypeAlias = Callable[[Any, str], Any]

# ``on_enter(next_state, replace_state)`` hook called by the external router
EnterHook: TypeAlias = Callable[[Any, ReplaceState], Any]
