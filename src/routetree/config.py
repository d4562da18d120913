"""Tree configuration.

TreeConfig is a frozen dataclass — immutable after creation, shared by
every tree created through ``RouteTree.wrap()``.
"""

from dataclasses import dataclass

from routetree.errors import ConfigurationError

RESOLVE_MODES = frozenset({"segments", "legacy"})


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Route tree configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = TreeConfig(resolve_mode="legacy", max_redirects=4)
    """

    # Path given to a node whose configuration has none (the root)
    root_path: str = "/"

    # Marker matched against ``path`` or ``name`` to recognise the catch-all
    catch_all: str = "*"

    # "segments": consume one node path worth of segments per level
    # "legacy": strip exactly one segment per level (multi-segment paths never match)
    resolve_mode: str = "segments"

    # Nested listener dispatches MemoryHistory allows before RedirectLoopError
    max_redirects: int = 16

    def __post_init__(self) -> None:
        if self.resolve_mode not in RESOLVE_MODES:
            allowed = ", ".join(sorted(RESOLVE_MODES))
            msg = f"Unknown resolve_mode {self.resolve_mode!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
        if not self.catch_all:
            msg = "catch_all marker must be a non-empty string."
            raise ConfigurationError(msg)
        if self.max_redirects < 1:
            msg = f"max_redirects must be at least 1, got {self.max_redirects}"
            raise ConfigurationError(msg)
