"""Path helpers — slash-insensitive equality and segment handling.

The only matching semantics the tree supports is literal equality after
slash trimming::

    "customer", "/customer", "customer/", "/customer/"  -> "/customer/"
"""


def strip_slashes(path: str) -> str:
    """Remove every leading and trailing ``/``."""
    return path.strip("/")


def normalize_path(path: str) -> str:
    """Wrap the slash-trimmed path as ``/<trimmed>/``.

    Examples::

        normalize_path("x")    -> "/x/"
        normalize_path("//x/") -> "/x/"
        normalize_path("/")    -> "//"
        normalize_path("")     -> "//"
    """
    return f"/{strip_slashes(path)}/"


def paths_equal(first: str, second: str) -> bool:
    """True when both paths normalize to the same string."""
    return normalize_path(first) == normalize_path(second)


def join_paths(*parts: str) -> str:
    """Slash-trim each part and join them with ``/``.

    No leading slash is added, so joining onto the root keeps the
    separator of the empty root segment::

        join_paths("/customer/", "/list") -> "customer/list"
        join_paths("/", "a")              -> "/a"
    """
    return "/".join(strip_slashes(part) for part in parts)


def split_segments(path: str) -> list[str]:
    """Return the non-empty segments of ``path``.

    ``"/customer/list/"`` -> ``["customer", "list"]``; the root has none.
    """
    return [part for part in strip_slashes(path).split("/") if part]
