"""Tests for routetree.__init__ — lazy import registry covers all public names."""


import pytest

import routetree


@pytest.mark.parametrize("name", routetree.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(routetree, name)
    assert obj is not None, f"routetree.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    """Every name in __all__ has a corresponding entry in _LAZY_IMPORTS."""
    missing = set(routetree.__all__) - set(routetree._LAZY_IMPORTS)
    assert not missing, (
        f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}. "
        f"Add them to _LAZY_IMPORTS in routetree/__init__.py."
    )


def test_lazy_registry_no_extras() -> None:
    """Every name in _LAZY_IMPORTS should be in __all__ (public API contract)."""
    extras = set(routetree._LAZY_IMPORTS) - set(routetree.__all__)
    assert not extras, (
        f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}. "
        f"Either add them to __all__ or remove from _LAZY_IMPORTS."
    )


def test_mount_is_the_function() -> None:
    """``routetree.mount`` is the function, not a submodule."""
    from routetree.mounting import mount

    assert routetree.mount is mount


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        routetree.__getattr__("ThisDoesNotExist")
