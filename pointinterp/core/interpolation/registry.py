"""Registry for interpolation method implementations."""

from __future__ import annotations

from typing import Dict, Type

from pointinterp.core.errors import ConfigurationError
from pointinterp.core.interpolation.base import NeighborInterpolator


_METHODS: Dict[str, Type[NeighborInterpolator]] = {}


def register_method(method: Type[NeighborInterpolator]) -> Type[NeighborInterpolator]:
    """Register an interpolation method under its ``name``.

    Returns the class unchanged so it can be used as a decorator.
    """

    if not method.name:
        raise ValueError(f"{method.__name__} does not define a method name")
    _METHODS[method.name] = method
    return method


def get_method(name: str) -> Type[NeighborInterpolator]:
    """Return a registered interpolation method."""

    try:
        return _METHODS[name]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown interpolation method '{name}'. Available: {sorted(_METHODS)}"
        ) from exc


def available_methods() -> Dict[str, int]:
    """Return registered method names mapped to their minimum point counts."""

    return {name: method.min_points for name, method in _METHODS.items()}


__all__ = ["register_method", "get_method", "available_methods"]
