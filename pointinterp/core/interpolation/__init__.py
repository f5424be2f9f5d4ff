"""Interpolation methods; importing this package registers all of them."""

from .base import NeighborInterpolator  # noqa: F401
from .cubic import CubicInterpolator  # noqa: F401
from .lagrange import lagrange_evaluate  # noqa: F401
from .linear import LinearInterpolator  # noqa: F401
from .quadratic import QuadraticInterpolator  # noqa: F401
from .registry import available_methods, get_method, register_method  # noqa: F401

__all__ = [
    "NeighborInterpolator",
    "LinearInterpolator",
    "QuadraticInterpolator",
    "CubicInterpolator",
    "lagrange_evaluate",
    "available_methods",
    "get_method",
    "register_method",
]
