"""Five-point polynomial interpolation."""

from __future__ import annotations

import numpy as np

from pointinterp.core.interpolation.base import NeighborInterpolator
from pointinterp.core.interpolation.lagrange import lagrange_evaluate
from pointinterp.core.interpolation.registry import register_method


@register_method
class CubicInterpolator(NeighborInterpolator):
    """Lagrange polynomial through a five-point window around ``x``.

    The window starts from the two nearest points and grows the same way as
    for the quadratic method, so the polynomial has degree four and
    reproduces any quartic exactly.
    """

    name = "cubic"
    min_points = 5

    def _evaluate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        return lagrange_evaluate(x, xs, ys)


__all__ = ["CubicInterpolator"]
