"""Three-point quadratic interpolation."""

from __future__ import annotations

import numpy as np

from pointinterp.core.errors import DegenerateGeometryError
from pointinterp.core.interpolation.base import NeighborInterpolator
from pointinterp.core.interpolation.registry import register_method


@register_method
class QuadraticInterpolator(NeighborInterpolator):
    """Quadratic through the three points picked by ``closest_three_points``."""

    name = "quadratic"
    min_points = 3

    def _evaluate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        (x1, x2, x3), (y1, y2, y3) = xs.tolist(), ys.tolist()
        d12, d13, d23 = x1 - x2, x1 - x3, x2 - x3
        if d12 == 0 or d13 == 0 or d23 == 0:
            raise DegenerateGeometryError(
                f"quadratic nodes must be distinct, got {[x1, x2, x3]}"
            )

        # Each basis ratio is exactly 1 or 0 at the nodes
        return (
            y1 * ((x - x2) / d12) * ((x - x3) / d13)
            + y2 * ((x - x1) / -d12) * ((x - x3) / d23)
            + y3 * ((x - x1) / d13) * ((x - x2) / d23)
        )


__all__ = ["QuadraticInterpolator"]
