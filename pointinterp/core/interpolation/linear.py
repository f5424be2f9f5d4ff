"""Two-point linear interpolation."""

from __future__ import annotations

from typing import Any

import numpy as np

from pointinterp.core.errors import DegenerateGeometryError
from pointinterp.core.interpolation.base import NeighborInterpolator
from pointinterp.core.interpolation.registry import register_method
from pointinterp.core.samples import as_real


@register_method
class LinearInterpolator(NeighborInterpolator):
    """Linear interpolation between the two known points nearest to ``x``.

    Outside the sampled range the same two-nearest rule applies, so the line
    through the two edge points is extended.

    Example:
        >>> from pointinterp.core.samples import SampleSet
        >>> interp = LinearInterpolator(SampleSet.from_mapping({1: 2, 2: 3, 3: 4}))
        >>> interp(2.5)
        3.5
    """

    name = "linear"
    min_points = 2

    def __call__(self, x: Any) -> float:
        sought = as_real(x, "query x")
        if len(self.samples) >= self.min_points and sought in self.samples:
            # Known sample; no interpolation needed
            return self.samples.value_at(sought)
        return super().__call__(sought)

    def _evaluate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        (x1, x2), (y1, y2) = xs.tolist(), ys.tolist()
        if x2 == x1:
            raise DegenerateGeometryError(f"cannot interpolate between equal x-values {x1}")
        return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


__all__ = ["LinearInterpolator"]
