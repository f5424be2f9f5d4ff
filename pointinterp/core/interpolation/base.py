"""Base class for neighbor-window interpolation methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from pointinterp.core.errors import InsufficientDataError, InvalidInputError
from pointinterp.core.neighbors import select_neighbors
from pointinterp.core.options import InterpolationOptions
from pointinterp.core.samples import SampleSet, as_real
from pointinterp.logging import get_logger

logger = get_logger(__name__)


class NeighborInterpolator(ABC):
    """Evaluate a closed-form formula over the neighbors of each query.

    Subclasses set ``name`` and ``min_points`` and implement
    :meth:`_evaluate`. Instances hold nothing but a reference to the shared
    :class:`SampleSet` and the options, so one instance can serve any number
    of queries.

    Args:
        samples: Known sample points.
        options: Optional configuration; defaults to
            :class:`InterpolationOptions`.
    """

    name: str = ""
    min_points: int = 0

    def __init__(
        self, samples: SampleSet, options: InterpolationOptions | None = None
    ) -> None:
        if not isinstance(samples, SampleSet):
            raise TypeError(f"Expected SampleSet, got {type(samples)}")
        self._samples = samples
        self._options = options if options is not None else InterpolationOptions()

    @property
    def samples(self) -> SampleSet:
        return self._samples

    def __call__(self, x: Any) -> float:
        """Return the interpolated y-value at ``x``.

        Raises:
            InvalidInputError: If ``x`` is not a finite number, or lies outside
                the sampled range while extrapolation is disabled.
            InsufficientDataError: If the sample set is too small for the method.
            DegenerateGeometryError: If the selected neighbors share an x-value.
        """
        sought = as_real(x, "query x")
        samples = self._samples
        if len(samples) < self.min_points:
            raise InsufficientDataError(self.name, self.min_points, len(samples))

        lo, hi = samples.xs[0], samples.xs[-1]
        if sought < lo or sought > hi:
            if not self._options.extrapolate:
                raise InvalidInputError(
                    f"query x={sought} lies outside the sampled range [{lo}, {hi}]"
                )
            logger.debug(
                "%s extrapolating at x=%s outside [%s, %s]", self.name, sought, lo, hi
            )

        indexes = select_neighbors(sought, samples.xs, self.min_points, self.name)
        return self._evaluate(sought, samples.xs[indexes], samples.ys[indexes])

    @abstractmethod
    def _evaluate(self, x: float, xs: np.ndarray, ys: np.ndarray) -> float:
        """Evaluate the formula at ``x`` over ascending neighbors ``xs``/``ys``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={len(self._samples)})"


__all__ = ["NeighborInterpolator"]
