"""User-facing interpolator over a fixed set of known points."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from pointinterp.core.errors import ConfigurationError
from pointinterp.core.interpolation import available_methods, get_method
from pointinterp.core.interpolation.base import NeighborInterpolator
from pointinterp.core.neighbors import closest_three_points
from pointinterp.core.options import InterpolationOptions
from pointinterp.core.samples import SampleSet
from pointinterp.logging import get_logger

logger = get_logger(__name__)


class Interpolator:
    """Estimate unknown values from known ``x -> y`` points.

    Args:
        points: Mapping of known x-values to y-values, or a prepared
            :class:`SampleSet`. Entries with a missing value are dropped.
        options: Optional :class:`InterpolationOptions` or mapping of overrides.

    Raises:
        ConfigurationError: If ``points`` is missing or empty, or the options
            name an unknown default method.

    Example:
        >>> interp = Interpolator({1: 2, 2: 3, 3: 4})
        >>> interp.linear(2.5)
        3.5
    """

    def __init__(
        self,
        points: Mapping[Any, Any] | SampleSet | None = None,
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ) -> None:
        if isinstance(points, SampleSet):
            samples = points
        else:
            samples = SampleSet.from_mapping(points)

        self._options = InterpolationOptions.from_mapping(options)
        if self._options.default_method not in available_methods():
            raise ConfigurationError(
                f"Unknown default_method '{self._options.default_method}'. "
                f"Available: {sorted(available_methods())}"
            )

        self._samples = samples
        self._evaluators: Mapping[str, NeighborInterpolator] = MappingProxyType(
            {name: get_method(name)(samples, self._options) for name in available_methods()}
        )
        logger.debug(
            "Interpolator ready with %d points over [%s, %s]",
            len(samples),
            samples.xs[0],
            samples.xs[-1],
        )

    @classmethod
    def from_series(
        cls,
        series: pd.Series,
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ) -> Interpolator:
        """Build an interpolator from a Series indexed by x."""
        return cls(SampleSet.from_series(series), options)

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        x: str = "x",
        y: str = "y",
        options: InterpolationOptions | Mapping[str, Any] | None = None,
    ) -> Interpolator:
        """Build an interpolator from the ``x`` and ``y`` columns of a DataFrame."""
        return cls(SampleSet.from_frame(frame, x, y), options)

    @property
    def points(self) -> Mapping[float, float]:
        """Read-only ``x -> y`` view of the points used for interpolation."""
        return self._samples.points

    @property
    def samples(self) -> SampleSet:
        return self._samples

    @property
    def options(self) -> InterpolationOptions:
        return self._options

    def linear(self, x: float) -> float:
        """Solve for y at ``x`` on the line through the two nearest points."""
        return self._evaluators["linear"](x)

    def quadratic(self, x: float) -> float:
        """Solve for y at ``x`` on the quadratic through three neighboring points."""
        return self._evaluators["quadratic"](x)

    def cubic(self, x: float) -> float:
        """Solve for y at ``x`` on the polynomial through five neighboring points."""
        return self._evaluators["cubic"](x)

    def interpolate(self, x: float, method: str | None = None) -> float:
        """Interpolate at ``x`` with a named method.

        Args:
            x: Query x-value.
            method: Registered method name; ``options.default_method`` when
                omitted.

        Raises:
            ConfigurationError: If ``method`` is not registered.
        """
        name = method if method is not None else self._options.default_method
        try:
            evaluator = self._evaluators[name]
        except KeyError as exc:
            raise ConfigurationError(
                f"Unknown interpolation method '{name}'. Available: {sorted(self._evaluators)}"
            ) from exc
        return evaluator(x)

    def evaluate(
        self, xs: float | Iterable[float] | np.ndarray, method: str | None = None
    ) -> float | np.ndarray:
        """Interpolate at every value of ``xs``.

        Returns:
            A float for scalar input, otherwise an array shaped like ``xs``.
        """
        queries = np.asarray(xs)
        if queries.ndim == 0:
            return self.interpolate(queries.item(), method)
        values = [self.interpolate(q, method) for q in queries.ravel().tolist()]
        return np.asarray(values, dtype=float).reshape(queries.shape)

    def closest_three_points(
        self, x: float, all_points: Sequence[float] | None = None
    ) -> tuple[float, float, float]:
        """Return the three points closest to ``x`` in ascending order.

        Args:
            x: Query x-value.
            all_points: Candidate x-values; the known sample x-values when
                omitted.
        """
        candidates = self._samples.xs if all_points is None else all_points
        return closest_three_points(x, candidates)

    @staticmethod
    def available_methods() -> dict[str, int]:
        """Return registered method names mapped to their minimum point counts."""
        return available_methods()

    def __repr__(self) -> str:
        return (
            f"Interpolator(points={len(self._samples)}, "
            f"default_method={self._options.default_method!r})"
        )


__all__ = ["Interpolator"]
