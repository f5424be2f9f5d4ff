"""Immutable container for the known (x, y) sample points."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np
import pandas as pd

from pointinterp.core.errors import ConfigurationError, InvalidInputError


def _is_missing(value: Any) -> bool:
    """Return True for ``None`` and scalar NaN/NA markers."""

    return value is None or (np.ndim(value) == 0 and bool(pd.isna(value)))


def as_real(value: Any, what: str = "value") -> float:
    """Convert ``value`` to a finite float.

    Args:
        value: Number (or numeric string) to convert.
        what: Label used in the error message.

    Returns:
        The value as a Python float.

    Raises:
        InvalidInputError: If ``value`` is not numeric or not finite.
    """

    if isinstance(value, bool):
        raise InvalidInputError(f"{what} must be a real number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{what} must be a real number, got {value!r}") from exc
    if not np.isfinite(number):
        raise InvalidInputError(f"{what} must be finite, got {value!r}")
    return number


@dataclass(frozen=True, eq=False)
class SampleSet:
    """Known sample points sorted ascending by x.

    Args:
        xs: Unique, finite x-coordinates.
        ys: Finite y-values aligned with ``xs``.

    The arrays are copied, sorted and marked read-only, so a ``SampleSet`` can
    be shared between interpolators and threads without copying.

    Example:
        >>> samples = SampleSet.from_mapping({3: 4.0, 1: 2.0, 2: None})
        >>> samples.xs
        array([1., 3.])
    """

    xs: np.ndarray
    ys: np.ndarray
    _points: Mapping[float, float] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        xs = np.array(self.xs, dtype=float)
        ys = np.array(self.ys, dtype=float)

        if xs.ndim != 1 or xs.shape != ys.shape:
            raise InvalidInputError(
                f"xs and ys must be 1-D arrays of equal length, got {xs.shape} and {ys.shape}"
            )
        if xs.size == 0:
            raise ConfigurationError("points are required to do interpolation")
        if not np.all(np.isfinite(xs)):
            raise InvalidInputError("sample x-values must be finite")
        if not np.all(np.isfinite(ys)):
            raise InvalidInputError("sample y-values must be finite")

        order = np.argsort(xs, kind="stable")
        xs = xs[order]
        ys = ys[order]
        duplicated = xs[1:][np.diff(xs) == 0]
        if duplicated.size:
            raise InvalidInputError(
                f"duplicate sample x-values: {sorted(set(duplicated.tolist()))}"
            )

        xs.setflags(write=False)
        ys.setflags(write=False)
        object.__setattr__(self, "xs", xs)
        object.__setattr__(self, "ys", ys)
        object.__setattr__(
            self, "_points", MappingProxyType(dict(zip(xs.tolist(), ys.tolist())))
        )

    @classmethod
    def from_mapping(cls, points: Mapping[Any, Any] | None) -> SampleSet:
        """Build a sample set from an ``x -> y`` mapping.

        Entries whose value is missing (``None``, NaN or ``pd.NA``) are
        dropped silently since nothing can be interpolated through them.

        Args:
            points: Mapping of x-coordinates to y-values.

        Returns:
            A validated :class:`SampleSet`.

        Raises:
            ConfigurationError: If ``points`` is missing, empty, not a mapping,
                or holds only missing values.
            InvalidInputError: If a key or retained value is not a finite
                number, or two keys describe the same x-value.
        """

        if isinstance(points, pd.Series):
            return cls.from_series(points)
        if points is None:
            raise ConfigurationError("points are required to do interpolation")
        if not isinstance(points, Mapping):
            raise ConfigurationError(
                f"points must be a mapping of x to y, got {type(points).__name__}"
            )
        if len(points) == 0:
            raise ConfigurationError("points are required to do interpolation")

        xs: list[float] = []
        ys: list[float] = []
        for key, value in points.items():
            if _is_missing(value):
                continue
            xs.append(as_real(key, "sample x-value"))
            ys.append(as_real(value, f"sample y-value at x={key!r}"))

        if not xs:
            raise ConfigurationError(
                "points are required to do interpolation; every sample value is missing"
            )
        return cls(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))

    @classmethod
    def from_series(cls, series: pd.Series) -> SampleSet:
        """Build a sample set from a Series indexed by x.

        Raises:
            TypeError: If ``series`` is not a pandas Series.
            InvalidInputError: If the index holds duplicate x-values.
        """

        if not isinstance(series, pd.Series):
            raise TypeError(f"Expected pandas Series, got {type(series)}")
        if series.index.has_duplicates:
            dupes = series.index[series.index.duplicated()].unique().tolist()
            raise InvalidInputError(f"duplicate sample x-values: {dupes}")
        return cls.from_mapping(series.to_dict())

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, x: str = "x", y: str = "y") -> SampleSet:
        """Build a sample set from two columns of a DataFrame.

        Args:
            frame: Table holding the samples, one row per point.
            x: Column with the x-coordinates.
            y: Column with the y-values.

        Returns:
            A validated :class:`SampleSet`.
        """

        if not isinstance(frame, pd.DataFrame):
            raise TypeError(f"Expected pandas DataFrame, got {type(frame)}")
        missing = [column for column in (x, y) if column not in frame.columns]
        if missing:
            raise InvalidInputError(f"DataFrame is missing column(s): {missing}")
        if frame.empty:
            raise ConfigurationError("points are required to do interpolation")
        return cls.from_series(frame.set_index(x)[y])

    @property
    def points(self) -> Mapping[float, float]:
        """Read-only ``x -> y`` view of the retained samples."""
        return self._points

    def value_at(self, x: float) -> float:
        """Return the stored y-value for a known x.

        Raises:
            KeyError: If ``x`` is not a known sample point.
        """
        return self._points[x]

    def __contains__(self, x: object) -> bool:
        return x in self._points

    def __len__(self) -> int:
        return int(self.xs.size)


__all__ = ["SampleSet", "as_real"]
