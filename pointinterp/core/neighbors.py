"""Nearest-point selection shared by every interpolation method.

All methods start from the two known x-values closest to the query and then
grow that pair into a window of consecutive points in sorted order. The
window grows toward higher x and only falls back to lower x once its upper
edge sits within the last two positions of the data.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from pointinterp.core.errors import (
    DegenerateGeometryError,
    InsufficientDataError,
    InvalidInputError,
)
from pointinterp.core.samples import as_real
from pointinterp.logging import get_logger

logger = get_logger(__name__)


def _as_candidates(all_points: Any) -> np.ndarray:
    """Convert candidate x-values to a flat float array, rejecting bad entries."""

    if all_points is None or isinstance(all_points, (str, bytes)):
        raise InvalidInputError(
            f"candidate points must be a sequence of numbers, got {all_points!r}"
        )
    raw = np.ravel(np.asarray(all_points, dtype=object))
    return np.array([as_real(value, "candidate x-value") for value in raw], dtype=float)


def _closest_two(sought: float, values: np.ndarray) -> Tuple[float, float]:
    if values.size < 2:
        raise InsufficientDataError("nearest-points", 2, int(values.size))

    # lexsort keys: last is primary
    order = np.lexsort((values, np.abs(values - sought)))
    return float(values[order[0]]), float(values[order[1]])


def closest_two_points(sought: float, all_points: Sequence[float]) -> Tuple[float, float]:
    """Return the two values of ``all_points`` nearest to ``sought``.

    Distance is ``|value - sought|``; equal distances are broken by the
    smaller value first.

    Args:
        sought: Query x-value.
        all_points: Candidate x-values in any order.

    Returns:
        ``(first, second)`` with ``first`` the nearest value.

    Raises:
        InvalidInputError: If ``sought`` or a candidate is not a finite number.
        InsufficientDataError: If fewer than two candidates are given.
    """

    return _closest_two(as_real(sought, "query x"), _as_candidates(all_points))


def neighbor_window(lo: int, hi: int, length: int, size: int) -> Tuple[int, int]:
    """Grow the inclusive index range ``[lo, hi]`` until it spans ``size`` items.

    Each step extends past ``hi`` while ``hi < length - 2`` and otherwise
    extends before ``lo``. When ``lo`` is already the first index the window
    can only grow forward.

    Args:
        lo: Lowest index of the starting pair.
        hi: Highest index of the starting pair.
        length: Number of points in the sorted sequence.
        size: Requested window size.

    Returns:
        The inclusive ``(lo, hi)`` bounds of the grown window.
    """

    if size > length:
        raise InsufficientDataError("nearest-points", size, length)
    if not 0 <= lo <= hi < length:
        raise ValueError(f"Invalid window bounds [{lo}, {hi}] for length {length}")

    while hi - lo + 1 < size:
        if hi < length - 2 or lo == 0:
            hi += 1
        else:
            lo -= 1
    return lo, hi


def _window(
    sought: float, candidates: np.ndarray, size: int, method: str
) -> Tuple[np.ndarray, np.ndarray]:
    """Return the distinct sorted candidates and the window indexes into them.

    A nearest pair made of one repeated value raises; repeats elsewhere are
    collapsed before the window is grown.
    """

    if candidates.size < size:
        raise InsufficientDataError(method, size, int(candidates.size))

    first, second = _closest_two(sought, candidates)
    if first == second:
        raise DegenerateGeometryError(
            f"nearest points to {sought} share the x-value {first}"
        )

    ordered = np.unique(candidates)
    if ordered.size < size:
        raise InsufficientDataError(method, size, int(ordered.size))

    matches = np.flatnonzero((ordered == first) | (ordered == second))
    lo, hi = neighbor_window(int(matches.min()), int(matches.max()), ordered.size, size)
    indexes = np.arange(lo, hi + 1)

    logger.debug(
        "%s neighbors of %s: %s", method, sought, ordered[indexes].tolist()
    )
    return ordered, indexes


def select_neighbors(
    sought: float, xs: np.ndarray, size: int, method: str = "nearest-points"
) -> np.ndarray:
    """Return indexes of the ``size`` neighbors of ``sought`` in sorted ``xs``.

    Args:
        sought: Query x-value.
        xs: Known x-values, finite, unique and sorted ascending.
        size: Number of neighbors to select.
        method: Name reported in :class:`InsufficientDataError`.

    Returns:
        Ascending integer indexes into ``xs``.

    Raises:
        InvalidInputError: If ``sought`` is not a finite number or ``xs`` is
            not finite and increasing.
        DegenerateGeometryError: If ``xs`` repeats a value.
    """

    sought = as_real(sought, "query x")
    xs = np.asarray(xs, dtype=float).ravel()
    if not np.all(np.isfinite(xs)):
        raise InvalidInputError("known x-values must be finite")
    steps = np.diff(xs)
    if np.any(steps == 0):
        raise DegenerateGeometryError(f"known x-values repeat: {xs.tolist()}")
    if np.any(steps < 0):
        raise InvalidInputError("known x-values must be sorted ascending")

    _, indexes = _window(sought, xs, size, method)
    return indexes


def closest_three_points(
    sought: float, all_points: Sequence[float]
) -> Tuple[float, float, float]:
    """Return the closest three points to ``sought`` in ascending order.

    The two nearest values are always included. The third is the value
    right after the pair, unless the pair ends within the last two positions
    of the sorted distinct values, in which case it is the value right
    before the pair.

    Raises:
        InvalidInputError: If ``sought`` or a candidate is missing, not
            numeric, or not finite.
        InsufficientDataError: If fewer than three distinct candidates exist.
        DegenerateGeometryError: If the two nearest candidates are equal.

    Example:
        >>> closest_three_points(2.2, [4, 1, 3, 2, 5])
        (2.0, 3.0, 4.0)
        >>> closest_three_points(4.2, [4, 1, 3, 2, 5])
        (3.0, 4.0, 5.0)
    """

    sought = as_real(sought, "query x")
    ordered, indexes = _window(sought, _as_candidates(all_points), 3, "nearest-points")
    low, mid, high = ordered[indexes].tolist()
    return low, mid, high


__all__ = [
    "closest_two_points",
    "closest_three_points",
    "neighbor_window",
    "select_neighbors",
]
