"""Lagrange-form polynomial evaluation over a handful of nodes."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pointinterp.core.errors import DegenerateGeometryError


def lagrange_evaluate(
    x: float, nodes: Sequence[float] | np.ndarray, values: Sequence[float] | np.ndarray
) -> float:
    """Evaluate the unique polynomial through ``(nodes, values)`` at ``x``.

    Computes ``sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)``. At a node
    the matching basis term is exactly one and the others exactly zero, so
    known samples are reproduced without rounding error.

    Args:
        x: Point at which to evaluate.
        nodes: Distinct x-coordinates.
        values: y-values aligned with ``nodes``.

    Returns:
        The interpolated value.

    Raises:
        DegenerateGeometryError: If two nodes coincide, which would put a
            zero in a denominator.
    """

    nodes = np.asarray(nodes, dtype=float)
    values = np.asarray(values, dtype=float)
    if nodes.ndim != 1 or nodes.shape != values.shape:
        raise ValueError(
            f"nodes and values must be 1-D arrays of equal length, got {nodes.shape} and {values.shape}"
        )

    n = nodes.size
    gaps = nodes[:, None] - nodes[None, :]
    off_diagonal = ~np.eye(n, dtype=bool)
    if np.any(gaps[off_diagonal] == 0):
        raise DegenerateGeometryError(
            f"interpolation nodes must be distinct, got {nodes.tolist()}"
        )

    offsets = x - nodes
    total = 0.0
    for i in range(n):
        others = off_diagonal[i]
        total += values[i] * np.prod(offsets[others] / gaps[i, others])
    return float(total)


__all__ = ["lagrange_evaluate"]
