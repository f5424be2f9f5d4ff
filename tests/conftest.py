"""Shared fixtures for pointinterp tests."""

import numpy as np
import pytest

from pointinterp import Interpolator


def quartic(x):
    return x**4 - 2 * x**3 + 0.5 * x - 7


@pytest.fixture
def line_points():
    """Samples of y = x + 1 on three points.

    Returns:
        dict: Mapping of x to y.
    """
    return {1: 2, 2: 3, 3: 4}


@pytest.fixture
def square_points():
    """Samples of y = x**2 on three points."""
    return {1: 1, 2: 4, 3: 9}


@pytest.fixture
def quartic_interpolator():
    """Interpolator over an irregular grid sampled from a quartic.

    Returns:
        Interpolator: Built from eight unevenly spaced samples.
    """
    xs = [-3.0, -1.5, 0.0, 0.75, 2.0, 3.5, 4.0, 6.0]
    return Interpolator({x: quartic(x) for x in xs})


@pytest.fixture
def grid_xs():
    """Ten evenly spaced x-values 0..9."""
    return np.arange(10, dtype=float)
