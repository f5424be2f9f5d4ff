# pointinterp - point interpolation
"""Estimate unknown function values from known (x, y) points with linear,
quadratic and five-point polynomial interpolation."""

from pointinterp.core import (
    CalculationError,
    ConfigurationError,
    DegenerateGeometryError,
    InsufficientDataError,
    InterpolationOptions,
    InvalidInputError,
    PointInterpError,
    SampleSet,
    available_methods,
    closest_three_points,
)
from pointinterp.interpolator import Interpolator
from pointinterp.logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "Interpolator",
    "SampleSet",
    "InterpolationOptions",
    "closest_three_points",
    "available_methods",
    # Exceptions
    "PointInterpError",
    "InvalidInputError",
    "ConfigurationError",
    "CalculationError",
    "InsufficientDataError",
    "DegenerateGeometryError",
    # Logging
    "configure_logging",
    "get_logger",
]
