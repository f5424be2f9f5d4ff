from pointinterp.core.errors import (
    CalculationError,
    ConfigurationError,
    DegenerateGeometryError,
    InsufficientDataError,
    InvalidInputError,
    PointInterpError,
)
from pointinterp.core.interpolation import (
    CubicInterpolator,
    LinearInterpolator,
    NeighborInterpolator,
    QuadraticInterpolator,
    available_methods,
    get_method,
    lagrange_evaluate,
    register_method,
)
from pointinterp.core.neighbors import (
    closest_three_points,
    closest_two_points,
    neighbor_window,
    select_neighbors,
)
from pointinterp.core.options import InterpolationOptions
from pointinterp.core.samples import SampleSet


__all__ = [
    "PointInterpError",
    "InvalidInputError",
    "ConfigurationError",
    "CalculationError",
    "InsufficientDataError",
    "DegenerateGeometryError",
    "NeighborInterpolator",
    "LinearInterpolator",
    "QuadraticInterpolator",
    "CubicInterpolator",
    "available_methods",
    "get_method",
    "register_method",
    "lagrange_evaluate",
    "closest_two_points",
    "closest_three_points",
    "neighbor_window",
    "select_neighbors",
    "InterpolationOptions",
    "SampleSet",
]
