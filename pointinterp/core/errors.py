from __future__ import annotations

"""Centralized error types for the pointinterp core package."""


class PointInterpError(Exception):
    """Base exception for pointinterp package."""

    pass


class InvalidInputError(PointInterpError):
    """Exception raised for invalid sample points or query values."""

    pass


class ConfigurationError(InvalidInputError):
    """Exception raised when an interpolator cannot be configured.

    Covers a missing or empty sample set, an unknown method name and invalid
    option values.
    """

    pass


class CalculationError(PointInterpError):
    """Exception raised when an interpolation cannot be evaluated."""

    pass


class InsufficientDataError(CalculationError):
    """Exception raised when a method needs more known points than exist."""

    def __init__(self, method: str, required: int, available: int) -> None:
        self.method = method
        self.required = required
        self.available = available
        super().__init__(
            f"{method} interpolation needs at least {required} points, "
            f"got {available}"
        )


class DegenerateGeometryError(CalculationError):
    """Exception raised when selected neighbors share an x-value."""

    pass


__all__ = [
    "PointInterpError",
    "InvalidInputError",
    "ConfigurationError",
    "CalculationError",
    "InsufficientDataError",
    "DegenerateGeometryError",
]
