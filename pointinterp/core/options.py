"""Configuration for :class:`pointinterp.Interpolator`."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from pointinterp.core.errors import ConfigurationError


@dataclass(frozen=True)
class InterpolationOptions:
    """Configuration knobs shared by every interpolation method.

    Args:
        default_method: Method used by ``Interpolator.interpolate`` and
            ``Interpolator.evaluate`` when no method is named.
        extrapolate: Whether queries outside the sampled x-range are allowed.
            When ``False`` such queries raise ``InvalidInputError``.
    """

    default_method: str = "linear"
    extrapolate: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.default_method, str) or not self.default_method:
            raise ConfigurationError(
                f"default_method must be a non-empty string, got {self.default_method!r}"
            )
        if not isinstance(self.extrapolate, bool):
            raise ConfigurationError(
                f"extrapolate must be a bool, got {self.extrapolate!r}"
            )

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of supported configuration fields."""

        return {f.name for f in fields(cls)}

    @classmethod
    def from_mapping(
        cls, overrides: InterpolationOptions | Mapping[str, Any] | None = None
    ) -> InterpolationOptions:
        """Build an options instance from optional overrides.

        Args:
            overrides: Either an existing :class:`InterpolationOptions` instance
                or a mapping of field overrides.

        Returns:
            A fully populated :class:`InterpolationOptions` instance.

        Raises:
            TypeError: If ``overrides`` contains unrecognised keys.
        """

        if overrides is None:
            return cls()
        if isinstance(overrides, cls):
            return overrides
        unknown = set(overrides) - cls.field_names()
        if unknown:
            raise TypeError(f"Unknown interpolation option(s): {sorted(unknown)}")
        return replace(cls(), **{name: overrides[name] for name in overrides})

    def to_mapping(self) -> dict[str, Any]:
        """Return a mapping representation of the options."""

        return asdict(self)


__all__ = ["InterpolationOptions"]
