import math
from numbers import Integral, Real
from typing import Any


class ConfigurationError(ValueError):
    pass


def require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def as_int(value: Any, name: str) -> int:
    require(
        isinstance(value, Integral) and not isinstance(value, bool),
        f'{name} must be an integer (got {value!r})',
    )
    return int(value)


def as_finite(value: Any, name: str) -> float:
    require(
        isinstance(value, Real) and not isinstance(value, bool),
        f'{name} must be a number (got {value!r})',
    )
    result = float(value)
    require(math.isfinite(result), f'{name} must be finite (got {result!r})')
    return result


def validate_shape_values(
    min_segment_size: float,
    angle_delta: float,
    length_scale: float,
    child_offset: float,
    child_offset_rotation: float,
    child_count: int,
) -> None:
    """Reject parameter combinations that cannot be auto-corrected."""

    require(min_segment_size >= 0.0, f'min_segment_size must be >= 0 (got {min_segment_size})')
    require(child_count >= 2, f'child_count must be >= 2 (got {child_count})')
    require(
        0.0 < length_scale <= 1.0,
        f'length_scale must lie in (0, 1] (got {length_scale})',
    )
    for name, value in (
        ('angle_delta', angle_delta),
        ('child_offset', child_offset),
        ('child_offset_rotation', child_offset_rotation),
    ):
        require(math.isfinite(value), f'{name} must be finite (got {value!r})')
