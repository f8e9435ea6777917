"""Input validation shared by the CLI and the HTTP API."""

from __future__ import annotations

import math

from ose.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float | None) -> None:
    """Raise unless ``value`` is a finite number greater than zero."""
    if value is None or not math.isfinite(value) or value <= 0:
        raise ConfigValidationError(f"{name} must be a finite number > 0")


def validate_analyze_inputs(
    *,
    strike: float,
    price: float,
    price_range: float,
    width: float,
    size: int,
    days: int,
) -> None:
    require_positive("strike", strike)
    require_positive("price", price)
    require_positive("width", width)
    require_positive("size", size)
    require_positive("days", days)
    if price_range is None or not math.isfinite(price_range) or not 0 < price_range < 1:
        raise ConfigValidationError("price_range must be between 0 and 1")


__all__ = ["require_positive", "validate_analyze_inputs"]
