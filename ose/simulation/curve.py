"""Sample payoff and Greeks over a symmetric price window."""

from __future__ import annotations

import numpy as np

from ose.interfaces.option_leg import Strategy
from ose.models.curve import Curve
from ose.pricing import greeks
from ose.pricing.payoff import strategy_payoff
from ose.utils.logging import get_logger

log = get_logger(__name__, component="curve")

DEFAULT_PRICE_RANGE = 0.15
DEFAULT_STEPS = 200


def price_grid(current_price: float, price_range: float = DEFAULT_PRICE_RANGE, steps: int = DEFAULT_STEPS) -> np.ndarray:
    """Return ``steps + 1`` evenly spaced prices covering current_price * (1 ± price_range)."""
    span = current_price * price_range
    start = current_price - span
    step_size = (2 * span) / steps
    return start + np.arange(steps + 1, dtype=float) * step_size


def generate_curve(
    strategy: Strategy,
    current_price: float,
    price_range: float = DEFAULT_PRICE_RANGE,
    *,
    steps: int = DEFAULT_STEPS,
    days_to_expiration: float = greeks.DEFAULT_DAYS_TO_EXPIRATION,
) -> Curve:
    """Evaluate payoff and the four Greeks at every grid price.

    Theta and vega use ``days_to_expiration`` which stays at 30 unless the
    caller passes the strategy's own horizon explicitly.
    """
    prices = price_grid(current_price, price_range, steps)
    curve = Curve.from_columns(
        price=prices,
        payoff=strategy_payoff(strategy, prices),
        delta=greeks.delta(strategy, prices, current_price),
        gamma=greeks.gamma(strategy, prices, current_price),
        theta=greeks.theta(strategy, prices, current_price, days_to_expiration),
        vega=greeks.vega(strategy, prices, current_price, days_to_expiration),
    )
    log.debug(
        "Generated payoff curve",
        extra={"strategy": strategy.name, "points": len(curve), "price_range": price_range},
    )
    return curve


__all__ = ["DEFAULT_PRICE_RANGE", "DEFAULT_STEPS", "generate_curve", "price_grid"]
