"""Synthetic premium used when no market quote is available.

Intrinsic value plus a heuristic time value: an at-the-money amount scaled by
a fixed 25% volatility and sqrt(time), decaying as a Gaussian in moneyness.
The result is floored at 0.05 to stand in for a minimum bid-ask spread.
"""

from __future__ import annotations

import numpy as np

from ose.interfaces.option_leg import OptionType
from ose.pricing.payoff import intrinsic_value

ASSUMED_VOLATILITY = 0.25
TIME_VALUE_SCALE = 0.4
MONEYNESS_DECAY = 5.0
MIN_PREMIUM = 0.05


def time_value(strike: float, current_price: float, days_to_expiration: float = 30) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        spot = np.float64(current_price)
        moneyness = np.abs(spot - strike) / spot
        atm_time_value = spot * ASSUMED_VOLATILITY * np.sqrt(np.float64(days_to_expiration) / 365.0) * TIME_VALUE_SCALE
        return float(atm_time_value * np.exp(-((moneyness * MONEYNESS_DECAY) ** 2)))


def estimate_premium(
    option_type: OptionType | str,
    strike: float,
    current_price: float,
    days_to_expiration: float = 30,
) -> float:
    """Return a synthetic per-unit premium, never below ``MIN_PREMIUM`` (NaN propagates)."""
    intrinsic = float(intrinsic_value(OptionType(option_type), strike, current_price))
    return float(np.maximum(MIN_PREMIUM, intrinsic + time_value(strike, current_price, days_to_expiration)))


__all__ = ["MIN_PREMIUM", "estimate_premium", "time_value"]
