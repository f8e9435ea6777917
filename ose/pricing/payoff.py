"""Expiration payoff for option legs and strategies."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ose.interfaces.option_leg import CONTRACT_MULTIPLIER, OptionLeg, OptionType, Strategy


def intrinsic_value(option_type: OptionType, strike: float, underlying_price: ArrayLike):
    """Exercise value ignoring premium: max(0, S-K) for calls, max(0, K-S) for puts."""
    price = np.asarray(underlying_price, dtype=float)
    if OptionType(option_type) is OptionType.CALL:
        return np.maximum(0.0, price - strike)
    return np.maximum(0.0, strike - price)


def leg_payoff(leg: OptionLeg, underlying_price: ArrayLike):
    """Return the leg's P&L at expiration for one price or an array of prices.

    Long legs earn intrinsic value and pay premium; short legs the reverse.
    The result is per contract (multiplied by quantity and 100).
    """
    intrinsic = intrinsic_value(leg.type, leg.strike, underlying_price)
    return (intrinsic * leg.sign - leg.premium * leg.sign) * leg.quantity * CONTRACT_MULTIPLIER


def strategy_payoff(strategy: Strategy, underlying_price: ArrayLike):
    """Sum of leg payoffs; an empty strategy pays zero everywhere."""
    total = np.zeros_like(np.asarray(underlying_price, dtype=float))
    for leg in strategy.legs:
        total = total + leg_payoff(leg, underlying_price)
    return total[()] if total.ndim == 0 else total


__all__ = ["intrinsic_value", "leg_payoff", "strategy_payoff"]
