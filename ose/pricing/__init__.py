"""Payoff engine, Greeks approximator and premium estimator."""

from ose.pricing.greeks import Greeks, delta, gamma, strategy_greeks, theta, vega
from ose.pricing.payoff import intrinsic_value, leg_payoff, strategy_payoff
from ose.pricing.premium import MIN_PREMIUM, estimate_premium

__all__ = [
    "Greeks",
    "MIN_PREMIUM",
    "delta",
    "estimate_premium",
    "gamma",
    "intrinsic_value",
    "leg_payoff",
    "strategy_greeks",
    "strategy_payoff",
    "theta",
    "vega",
]
