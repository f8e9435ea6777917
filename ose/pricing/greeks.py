"""Heuristic Greek curves for charting.

These are not derivatives of a pricing model. Each Greek is a closed-form
curve (sigmoid, Gaussian bump) chosen to have the right sign, peak location
and decay. Every function accepts a scalar price or an array of prices, and
evaluates with IEEE float semantics: a zero ``current_price`` gives inf/nan
rather than raising.

Per-leg values are signed by action (+1 buy, -1 sell) and scaled by quantity;
strategy values are the sum over legs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from ose.interfaces.option_leg import OptionLeg, Strategy

DEFAULT_DAYS_TO_EXPIRATION = 30

DELTA_SCALE = 0.1  # Sigmoid width as a fraction of current price
GAMMA_PEAK = 0.02
THETA_DAILY_DECAY = 0.03  # 3% of premium per day at the money
VEGA_PREMIUM_SHARE = 0.15  # 15% of premium per vol point at the money


@dataclass(frozen=True, slots=True)
class Greeks:
    """Option Greeks bundle."""

    delta: float
    gamma: float
    theta: float
    vega: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def _as_float(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _time_effect(days_to_expiration: float) -> np.ndarray:
    return np.sqrt(_as_float(days_to_expiration) / 30.0)


def leg_delta(leg: OptionLeg, price: ArrayLike, current_price: float):
    """Logistic delta in (0, 1) for calls and (-1, 0) for puts, before sign."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x = (_as_float(price) - leg.strike) / (_as_float(current_price) * DELTA_SCALE)
        if leg.is_call:
            raw = 1.0 / (1.0 + np.exp(-x))
        else:
            raw = -1.0 / (1.0 + np.exp(x))
        return raw * leg.sign * leg.quantity


def leg_gamma(leg: OptionLeg, price: ArrayLike, current_price: float):
    """Gaussian bump centred on the strike, identical for calls and puts."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        distance = np.abs(_as_float(price) - leg.strike) / (_as_float(current_price) * DELTA_SCALE)
        raw = np.exp(-(distance**2)) * GAMMA_PEAK
        return raw * leg.sign * leg.quantity


def leg_theta(
    leg: OptionLeg,
    price: ArrayLike,
    current_price: float,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
):
    """Time decay: negative for long legs, positive for short legs."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        moneyness = np.abs(_as_float(price) - leg.strike) / _as_float(current_price)
        atm_factor = np.exp(-(moneyness**2) * 2)
        base = -leg.premium * THETA_DAILY_DECAY * atm_factor * _time_effect(days_to_expiration)
        return base * leg.sign * leg.quantity


def leg_vega(
    leg: OptionLeg,
    price: ArrayLike,
    current_price: float,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
):
    """Volatility sensitivity with a steeper at-the-money falloff than theta."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        moneyness = np.abs(_as_float(price) - leg.strike) / _as_float(current_price)
        atm_factor = np.exp(-(moneyness**2) * 3)
        base = leg.premium * VEGA_PREMIUM_SHARE * atm_factor * _time_effect(days_to_expiration)
        return base * leg.sign * leg.quantity


def _aggregate(per_leg: Callable, strategy: Strategy, price: ArrayLike, *args):
    total = np.zeros_like(_as_float(price))
    for leg in strategy.legs:
        total = total + per_leg(leg, price, *args)
    return total[()] if np.ndim(total) == 0 else total


def delta(strategy: Strategy, price: ArrayLike, current_price: float):
    return _aggregate(leg_delta, strategy, price, current_price)


def gamma(strategy: Strategy, price: ArrayLike, current_price: float):
    return _aggregate(leg_gamma, strategy, price, current_price)


def theta(
    strategy: Strategy,
    price: ArrayLike,
    current_price: float,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
):
    return _aggregate(leg_theta, strategy, price, current_price, days_to_expiration)


def vega(
    strategy: Strategy,
    price: ArrayLike,
    current_price: float,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
):
    return _aggregate(leg_vega, strategy, price, current_price, days_to_expiration)


def strategy_greeks(
    strategy: Strategy,
    price: float,
    current_price: float,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
) -> Greeks:
    """Evaluate all four Greeks at a single price."""
    return Greeks(
        delta=float(delta(strategy, price, current_price)),
        gamma=float(gamma(strategy, price, current_price)),
        theta=float(theta(strategy, price, current_price, days_to_expiration)),
        vega=float(vega(strategy, price, current_price, days_to_expiration)),
    )


__all__ = [
    "DEFAULT_DAYS_TO_EXPIRATION",
    "Greeks",
    "delta",
    "gamma",
    "leg_delta",
    "leg_gamma",
    "leg_theta",
    "leg_vega",
    "strategy_greeks",
    "theta",
    "vega",
]
