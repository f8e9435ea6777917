"""Named strategy constructors.

Each constructor returns a fixed pattern of one-contract legs. Any premium
left as ``None`` is filled by the synthetic estimator; explicit values
(including ``0.0``) are used as given.
"""

from __future__ import annotations

from ose.interfaces.option_leg import Action, OptionLeg, OptionType, Strategy
from ose.pricing.premium import estimate_premium


def _leg(
    option_type: OptionType,
    action: Action,
    strike: float,
    current_price: float,
    days_to_expiration: float,
    premium: float | None,
) -> OptionLeg:
    if premium is None:
        premium = estimate_premium(option_type, strike, current_price, days_to_expiration)
    return OptionLeg(type=option_type, action=action, strike=strike, premium=premium, quantity=1)


def long_call(strike: float, current_price: float, days_to_expiration: float = 30, premium: float | None = None) -> Strategy:
    return Strategy(
        name="Long Call",
        legs=(_leg(OptionType.CALL, Action.BUY, strike, current_price, days_to_expiration, premium),),
    )


def short_call(strike: float, current_price: float, days_to_expiration: float = 30, premium: float | None = None) -> Strategy:
    return Strategy(
        name="Short Call",
        legs=(_leg(OptionType.CALL, Action.SELL, strike, current_price, days_to_expiration, premium),),
    )


def long_put(strike: float, current_price: float, days_to_expiration: float = 30, premium: float | None = None) -> Strategy:
    return Strategy(
        name="Long Put",
        legs=(_leg(OptionType.PUT, Action.BUY, strike, current_price, days_to_expiration, premium),),
    )


def short_put(strike: float, current_price: float, days_to_expiration: float = 30, premium: float | None = None) -> Strategy:
    return Strategy(
        name="Short Put",
        legs=(_leg(OptionType.PUT, Action.SELL, strike, current_price, days_to_expiration, premium),),
    )


def bull_call_spread(
    long_strike: float,
    short_strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    long_premium: float | None = None,
    short_premium: float | None = None,
) -> Strategy:
    """Buy the lower call, sell the higher call."""
    return Strategy(
        name="Bull Call Spread",
        legs=(
            _leg(OptionType.CALL, Action.BUY, long_strike, current_price, days_to_expiration, long_premium),
            _leg(OptionType.CALL, Action.SELL, short_strike, current_price, days_to_expiration, short_premium),
        ),
    )


def bear_call_spread(
    short_strike: float,
    long_strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    short_premium: float | None = None,
    long_premium: float | None = None,
) -> Strategy:
    """Sell the lower call, buy the higher call for protection."""
    return Strategy(
        name="Bear Call Spread",
        legs=(
            _leg(OptionType.CALL, Action.SELL, short_strike, current_price, days_to_expiration, short_premium),
            _leg(OptionType.CALL, Action.BUY, long_strike, current_price, days_to_expiration, long_premium),
        ),
    )


def bull_put_spread(
    long_strike: float,
    short_strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    long_premium: float | None = None,
    short_premium: float | None = None,
) -> Strategy:
    """Sell the higher put for credit, buy the lower put for protection."""
    return Strategy(
        name="Bull Put Spread",
        legs=(
            _leg(OptionType.PUT, Action.SELL, short_strike, current_price, days_to_expiration, short_premium),
            _leg(OptionType.PUT, Action.BUY, long_strike, current_price, days_to_expiration, long_premium),
        ),
    )


def bear_put_spread(
    long_strike: float,
    short_strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    long_premium: float | None = None,
    short_premium: float | None = None,
) -> Strategy:
    """Buy the higher put, sell the lower put to cheapen it."""
    return Strategy(
        name="Bear Put Spread",
        legs=(
            _leg(OptionType.PUT, Action.BUY, long_strike, current_price, days_to_expiration, long_premium),
            _leg(OptionType.PUT, Action.SELL, short_strike, current_price, days_to_expiration, short_premium),
        ),
    )


def long_straddle(
    strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    call_premium: float | None = None,
    put_premium: float | None = None,
) -> Strategy:
    return Strategy(
        name="Long Straddle",
        legs=(
            _leg(OptionType.CALL, Action.BUY, strike, current_price, days_to_expiration, call_premium),
            _leg(OptionType.PUT, Action.BUY, strike, current_price, days_to_expiration, put_premium),
        ),
    )


def short_straddle(
    strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    call_premium: float | None = None,
    put_premium: float | None = None,
) -> Strategy:
    return Strategy(
        name="Short Straddle",
        legs=(
            _leg(OptionType.CALL, Action.SELL, strike, current_price, days_to_expiration, call_premium),
            _leg(OptionType.PUT, Action.SELL, strike, current_price, days_to_expiration, put_premium),
        ),
    )


__all__ = [
    "bear_call_spread",
    "bear_put_spread",
    "bull_call_spread",
    "bull_put_spread",
    "long_call",
    "long_put",
    "long_straddle",
    "short_call",
    "short_put",
    "short_straddle",
]
