"""Strategy template catalog and lookup-by-name builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from ose.exceptions import UnknownStrategyError
from ose.interfaces.option_leg import OptionType, Strategy
from ose.strategies import templates

Sentiment = Literal["BULLISH", "BEARISH", "NEUTRAL"]
QuoteFn = Callable[[OptionType, float], Optional[float]]


@dataclass(frozen=True, slots=True)
class StrategyTemplate:
    key: str
    name: str
    sentiment: Sentiment
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "key": self.key,
            "name": self.name,
            "sentiment": self.sentiment,
            "description": self.description,
        }


_CATALOG: tuple[StrategyTemplate, ...] = (
    StrategyTemplate(
        "long_call", "Long Call", "BULLISH",
        "The simplest strategy to realize a bullish outlook on the underlying instrument price.",
    ),
    StrategyTemplate("short_call", "Short Call", "BEARISH", "Profit from a bearish outlook by selling call options."),
    StrategyTemplate("long_put", "Long Put", "BEARISH", "Profit from declining stock prices with limited risk."),
    StrategyTemplate(
        "short_put", "Short Put", "BULLISH",
        "Generate income from selling put options on stocks you're willing to own.",
    ),
    StrategyTemplate(
        "bull_call_spread", "Bull Call Spread", "BULLISH",
        "Limited risk, limited reward strategy for moderately bullish outlook.",
    ),
    StrategyTemplate(
        "bear_call_spread", "Bear Call Spread", "BEARISH",
        "Profit from neutral to bearish price movement with defined risk.",
    ),
    StrategyTemplate(
        "bear_put_spread", "Bear Put Spread", "BEARISH",
        "Lower cost alternative to buying puts with limited upside.",
    ),
    StrategyTemplate(
        "bull_put_spread", "Bull Put Spread", "BULLISH",
        "Generate income from selling put spreads in bullish markets.",
    ),
    StrategyTemplate("long_straddle", "Long Straddle", "NEUTRAL", "Profit from high volatility regardless of direction."),
    StrategyTemplate(
        "short_straddle", "Short Straddle", "NEUTRAL",
        "Profit from low volatility when price stays near strike.",
    ),
)

_BY_KEY = {template.key: template for template in _CATALOG}


def _normalize(name: str) -> str:
    return "_".join(str(name).strip().lower().replace("-", " ").replace("_", " ").split())


def list_templates() -> list[StrategyTemplate]:
    return list(_CATALOG)


def get_template(name: str) -> StrategyTemplate:
    """Resolve a template by key or display name ("bull-call-spread", "Bull Call Spread")."""
    template = _BY_KEY.get(_normalize(name))
    if template is None:
        available = ", ".join(_BY_KEY)
        raise UnknownStrategyError(f"Unknown strategy '{name}'. Available: {available}")
    return template


def _single(constructor, option_type: OptionType):
    def build(strike, width, current_price, days, quote: QuoteFn):
        return constructor(strike, current_price, days, premium=quote(option_type, strike))

    return build


def _straddle(constructor):
    def build(strike, width, current_price, days, quote: QuoteFn):
        return constructor(
            strike,
            current_price,
            days,
            call_premium=quote(OptionType.CALL, strike),
            put_premium=quote(OptionType.PUT, strike),
        )

    return build


def _bull_call(strike, width, current_price, days, quote: QuoteFn):
    upper = strike + width
    return templates.bull_call_spread(
        strike, upper, current_price, days,
        long_premium=quote(OptionType.CALL, strike),
        short_premium=quote(OptionType.CALL, upper),
    )


def _bear_call(strike, width, current_price, days, quote: QuoteFn):
    upper = strike + width
    return templates.bear_call_spread(
        strike, upper, current_price, days,
        short_premium=quote(OptionType.CALL, strike),
        long_premium=quote(OptionType.CALL, upper),
    )


def _bull_put(strike, width, current_price, days, quote: QuoteFn):
    upper = strike + width
    return templates.bull_put_spread(
        strike, upper, current_price, days,
        long_premium=quote(OptionType.PUT, strike),
        short_premium=quote(OptionType.PUT, upper),
    )


def _bear_put(strike, width, current_price, days, quote: QuoteFn):
    upper = strike + width
    return templates.bear_put_spread(
        upper, strike, current_price, days,
        long_premium=quote(OptionType.PUT, upper),
        short_premium=quote(OptionType.PUT, strike),
    )


_BUILDERS = {
    "long_call": _single(templates.long_call, OptionType.CALL),
    "short_call": _single(templates.short_call, OptionType.CALL),
    "long_put": _single(templates.long_put, OptionType.PUT),
    "short_put": _single(templates.short_put, OptionType.PUT),
    "bull_call_spread": _bull_call,
    "bear_call_spread": _bear_call,
    "bull_put_spread": _bull_put,
    "bear_put_spread": _bear_put,
    "long_straddle": _straddle(templates.long_straddle),
    "short_straddle": _straddle(templates.short_straddle),
}


def _no_quote(option_type: OptionType, strike: float) -> None:
    return None


def build_strategy(
    name: str,
    strike: float,
    current_price: float,
    days_to_expiration: float = 30,
    *,
    width: float = 5.0,
    size: int = 1,
    quote: QuoteFn | None = None,
) -> Strategy:
    """Build a template from a single base strike.

    Spreads use ``strike`` and ``strike + width``. ``quote`` supplies live
    premiums; a ``None`` answer falls back to the synthetic estimator.
    """
    template = get_template(name)
    strategy = _BUILDERS[template.key](strike, width, current_price, days_to_expiration, quote or _no_quote)
    return strategy if size == 1 else strategy.scaled(size)


__all__ = ["Sentiment", "StrategyTemplate", "build_strategy", "get_template", "list_templates"]
