"""Strategy factory: named constructors and the template catalog."""

from ose.strategies.factory import StrategyTemplate, build_strategy, get_template, list_templates
from ose.strategies.templates import (
    bear_call_spread,
    bear_put_spread,
    bull_call_spread,
    bull_put_spread,
    long_call,
    long_put,
    long_straddle,
    short_call,
    short_put,
    short_straddle,
)

__all__ = [
    "StrategyTemplate",
    "bear_call_spread",
    "bear_put_spread",
    "build_strategy",
    "bull_call_spread",
    "bull_put_spread",
    "get_template",
    "list_templates",
    "long_call",
    "long_put",
    "long_straddle",
    "short_call",
    "short_put",
    "short_straddle",
]
