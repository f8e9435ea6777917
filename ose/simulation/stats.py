"""Summary statistics extracted from a sampled payoff curve."""

from __future__ import annotations

import math

from ose.models.curve import Curve, StrategyStats


def find_breakevens(prices, payoffs) -> list[float]:
    """Linearly interpolate every zero crossing between consecutive samples.

    A sample is "profitable" only when payoff > 0; an exact zero counts as
    non-positive, so a crossing is reported whenever that partition flips.
    """
    breakevens: list[float] = []
    for i in range(1, len(payoffs)):
        prev_payoff, curr_payoff = payoffs[i - 1], payoffs[i]
        if (prev_payoff <= 0 < curr_payoff) or (curr_payoff <= 0 < prev_payoff):
            ratio = abs(prev_payoff) / (abs(prev_payoff) + abs(curr_payoff))
            breakevens.append(float(prices[i - 1] + ratio * (prices[i] - prices[i - 1])))
    return breakevens


def extract_stats(curve: Curve) -> StrategyStats:
    payoffs = [point.payoff for point in curve]
    prices = [point.price for point in curve]

    max_profit = max(payoffs, default=-math.inf)
    max_loss = min(payoffs, default=math.inf)
    profitable = sum(1 for payoff in payoffs if payoff > 0)
    profit_probability = 100.0 * profitable / len(payoffs) if payoffs else math.nan

    return StrategyStats(
        max_profit=math.inf if max_profit == -math.inf else float(max_profit),
        max_loss=-math.inf if max_loss == math.inf else float(max_loss),
        breakeven=tuple(find_breakevens(prices, payoffs)),
        profit_probability=profit_probability,
    )


__all__ = ["extract_stats", "find_breakevens"]
