"""Strategy analysis orchestration: curve generation followed by stats extraction."""

from __future__ import annotations

from dataclasses import dataclass

from ose.interfaces.option_leg import Strategy
from ose.models.curve import Curve, StrategyStats
from ose.pricing.greeks import DEFAULT_DAYS_TO_EXPIRATION, Greeks, strategy_greeks
from ose.simulation.curve import DEFAULT_PRICE_RANGE, DEFAULT_STEPS, generate_curve
from ose.simulation.stats import extract_stats


@dataclass(frozen=True)
class AnalysisResult:
    strategy: Strategy
    current_price: float
    curve: Curve
    stats: StrategyStats
    spot_greeks: Greeks

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.to_dict(),
            "current_price": self.current_price,
            "curve": self.curve.to_records(),
            "stats": self.stats.to_dict(json_safe=True),
            "greeks": self.spot_greeks.to_dict(),
        }


def run_analysis(
    strategy: Strategy,
    current_price: float,
    price_range: float = DEFAULT_PRICE_RANGE,
    *,
    steps: int = DEFAULT_STEPS,
    days_to_expiration: float = DEFAULT_DAYS_TO_EXPIRATION,
    spot_days_to_expiration: float | None = None,
) -> AnalysisResult:
    """
    Generate the payoff curve for ``strategy`` and summarize it.

    Args:
        strategy: Legs to analyze
        current_price: Reference spot; centres the price window and scales the Greeks
        price_range: Half-width of the window as a fraction of ``current_price``
        steps: Number of intervals (``steps + 1`` samples)
        days_to_expiration: Horizon used for theta and vega along the curve
        spot_days_to_expiration: Horizon for the Greeks at spot; defaults to
            ``days_to_expiration``

    Returns:
        AnalysisResult with the curve, its stats and the Greeks at spot
    """
    spot_days = days_to_expiration if spot_days_to_expiration is None else spot_days_to_expiration
    curve = generate_curve(
        strategy,
        current_price,
        price_range,
        steps=steps,
        days_to_expiration=days_to_expiration,
    )
    return AnalysisResult(
        strategy=strategy,
        current_price=current_price,
        curve=curve,
        stats=extract_stats(curve),
        spot_greeks=strategy_greeks(strategy, current_price, current_price, spot_days),
    )


__all__ = ["AnalysisResult", "run_analysis"]
