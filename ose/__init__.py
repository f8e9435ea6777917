"""Option strategy payoff and Greeks engine.

The pure analytics core lives in ``ose.pricing``, ``ose.strategies`` and
``ose.simulation``. Market data (``ose.data``), the CLI (``ose.cli``) and the
HTTP API (``ose.api``) sit around it and only pass plain numbers in.
"""

from ose.interfaces.option_leg import Action, OptionLeg, OptionType, Strategy
from ose.models.curve import Curve, CurvePoint, StrategyStats
from ose.pricing.greeks import Greeks, strategy_greeks
from ose.pricing.payoff import leg_payoff, strategy_payoff
from ose.pricing.premium import estimate_premium
from ose.simulation.curve import generate_curve
from ose.simulation.run import AnalysisResult, run_analysis
from ose.simulation.stats import extract_stats
from ose.strategies.factory import build_strategy, get_template, list_templates

__version__ = "0.1.0"

__all__ = [
    "Action",
    "AnalysisResult",
    "Curve",
    "CurvePoint",
    "Greeks",
    "OptionLeg",
    "OptionType",
    "Strategy",
    "StrategyStats",
    "build_strategy",
    "estimate_premium",
    "extract_stats",
    "generate_curve",
    "get_template",
    "leg_payoff",
    "list_templates",
    "run_analysis",
    "strategy_greeks",
    "strategy_payoff",
]
