"""Curve generation, statistics extraction and analysis orchestration."""

from ose.simulation.curve import generate_curve, price_grid
from ose.simulation.run import AnalysisResult, run_analysis
from ose.simulation.stats import extract_stats, find_breakevens

__all__ = ["AnalysisResult", "extract_stats", "find_breakevens", "generate_curve", "price_grid", "run_analysis"]
