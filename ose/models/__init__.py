"""Curve and statistics value types produced by the simulation layer."""

from ose.models.curve import Curve, CurvePoint, StrategyStats

__all__ = ["Curve", "CurvePoint", "StrategyStats"]
