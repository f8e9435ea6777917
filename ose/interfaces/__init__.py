"""Shared value types for legs and strategies."""

from ose.interfaces.option_leg import CONTRACT_MULTIPLIER, Action, OptionLeg, OptionType, Strategy

__all__ = ["Action", "CONTRACT_MULTIPLIER", "OptionLeg", "OptionType", "Strategy"]
