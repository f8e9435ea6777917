"""Option leg and strategy value types.

Harmonizes single-leg positions (long call, short put, ...) and multi-leg
structures (spreads, straddles) behind one representation consumed by the
payoff engine, the Greeks approximator and the curve generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator

from ose.exceptions import SchemaError

CONTRACT_MULTIPLIER = 100  # One contract covers 100 underlying units


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


class Action(str, Enum):
    """Buy opens a long position, sell opens a short one."""

    BUY = "buy"
    SELL = "sell"

    @property
    def sign(self) -> int:
        return 1 if self is Action.BUY else -1


def _coerce(enum_cls, value, field_name: str):
    try:
        return enum_cls(str(getattr(value, "value", value)).lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise SchemaError(f"{field_name} must be one of: {allowed}") from exc


@dataclass(frozen=True, slots=True)
class OptionLeg:
    """Single option position within a strategy.

    Quantity is always positive; direction lives in ``action``. Strike
    positivity is checked by the CLI/API boundary, not here, so degenerate
    strikes still flow through the numeric core.
    """

    type: OptionType
    action: Action
    strike: float
    premium: float  # Per underlying unit, before the contract multiplier
    quantity: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", _coerce(OptionType, self.type, "type"))
        object.__setattr__(self, "action", _coerce(Action, self.action, "action"))
        object.__setattr__(self, "strike", float(self.strike))
        object.__setattr__(self, "premium", float(self.premium))
        if self.premium < 0:
            raise SchemaError("premium must be >= 0")
        if int(self.quantity) != self.quantity or self.quantity < 1:
            raise SchemaError("quantity must be a positive integer")
        object.__setattr__(self, "quantity", int(self.quantity))

    @property
    def is_call(self) -> bool:
        return self.type is OptionType.CALL

    @property
    def sign(self) -> int:
        """Return +1 for long legs and -1 for short legs."""
        return self.action.sign

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "action": self.action.value,
            "strike": self.strike,
            "premium": self.premium,
            "quantity": self.quantity,
        }


@dataclass(frozen=True, slots=True)
class Strategy:
    """Named, ordered collection of legs. Leg order never affects results."""

    name: str
    legs: tuple[OptionLeg, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        legs = tuple(self.legs)
        for leg in legs:
            if not isinstance(leg, OptionLeg):
                raise SchemaError("legs must contain OptionLeg values")
        object.__setattr__(self, "legs", legs)

    def __iter__(self) -> Iterator[OptionLeg]:
        return iter(self.legs)

    def __len__(self) -> int:
        return len(self.legs)

    @property
    def net_premium(self) -> float:
        """Net credit (positive) or debit (negative) per underlying unit."""
        return sum(-leg.sign * leg.premium * leg.quantity for leg in self.legs)

    def scaled(self, size: int) -> "Strategy":
        """Return a copy with every leg's quantity multiplied by ``size``."""
        if int(size) != size or size < 1:
            raise SchemaError("size must be a positive integer")
        return Strategy(
            name=self.name,
            legs=tuple(replace(leg, quantity=leg.quantity * int(size)) for leg in self.legs),
        )

    def to_dict(self) -> dict:
        return {"name": self.name, "legs": [leg.to_dict() for leg in self.legs]}


__all__ = ["Action", "CONTRACT_MULTIPLIER", "OptionLeg", "OptionType", "Strategy"]
