"""Payoff curve and summary statistics data model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np
import pandas as pd

CURVE_COLUMNS = ("price", "payoff", "delta", "gamma", "theta", "vega")


@dataclass(frozen=True, slots=True)
class CurvePoint:
    price: float
    payoff: float
    delta: float
    gamma: float
    theta: float
    vega: float

    def to_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in CURVE_COLUMNS}


@dataclass(frozen=True)
class Curve:
    """Ordered samples of payoff and Greeks, ascending by price."""

    points: tuple[CurvePoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[CurvePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> CurvePoint:
        return self.points[index]

    def column(self, name: str) -> np.ndarray:
        if name not in CURVE_COLUMNS:
            raise KeyError(f"Unknown curve column: {name}")
        return np.array([getattr(point, name) for point in self.points], dtype=float)

    @property
    def prices(self) -> np.ndarray:
        return self.column("price")

    @property
    def payoffs(self) -> np.ndarray:
        return self.column("payoff")

    def to_records(self) -> list[dict[str, float]]:
        return [point.to_dict() for point in self.points]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_records(), columns=list(CURVE_COLUMNS))

    @classmethod
    def from_columns(cls, **columns: np.ndarray) -> "Curve":
        arrays = [np.asarray(columns[name], dtype=float) for name in CURVE_COLUMNS]
        return cls(
            points=tuple(
                CurvePoint(*(float(value) for value in row)) for row in zip(*arrays)
            )
        )


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


@dataclass(frozen=True, slots=True)
class StrategyStats:
    """Summary derived from a sampled curve.

    ``max_profit``/``max_loss`` may be infinite only for an empty curve;
    ``profit_probability`` is a percentage in [0, 100].
    """

    max_profit: float
    max_loss: float
    breakeven: tuple[float, ...]
    profit_probability: float

    def to_dict(self, *, json_safe: bool = False) -> dict:
        if json_safe:
            return {
                "max_profit": _finite_or_none(self.max_profit),
                "max_loss": _finite_or_none(self.max_loss),
                "breakeven": list(self.breakeven),
                "profit_probability": _finite_or_none(self.profit_probability),
            }
        return {
            "max_profit": self.max_profit,
            "max_loss": self.max_loss,
            "breakeven": list(self.breakeven),
            "profit_probability": self.profit_probability,
        }


__all__ = ["CURVE_COLUMNS", "Curve", "CurvePoint", "StrategyStats"]
