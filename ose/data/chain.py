"""Option chain snapshot and the strike/expiry helpers used to drive analysis."""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pandas as pd

from ose.interfaces.option_leg import OptionType

SECONDS_PER_DAY = 60 * 60 * 24
DEFAULT_DAYS_TO_EXPIRATION = 30


def _records(frame: pd.DataFrame) -> list[dict]:
    if frame is None or frame.empty:
        return []
    return json.loads(frame.to_json(orient="records", date_format="iso"))


@dataclass
class OptionChain:
    """Calls and puts for a single expiration plus the underlying reference price."""

    symbol: str
    expiration: int
    underlying_price: float
    calls: pd.DataFrame = field(default_factory=pd.DataFrame)
    puts: pd.DataFrame = field(default_factory=pd.DataFrame)

    def rows(self, option_type: OptionType | str) -> pd.DataFrame:
        return self.calls if OptionType(option_type) is OptionType.CALL else self.puts

    def quote(self, option_type: OptionType | str, strike: float) -> float | None:
        """Mid of a positive bid/ask, else the last traded price, else ``None``."""
        frame = self.rows(option_type)
        if frame.empty or "strike" not in frame.columns:
            return None
        matches = frame[frame["strike"].astype(float) == float(strike)]
        if matches.empty:
            return None
        row = matches.iloc[0]
        bid, ask = row.get("bid"), row.get("ask")
        if pd.notna(bid) and pd.notna(ask) and bid > 0 and ask > 0:
            return float((bid + ask) / 2)
        last = row.get("last_price")
        if pd.notna(last) and last > 0:
            return float(last)
        return None

    def to_dict(self) -> dict:
        return {
            "underlying_price": self.underlying_price,
            "calls": _records(self.calls),
            "puts": _records(self.puts),
        }


def available_strikes(chain: OptionChain) -> list[float]:
    """Unique call strikes in ascending order."""
    if chain.calls.empty or "strike" not in chain.calls.columns:
        return []
    strikes = pd.to_numeric(chain.calls["strike"], errors="coerce").dropna()
    return sorted({float(strike) for strike in strikes})


def closest_strike(strikes: Sequence[float] | Iterable[float], price: float) -> float | None:
    """Strike nearest to ``price``; the first one wins on ties."""
    best: float | None = None
    for strike in strikes:
        if best is None or abs(strike - price) < abs(best - price):
            best = strike
    return best


def days_to_expiration(expiration: int | None, now: float | None = None) -> int:
    """Whole days until ``expiration`` (epoch seconds), rounded up, at least 1.

    Without an expiration the 30-day default applies.
    """
    if expiration is None:
        return DEFAULT_DAYS_TO_EXPIRATION
    current = time.time() if now is None else now
    return max(1, math.ceil(abs(expiration - current) / SECONDS_PER_DAY))


__all__ = [
    "OptionChain",
    "available_strikes",
    "closest_strike",
    "days_to_expiration",
]
