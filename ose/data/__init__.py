"""Market-data collaborator interfaces and configuration.

Providers return plain values (epoch seconds, an ``OptionChain``) so that the
analytics core only ever sees a scalar spot price and a list of strikes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ose.data.chain import OptionChain


@dataclass(slots=True)
class DataSourceConfig:
    """Configuration block for selecting and tuning the options data provider."""

    name: str = "yfinance"
    max_retries: int = 3
    backoff_seconds: tuple[float, ...] = (1, 2, 4)


@runtime_checkable
class OptionsDataSource(Protocol):
    """Minimal interface implemented by option-chain providers."""

    name: str

    def get_expirations(self, symbol: str) -> list[int]:
        """Return available expirations as Unix epoch seconds."""

    def get_option_chain(self, symbol: str, expiration: int) -> OptionChain:
        """Return calls/puts and the underlying price for one expiration."""


__all__ = ["DataSourceConfig", "OptionChain", "OptionsDataSource"]
