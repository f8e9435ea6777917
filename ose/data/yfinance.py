"""YFinance options adapter with retry and column normalization."""

from __future__ import annotations

import time
from datetime import date, datetime, timezone
from typing import Any, Callable, TypeVar

import pandas as pd

from ose.data.chain import OptionChain
from ose.exceptions import DataSourceError
from ose.utils.logging import get_logger

log = get_logger(__name__, component="yfinance")

T = TypeVar("T")

RENAME_MAP = {
    "contractsymbol": "contract_symbol",
    "lasttradedate": "last_trade_date",
    "lastprice": "last_price",
    "percentchange": "percent_change",
    "openinterest": "open_interest",
    "impliedvolatility": "implied_volatility",
    "inthemoney": "in_the_money",
    "contractsize": "contract_size",
}


def expiry_to_epoch(expiry: str | date) -> int:
    """Convert a YYYY-MM-DD expiry to epoch seconds at UTC midnight."""
    day = date.fromisoformat(expiry) if isinstance(expiry, str) else expiry
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


def epoch_to_expiry(expiration: int) -> str:
    return datetime.fromtimestamp(int(expiration), tz=timezone.utc).date().isoformat()


class YFinanceOptionsSource:
    """yfinance-backed provider for expirations and option chains."""

    name = "yfinance"

    def __init__(self, max_retries: int = 3, backoff_seconds: list[float] | None = None) -> None:
        self.max_retries = max_retries
        self.backoff_seconds = list(backoff_seconds or [1, 2, 4])
        if len(self.backoff_seconds) < self.max_retries:
            self.backoff_seconds.extend([self.backoff_seconds[-1]] * (self.max_retries - len(self.backoff_seconds)))

    def get_expirations(self, symbol: str) -> list[int]:
        if not symbol:
            raise DataSourceError("`symbol` is required")
        expiries = self._with_retries(lambda: self._expiries(symbol), symbol)
        if not expiries:
            raise DataSourceError(f"Unable to fetch expirations for {symbol}")
        return [expiry_to_epoch(expiry) for expiry in expiries]

    def get_option_chain(self, symbol: str, expiration: int) -> OptionChain:
        if not symbol or not expiration:
            raise DataSourceError("`symbol` and `expiration` are required")
        expiry = epoch_to_expiry(expiration)
        chain = self._with_retries(lambda: self._option_chain(symbol, expiry), symbol)

        calls = self._normalize_columns(getattr(chain, "calls", None))
        puts = self._normalize_columns(getattr(chain, "puts", None))
        if calls.empty and puts.empty:
            raise DataSourceError(f"No option data for {symbol} @ {expiration}")

        return OptionChain(
            symbol=symbol,
            expiration=int(expiration),
            underlying_price=self._underlying_price(getattr(chain, "underlying", None)),
            calls=calls,
            puts=puts,
        )

    def _with_retries(self, call: Callable[[], T], symbol: str) -> T:
        for attempt in range(self.max_retries):
            try:
                return call()
            except DataSourceError:
                raise
            except Exception as exc:
                log.warning(
                    "yfinance request failed",
                    extra={"symbol": symbol, "attempt": attempt + 1, "error": str(exc)},
                )
                if attempt == self.max_retries - 1:
                    raise DataSourceError(f"Failed to fetch {symbol} after retries") from exc
                time.sleep(self.backoff_seconds[attempt])
        raise DataSourceError(f"Failed to fetch {symbol}: no attempts configured")

    def _expiries(self, symbol: str) -> tuple[str, ...]:
        try:
            import yfinance as yf  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise DataSourceError("yfinance not installed") from exc

        return tuple(yf.Ticker(symbol).options)

    def _option_chain(self, symbol: str, expiry: str):
        try:
            import yfinance as yf  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise DataSourceError("yfinance not installed") from exc

        return yf.Ticker(symbol).option_chain(date=expiry)

    @staticmethod
    def _underlying_price(underlying: dict[str, Any] | None) -> float:
        # Prefer the regular market price; fall back to the previous close.
        underlying = underlying or {}
        for key in ("regularMarketPrice", "regularMarketPreviousClose"):
            value = underlying.get(key)
            if value is not None:
                return float(value)
        return 0.0

    @staticmethod
    def _normalize_columns(df: pd.DataFrame | None) -> pd.DataFrame:
        if df is None or df.empty:
            return pd.DataFrame()
        frame = df.copy()
        frame.columns = [str(col).lower() for col in frame.columns]
        return frame.rename(columns=RENAME_MAP)


__all__ = ["YFinanceOptionsSource", "epoch_to_expiry", "expiry_to_epoch"]
