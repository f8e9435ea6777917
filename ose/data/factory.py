"""Factory for options data sources."""

from __future__ import annotations

from ose.config.factories import FactoryBase
from ose.data import DataSourceConfig
from ose.data.yfinance import YFinanceOptionsSource
from ose.exceptions import DependencyError

_SOURCES = {
    "yfinance": YFinanceOptionsSource,
    "yahoo": YFinanceOptionsSource,
}


def get_data_source(name: str = "yfinance", **kwargs):
    source_cls = _SOURCES.get(name.lower())
    if source_cls is None:
        raise DependencyError(f"Unknown data source: {name}")
    allowed = {k: v for k, v in kwargs.items() if k in {"max_retries", "backoff_seconds"}}
    return source_cls(**allowed)


def data_source_factory(config: DataSourceConfig | None = None) -> FactoryBase:
    cfg = config or DataSourceConfig()
    return FactoryBase(
        name=cfg.name.lower(),
        builder=lambda: get_data_source(
            cfg.name, max_retries=cfg.max_retries, backoff_seconds=list(cfg.backoff_seconds)
        ),
    )


__all__ = ["data_source_factory", "get_data_source"]
