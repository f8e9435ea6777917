"""CLI command listing option expirations for a symbol."""

from __future__ import annotations

import typer
from rich.console import Console

from ose.data import DataSourceConfig
from ose.data.factory import data_source_factory
from ose.data.yfinance import epoch_to_expiry
from ose.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli.expirations")


def expirations(
    symbol: str = typer.Option(..., "--symbol", help="Ticker symbol (e.g., NVDA)"),
    max_retries: int = typer.Option(3, "--max-retries", help="Retries for provider calls"),
) -> None:
    """Print available expirations as epoch seconds and ISO dates."""
    symbol = symbol.upper()
    source = data_source_factory(DataSourceConfig(max_retries=max_retries)).create()
    log.info("Fetching expirations", extra={"symbol": symbol})
    values = source.get_expirations(symbol)
    console.print(f"[bold cyan]{symbol}[/bold cyan] expirations ({len(values)})")
    for expiration in values:
        console.print(f"  {expiration}  {epoch_to_expiry(expiration)}")
