"""Analyze CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ose.config.validation import validate_analyze_inputs
from ose.config.loader import load_config_with_precedence
from ose.data import DataSourceConfig
from ose.data.chain import available_strikes, closest_strike, days_to_expiration
from ose.data.factory import data_source_factory
from ose.exceptions import ConfigValidationError, DataSourceError
from ose.interfaces.option_leg import CONTRACT_MULTIPLIER
from ose.simulation.run import AnalysisResult, run_analysis
from ose.strategies.factory import build_strategy
from ose.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli.analyze")


def _format_money(value: float) -> str:
    if value == float("inf"):
        return "Unlimited"
    if value == float("-inf"):
        return "-Unlimited"
    return f"${value:,.2f}"


def _resolve_market_inputs(cfg: dict) -> dict:
    """Fill price, strike, days and a quote function from the options provider."""
    symbol = str(cfg["symbol"]).upper()
    source = data_source_factory(DataSourceConfig(max_retries=cfg["max_retries"])).create()

    expiration = cfg.get("expiration")
    if expiration is None:
        listed = source.get_expirations(symbol)
        expiration = listed[0]
    chain = source.get_option_chain(symbol, expiration)

    price = cfg.get("price") or chain.underlying_price
    if not price:
        raise DataSourceError(f"No underlying price available for {symbol}")
    strike = cfg.get("strike") or closest_strike(available_strikes(chain), price)
    log.info(
        "Resolved market inputs",
        extra={"symbol": symbol, "expiration": expiration, "price": price, "strike": strike},
    )
    return {
        "price": price,
        "strike": strike,
        "days": cfg.get("days") or days_to_expiration(expiration),
        "quote": chain.quote if cfg["live_premiums"] else None,
    }


def _write_output(result: AnalysisResult, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    suffix = output.suffix.lower()
    if suffix == ".csv":
        result.curve.to_frame().to_csv(output, index=False)
    elif suffix == ".json":
        output.write_text(json.dumps(result.to_dict(), indent=2))
    else:
        raise ConfigValidationError("output must be a .csv or .json path")


def _print_summary(result: AnalysisResult, days: int) -> None:
    stats = result.stats
    table = Table(title=f"{result.strategy.name} @ {result.current_price:,.2f}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Max profit", _format_money(stats.max_profit))
    table.add_row("Max loss", _format_money(stats.max_loss))
    table.add_row("Breakeven", ", ".join(f"{b:,.2f}" for b in stats.breakeven) or "-")
    table.add_row("Profit probability", f"{stats.profit_probability:.1f}%")
    table.add_row("Days to expiration", str(days))
    for name, value in result.spot_greeks.to_dict().items():
        table.add_row(name.title(), f"{value:,.4f}")
    console.print(table)

    legs = Table(title="Legs")
    for column in ("Action", "Type", "Strike", "Premium", "Qty"):
        legs.add_column(column)
    for leg in result.strategy.legs:
        legs.add_row(leg.action.value, leg.type.value, f"{leg.strike:,.2f}", f"{leg.premium:,.2f}", str(leg.quantity))
    console.print(legs)
    net = result.strategy.net_premium
    label = "credit" if net >= 0 else "debit"
    console.print(f"Net premium: {_format_money(abs(net) * CONTRACT_MULTIPLIER)} {label}")


def analyze(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    strategy: str | None = typer.Option(None, "--strategy", help="Template key or name (e.g., bull_call_spread)"),
    strike: float | None = typer.Option(None, help="Base strike; spreads add --width"),
    price: float | None = typer.Option(None, help="Current underlying price"),
    symbol: str | None = typer.Option(None, help="Fetch price/strikes for this ticker"),
    expiration: int | None = typer.Option(None, help="Expiration as Unix epoch seconds"),
    days: int | None = typer.Option(None, help="Days to expiration used for premium estimates"),
    width: float | None = typer.Option(None, help="Strike distance between spread legs"),
    size: int | None = typer.Option(None, help="Number of contracts per leg"),
    price_range: float | None = typer.Option(None, "--price-range", help="Half-width of the price window (fraction)"),
    live_premiums: bool | None = typer.Option(None, "--live-premiums/--no-live-premiums", help="Use chain quotes when --symbol is set"),
    max_retries: int | None = typer.Option(None, "--max-retries", help="Retries for provider calls"),
    output: Optional[Path] = typer.Option(None, "--output", help="Write the curve as .csv or the full result as .json"),
    plot: Optional[Path] = typer.Option(None, "--plot", help="Write an HTML payoff chart"),
    greek: str = typer.Option("vega", "--greek", help="Greek shown on the chart's secondary axis"),
) -> None:
    """Compute the payoff curve, Greeks and summary stats for a strategy template."""
    defaults = {
        "strategy": "long_call",
        "strike": None,
        "price": None,
        "symbol": None,
        "expiration": None,
        "days": None,
        "width": 5.0,
        "size": 1,
        "price_range": 0.15,
        "live_premiums": True,
        "max_retries": 3,
    }
    cli_values = {
        "strategy": strategy,
        "strike": strike,
        "price": price,
        "symbol": symbol,
        "expiration": expiration,
        "days": days,
        "width": width,
        "size": size,
        "price_range": price_range,
        "live_premiums": live_premiums,
        "max_retries": max_retries,
    }
    casters = {
        "strategy": str,
        "strike": float,
        "price": float,
        "symbol": str,
        "expiration": int,
        "days": int,
        "width": float,
        "size": int,
        "price_range": float,
        "live_premiums": lambda v: str(v).lower() in {"1", "true", "yes", "on"},
        "max_retries": int,
    }
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="OSE_",
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )

    quote = None
    if cfg.get("symbol"):
        market = _resolve_market_inputs(cfg)
        cfg.update({k: market[k] for k in ("price", "strike", "days")})
        quote = market["quote"]
    if cfg.get("price") is None:
        raise ConfigValidationError("price is required when no --symbol is given")
    if cfg.get("strike") is None:
        cfg["strike"] = cfg["price"]
    if cfg.get("days") is None:
        cfg["days"] = days_to_expiration(cfg.get("expiration"))

    validate_analyze_inputs(
        strike=cfg["strike"],
        price=cfg["price"],
        price_range=cfg["price_range"],
        width=cfg["width"],
        size=cfg["size"],
        days=cfg["days"],
    )

    built = build_strategy(
        cfg["strategy"],
        cfg["strike"],
        cfg["price"],
        cfg["days"],
        width=cfg["width"],
        size=cfg["size"],
        quote=quote,
    )
    log.info("Starting analysis", extra={"strategy": built.name, "symbol": cfg.get("symbol")})
    # Curve theta/vega stay on the 30-day default; spot Greeks use the resolved horizon.
    result = run_analysis(built, cfg["price"], cfg["price_range"], spot_days_to_expiration=cfg["days"])
    _print_summary(result, cfg["days"])

    if output is not None:
        _write_output(result, output)
        console.print(f"[green]Saved[/green] {output}")
    if plot is not None:
        from ose.utils.plots import plot_payoff_curve

        plot_payoff_curve(
            result.curve,
            plot,
            greek=greek,
            current_price=result.current_price,
            breakevens=result.stats.breakeven,
            title=f"{built.name} payoff",
        )
        console.print(f"[green]Saved[/green] {plot}")
