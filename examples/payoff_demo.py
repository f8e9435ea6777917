"""Walk through every strategy template at one strike.

This script demonstrates:
1. Building templates with estimated premiums (no market data needed)
2. Sampling payoff and Greeks over a +/-15% price window
3. Reading max profit/loss, breakevens and profit probability
4. Optionally writing an HTML chart for one strategy
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from ose.simulation.run import run_analysis
from ose.strategies.factory import build_strategy, list_templates

console = Console()


def _money(value: float) -> str:
    return f"${value:,.0f}"


def run_payoff_demo(current_price: float = 100.0, strike: float = 100.0, days: int = 30) -> None:
    """Analyze each template and print a comparison table."""

    table = Table(title=f"Templates @ spot {current_price:,.2f}, strike {strike:,.2f}, {days}d")
    for column in ("Strategy", "Outlook", "Max profit", "Max loss", "Breakeven", "P(profit)", "Theta @ spot"):
        table.add_column(column)

    for template in list_templates():
        strategy = build_strategy(template.key, strike, current_price, days)
        result = run_analysis(strategy, current_price, days_to_expiration=days)
        stats = result.stats
        table.add_row(
            template.name,
            template.sentiment,
            _money(stats.max_profit),
            _money(stats.max_loss),
            ", ".join(f"{b:.2f}" for b in stats.breakeven) or "-",
            f"{stats.profit_probability:.1f}%",
            f"{result.spot_greeks.theta:.3f}",
        )

    console.print(table)


def write_straddle_chart(output: Path = Path("output/long_straddle.html")) -> None:
    from ose.utils.plots import plot_payoff_curve

    result = run_analysis(build_strategy("long_straddle", 100.0, 100.0), 100.0)
    plot_payoff_curve(
        result.curve,
        output,
        greek="gamma",
        current_price=100.0,
        breakevens=result.stats.breakeven,
        title="Long Straddle payoff",
    )
    console.print(f"Chart written to {output}")


if __name__ == "__main__":
    run_payoff_demo()
    write_straddle_chart()
