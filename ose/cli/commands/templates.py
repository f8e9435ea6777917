"""List the strategy template catalog."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from ose.strategies.factory import list_templates

console = Console()

SENTIMENT_STYLE = {"BULLISH": "green", "BEARISH": "red", "NEUTRAL": "white"}


def templates(as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table")) -> None:
    """Show every strategy template with its market outlook."""
    catalog = list_templates()
    if as_json:
        typer.echo(json.dumps([template.to_dict() for template in catalog], indent=2))
        return

    table = Table(title="Strategy Templates")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Sentiment")
    table.add_column("Description")
    for template in catalog:
        style = SENTIMENT_STYLE[template.sentiment]
        table.add_row(template.key, template.name, f"[{style}]{template.sentiment}[/{style}]", template.description)
    console.print(table)
