"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from ose.cli.commands.analyze import analyze
from ose.cli.commands.expirations import expirations
from ose.cli.commands.serve import serve
from ose.cli.commands.templates import templates
from ose.exceptions import ConfigValidationError, DataSourceError, DependencyError, SchemaError
from ose.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Option Strategy Engine CLI")


app.command()(templates)
app.command()(expirations)
app.command()(analyze)
app.command()(serve)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except (ConfigValidationError, SchemaError) as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except DataSourceError as exc:
        log.error(f"Market data unavailable: {exc}")
        raise SystemExit(2)
    except DependencyError as exc:
        log.error(f"Missing dependency: {exc}")
        raise SystemExit(3)
    except KeyboardInterrupt:
        log.info("Shutdown requested")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    # Use sys.exit to ensure proper exit code propagation under raw python invocation
    sys.exit(main())
