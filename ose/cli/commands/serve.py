"""Run the read-only HTTP API."""

from __future__ import annotations

import typer

from ose.utils.logging import get_logger

log = get_logger(__name__, component="cli.serve")


def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Serve expirations, option chains and strategy curves over HTTP."""
    import uvicorn

    from ose.api.app import create_app

    log.info("Starting API server", extra={"host": host, "port": port})
    uvicorn.run(create_app(), host=host, port=port)
