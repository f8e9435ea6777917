"""FastAPI surface for expirations, option chains and strategy curves."""

from ose.api.app import create_app

__all__ = ["create_app"]
