"""Read-only HTTP API over the market-data collaborator and the analytics core.

Routes:
    GET /api/expirations/{symbol}        expirations as Unix epoch seconds
    GET /api/options/{symbol}/{exp}      calls/puts chain plus underlying price
    GET /api/templates                   strategy template catalog
    GET /api/strategies/{name}           payoff curve and stats for a template
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from ose.config.validation import validate_analyze_inputs
from ose.data import DataSourceConfig, OptionsDataSource
from ose.data.factory import data_source_factory
from ose.exceptions import ConfigValidationError, DataSourceError, UnknownStrategyError
from ose.simulation.run import run_analysis
from ose.strategies.factory import build_strategy, list_templates
from ose.utils.logging import get_logger

log = get_logger(__name__, component="api")

EXPIRATIONS_CACHE = "s-maxage=1800, stale-while-revalidate"
CHAIN_CACHE = "s-maxage=900, stale-while-revalidate"

router = APIRouter(prefix="/api")


def get_source(request: Request) -> OptionsDataSource:
    return request.app.state.data_source


@router.get("/expirations/{symbol}")
def expirations(symbol: str, source: OptionsDataSource = Depends(get_source)) -> JSONResponse:
    values = source.get_expirations(symbol)
    return JSONResponse(values, headers={"Cache-Control": EXPIRATIONS_CACHE})


@router.get("/options/{symbol}/{exp}")
def option_chain(symbol: str, exp: str, source: OptionsDataSource = Depends(get_source)) -> JSONResponse:
    try:
        expiration = int(exp)
    except ValueError:
        return JSONResponse({"error": "`exp` must be a unix timestamp (seconds)"}, status_code=400)

    chain = source.get_option_chain(symbol.upper(), expiration)
    return JSONResponse(chain.to_dict(), headers={"Cache-Control": CHAIN_CACHE})


@router.get("/templates")
def templates() -> list[dict[str, str]]:
    return [template.to_dict() for template in list_templates()]


@router.get("/strategies/{name}")
def strategy_curve(
    name: str,
    strike: float = Query(..., description="Base strike; spreads add width"),
    price: float = Query(..., description="Current underlying price"),
    days: int = Query(30, description="Days to expiration for premium estimates"),
    width: float = Query(5.0),
    size: int = Query(1),
    price_range: float = Query(0.15),
) -> dict:
    validate_analyze_inputs(strike=strike, price=price, price_range=price_range, width=width, size=size, days=days)
    strategy = build_strategy(name, strike, price, days, width=width, size=size)
    result = run_analysis(strategy, price, price_range, spot_days_to_expiration=days)
    return result.to_dict()


def register_error_handlers(app: FastAPI) -> None:
    """Map engine exceptions to ``{"error": message}`` responses."""

    @app.exception_handler(DataSourceError)
    async def data_source_error(request: Request, exc: DataSourceError) -> JSONResponse:
        log.error("Market data request failed", extra={"path": str(request.url.path), "error": str(exc)})
        return JSONResponse({"error": str(exc)}, status_code=500)

    @app.exception_handler(UnknownStrategyError)
    async def unknown_strategy(request: Request, exc: UnknownStrategyError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=404)

    @app.exception_handler(ConfigValidationError)
    async def invalid_request(request: Request, exc: ConfigValidationError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=400)


def create_app(data_source: OptionsDataSource | None = None) -> FastAPI:
    app = FastAPI(title="Option Strategy Engine", version="0.1.0")
    app.state.data_source = data_source or data_source_factory(DataSourceConfig()).create()
    register_error_handlers(app)
    app.include_router(router)
    return app


__all__ = ["create_app", "register_error_handlers", "router"]
