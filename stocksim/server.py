"""
HTTP boundary for the engine.

Every success is wrapped as ``{"status": "success", "data": ...}`` and every
failure as ``{"status": "error", "error": <message>}`` with HTTP 400.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from .engine import (
    PathSimulationRequest,
    price_option_black_scholes,
    price_option_monte_carlo,
    simulate_etf,
    simulate_futures,
    simulate_stock,
)
from .errors import StockSimError
from .etf import EtfConstituent, EtfDefinition
from .futures import FuturesContract
from .gbm import PricePath
from .models import GlobalConfig
from .options import MonteCarloSpec, OptionContract, OptionType, PricingResult
from .resolver import AssetModelResolver

logger = logging.getLogger(__name__)


# --- Request bodies ---


class OptionRequest(BaseModel):
    underlying_price: float
    strike_price: float
    time_to_maturity_years: float
    risk_free_rate: float
    volatility: float
    option_type: str


class MonteCarloRequest(BaseModel):
    initial_price: float = Field(
        validation_alias=AliasChoices("initial_price", "underlying_initial_price")
    )
    strike_price: float
    time_to_maturity_years: float
    risk_free_rate: float
    volatility: float = Field(
        validation_alias=AliasChoices("volatility", "underlying_volatility")
    )
    option_type: str
    num_paths: int
    num_steps_per_path: int
    seed: Optional[int] = None


class FuturesRequest(BaseModel):
    symbol: str = Field(validation_alias=AliasChoices("symbol", "underlying_symbol"))
    initial_spot_price: float
    risk_free_rate: float
    volatility: float
    time_to_maturity_in_days: int = Field(
        validation_alias=AliasChoices("time_to_maturity_in_days", "time_to_maturity_days")
    )
    time_step_in_days: int = Field(
        validation_alias=AliasChoices("time_step_in_days", "time_step_days")
    )
    seed: Optional[int] = None
    drift: Optional[float] = None


class ConstituentRequest(BaseModel):
    symbol: str
    initial_price: float
    drift: float
    volatility: float
    weight: float


class EtfRequest(BaseModel):
    constituents: List[ConstituentRequest]
    simulation_days: int
    time_step_in_days: int = Field(
        validation_alias=AliasChoices("time_step_in_days", "time_step_days")
    )
    seed: Optional[int] = None
    symbol: str = "SIMULATED_ETF"


# --- Envelope helpers ---


def success_response(data: dict) -> dict:
    return {"status": "success", "data": data}


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"status": "error", "error": message}
    )


def _option_data(result: PricingResult) -> dict:
    return {
        "underlying_symbol": "N/A",
        "option_type": result.option_type.value,
        "strike_price": result.strike_price,
        "maturity_date": "N/A (calculated from TTM)",
        "price": result.price,
    }


def _series(path: PricePath) -> dict:
    return {
        "timestamps": path.formatted_timestamps(),
        "prices": path.prices.tolist(),
    }


# --- Application ---


def create_app(config: Optional[GlobalConfig] = None) -> FastAPI:
    """Build the FastAPI app around an immutable config table."""
    config = config or GlobalConfig()
    app = FastAPI(title="stocksim")
    app.state.config = config
    app.state.resolver = AssetModelResolver(config.asset_models)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
        return error_response(f"Invalid request: {exc.errors()}")

    @app.exception_handler(StockSimError)
    async def engine_error_handler(request: Request, exc: StockSimError):
        logger.warning("Request to %s failed: %s", request.url.path, exc)
        return error_response(str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning("Request to %s rejected: %s", request.url.path, exc)
        return error_response(str(exc))

    @app.get("/simulate/stock")
    def simulate_stock_handler(
        request: Request,
        asset_identifier: str,
        initial_price: float,
        days: int,
        time_step_days: float,
        seed: Optional[int] = Query(default=None),
        drift: Optional[float] = Query(default=None),
        volatility: Optional[float] = Query(default=None),
    ):
        path = simulate_stock(
            PathSimulationRequest(
                identifier=asset_identifier,
                initial_price=initial_price,
                num_steps=days,
                time_step_in_days=time_step_days,
                seed=seed,
                drift_override=drift,
                volatility_override=volatility,
            ),
            request.app.state.resolver,
        )
        return success_response({"symbol": path.symbol, **_series(path)})

    @app.post("/simulate/option/black_scholes")
    def simulate_option_bs_handler(body: OptionRequest):
        result = price_option_black_scholes(
            OptionContract(
                underlying_price=body.underlying_price,
                strike_price=body.strike_price,
                time_to_maturity_years=body.time_to_maturity_years,
                risk_free_rate=body.risk_free_rate,
                volatility=body.volatility,
                option_type=OptionType.parse(body.option_type),
            )
        )
        return success_response(_option_data(result))

    @app.post("/simulate/option/monte_carlo")
    def simulate_option_mc_handler(body: MonteCarloRequest):
        result = price_option_monte_carlo(
            MonteCarloSpec(
                initial_price=body.initial_price,
                strike_price=body.strike_price,
                time_to_maturity_years=body.time_to_maturity_years,
                risk_free_rate=body.risk_free_rate,
                volatility=body.volatility,
                option_type=OptionType.parse(body.option_type),
                num_paths=body.num_paths,
                num_steps_per_path=body.num_steps_per_path,
                seed=body.seed,
            )
        )
        return success_response(_option_data(result))

    @app.post("/simulate/future")
    def simulate_future_handler(body: FuturesRequest):
        path = simulate_futures(FuturesContract(**body.model_dump()))
        return success_response(
            {
                "contract_symbol": path.symbol,
                **_series(path),
                "spot_prices": path.spot_prices.tolist(),
            }
        )

    @app.post("/simulate/etf")
    def simulate_etf_handler(body: EtfRequest):
        definition = EtfDefinition(
            constituents=tuple(EtfConstituent(**c.model_dump()) for c in body.constituents),
            simulation_days=body.simulation_days,
            time_step_in_days=body.time_step_in_days,
            seed=body.seed,
            symbol=body.symbol,
        )
        path = simulate_etf(definition)
        return success_response(
            {
                "etf_symbol": path.symbol,
                "timestamps": path.formatted_timestamps(),
                "nav_values": path.prices.tolist(),
            }
        )

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app
