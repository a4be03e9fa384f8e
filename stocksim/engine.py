"""
The five engine operations.

Each operation takes a typed request and returns a typed result, raising
InvalidParameterError or ConfigLookupError on failure. Response envelopes are
built by the caller (see ``stocksim.server``).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .black_scholes import black_scholes_price
from .etf import EtfDefinition, simulate_etf_nav
from .futures import FuturesContract, simulate_futures_price
from .gbm import PricePath, simulate_gbm_path
from .options import MonteCarloSpec, OptionContract, PricingResult
from .pricing import MonteCarloEngine
from .random_source import RandomSource
from .resolver import AssetModelResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathSimulationRequest:
    identifier: str
    initial_price: float
    num_steps: int
    time_step_in_days: float
    seed: Optional[int] = None
    drift_override: Optional[float] = None
    volatility_override: Optional[float] = None


def simulate_stock(request: PathSimulationRequest, resolver: AssetModelResolver) -> PricePath:
    """Resolve the asset's model and simulate one GBM price path."""
    resolved = resolver.resolve(
        request.identifier,
        drift_override=request.drift_override,
        volatility_override=request.volatility_override,
    )
    rng = RandomSource.create(request.seed)
    logger.debug("Simulating %s with %s, seed=%s", request.identifier, resolved, rng.seed)
    return simulate_gbm_path(
        symbol=request.identifier,
        initial_price=request.initial_price,
        drift=resolved.drift,
        volatility=resolved.volatility,
        num_steps=request.num_steps,
        time_step_in_days=request.time_step_in_days,
        rng=rng,
    )


def price_option_black_scholes(contract: OptionContract) -> PricingResult:
    return black_scholes_price(contract)


def price_option_monte_carlo(
    spec: MonteCarloSpec, engine: Optional[MonteCarloEngine] = None
) -> PricingResult:
    return (engine or MonteCarloEngine()).price(spec)


def simulate_futures(contract: FuturesContract) -> PricePath:
    return simulate_futures_price(contract)


def simulate_etf(definition: EtfDefinition) -> PricePath:
    return simulate_etf_nav(definition)
