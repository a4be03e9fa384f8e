"""
Futures price evolution under cost-of-carry.

The spot price is simulated as a GBM path. At every step the quoted futures
price is recomputed from the current spot and the remaining time to maturity:

    F(t) = S(t) * exp(r * T(t)),   T(t) = max(T0 - t, 0)

so the futures price inherits the spot's randomness and converges to the spot
as maturity approaches.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import InvalidParameterError
from .gbm import GBMParameters, GBMSimulator, PricePath, days_to_years, time_grid
from .random_source import RandomSource

logger = logging.getLogger(__name__)

# Remaining maturity in the carry term is measured in calendar days.
DAYS_IN_YEAR = 365.0


@dataclass(frozen=True)
class FuturesContract:
    symbol: str
    initial_spot_price: float
    risk_free_rate: float
    volatility: float  # Volatility of the underlying spot price
    time_to_maturity_in_days: int
    time_step_in_days: int
    seed: Optional[int] = None
    drift: Optional[float] = None  # Spot drift; defaults to risk_free_rate

    @property
    def spot_drift(self) -> float:
        return self.risk_free_rate if self.drift is None else self.drift


def _validate(contract: FuturesContract) -> None:
    if not contract.initial_spot_price > 0:
        raise InvalidParameterError(
            f"Initial spot price must be positive. Got {contract.initial_spot_price}"
        )
    if not contract.volatility > 0:
        raise InvalidParameterError(
            f"Volatility (sigma) must be positive. Got {contract.volatility}"
        )
    if contract.time_step_in_days <= 0:
        raise InvalidParameterError(
            f"Time step in days must be positive. Got {contract.time_step_in_days}"
        )
    if contract.time_to_maturity_in_days <= 0:
        raise InvalidParameterError(
            f"Time to maturity in days must be positive. Got {contract.time_to_maturity_in_days}"
        )


def num_steps_to_maturity(contract: FuturesContract) -> int:
    return math.ceil(contract.time_to_maturity_in_days / contract.time_step_in_days)


def simulate_futures_price(contract: FuturesContract) -> PricePath:
    """
    Simulate a quoted futures price path.

    Args:
        contract: Futures contract and simulation settings

    Returns:
        PricePath of ceil(maturity / step) + 1 futures prices, with the
        simulated spot path in ``spot_prices``
    """
    _validate(contract)

    n_steps = num_steps_to_maturity(contract)
    params = GBMParameters(
        s0=contract.initial_spot_price,
        mu=contract.spot_drift,
        sigma=contract.volatility,
    )
    simulator = GBMSimulator(params, RandomSource.create(contract.seed))
    spot = simulator.simulate_path(n_steps, days_to_years(contract.time_step_in_days))

    elapsed_days = np.arange(n_steps + 1) * contract.time_step_in_days
    remaining_years = (
        np.maximum(contract.time_to_maturity_in_days - elapsed_days, 0) / DAYS_IN_YEAR
    )
    futures = spot * np.exp(contract.risk_free_rate * remaining_years)

    logger.debug(
        "Simulated futures %s: %d steps, F0=%.6f, F_T=%.6f",
        contract.symbol,
        n_steps,
        futures[0],
        futures[-1],
    )

    return PricePath(
        symbol=contract.symbol,
        timestamps=time_grid(n_steps, contract.time_step_in_days),
        prices=futures,
        spot_prices=spot,
    )
