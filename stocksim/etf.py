"""
ETF net asset value (NAV) simulation.

Each constituent follows its own GBM path. The NAV at step t is the weighted
sum of constituent relative returns:

    NAV(t) = Σ w_i * S_i(t) / S_i(0)

Constituents are simulated independently (no correlation) from one generator
shared in declaration order. Weights are neither validated nor normalised:
NAV(0) equals the sum of the weights.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidParameterError
from .gbm import GBMParameters, GBMSimulator, PricePath, days_to_years, time_grid
from .random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EtfConstituent:
    symbol: str
    initial_price: float
    drift: float
    volatility: float
    weight: float


@dataclass(frozen=True)
class EtfDefinition:
    constituents: Tuple[EtfConstituent, ...]
    simulation_days: int
    time_step_in_days: int
    seed: Optional[int] = None
    symbol: str = field(default="SIMULATED_ETF")

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable.
        object.__setattr__(self, "constituents", tuple(self.constituents))


def _validate(definition: EtfDefinition) -> None:
    if not definition.constituents:
        raise InvalidParameterError("ETF constituents list cannot be empty")
    if definition.simulation_days <= 0:
        raise InvalidParameterError(
            f"Simulation days must be greater than 0. Got {definition.simulation_days}"
        )
    if definition.time_step_in_days <= 0:
        raise InvalidParameterError(
            f"Time step in days must be positive. Got {definition.time_step_in_days}"
        )
    for constituent in definition.constituents:
        if not constituent.initial_price > 0:
            raise InvalidParameterError(
                f"Constituent '{constituent.symbol}' initial price must be positive. "
                f"Got {constituent.initial_price}"
            )
        if not constituent.volatility > 0:
            raise InvalidParameterError(
                f"Constituent '{constituent.symbol}' volatility must be positive. "
                f"Got {constituent.volatility}"
            )


def weighted_nav(weights: Sequence[float], paths: np.ndarray) -> np.ndarray:
    """
    Combine constituent paths into a NAV series.

    Args:
        weights: One weight per constituent
        paths: Constituent prices with shape (n_constituents, n_steps + 1)

    Returns:
        NAV values with shape (n_steps + 1,)
    """
    relative_returns = paths / paths[:, :1]
    # Accumulate in declaration order so NAV(0) == sum(weights) exactly.
    nav = np.zeros(paths.shape[1])
    for weight, returns in zip(weights, relative_returns):
        nav = nav + weight * returns
    return nav


def simulate_etf_nav(definition: EtfDefinition) -> PricePath:
    """
    Simulate the NAV path of a weighted basket.

    Args:
        definition: Constituents and simulation settings

    Returns:
        PricePath of simulation_days + 1 NAV values
    """
    _validate(definition)

    n_steps = definition.simulation_days
    dt = days_to_years(definition.time_step_in_days)
    rng = RandomSource.create(definition.seed)

    paths = np.empty((len(definition.constituents), n_steps + 1))
    for i, constituent in enumerate(definition.constituents):
        params = GBMParameters(
            s0=constituent.initial_price,
            mu=constituent.drift,
            sigma=constituent.volatility,
        )
        paths[i] = GBMSimulator(params, rng).simulate_path(n_steps, dt)

    weights = [c.weight for c in definition.constituents]
    nav = weighted_nav(weights, paths)

    logger.debug(
        "Simulated ETF %s: %d constituents, %d steps, NAV0=%.6f",
        definition.symbol,
        len(definition.constituents),
        n_steps,
        nav[0],
    )

    return PricePath(
        symbol=definition.symbol,
        timestamps=time_grid(n_steps, definition.time_step_in_days),
        prices=nav,
    )
