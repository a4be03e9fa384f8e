"""
Geometric Brownian Motion (GBM) path simulation.

The GBM model assumes asset prices follow:
    dS = μS dt + σS dW

where:
    S = asset price
    μ = drift (annualized expected return)
    σ = volatility (annualized)
    dW = Wiener process increment

Paths are advanced with the exact lognormal transition, so the step size does
not introduce discretization bias.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

import numpy as np

from .errors import InvalidParameterError
from .random_source import RandomSource

# Day-based inputs are converted to year fractions on a trading-day basis.
TRADING_DAYS_PER_YEAR = 252.0

# First timestamp of every simulated path.
EPOCH = datetime(2024, 1, 1, 0, 0, 0)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def days_to_years(days: float) -> float:
    """Convert a number of trading days to a year fraction."""
    return days / TRADING_DAYS_PER_YEAR


def time_grid(n_steps: int, step_in_days: float) -> List[datetime]:
    """
    Timestamps for a path with ``n_steps`` steps.

    Args:
        n_steps: Number of time steps
        step_in_days: Spacing between consecutive timestamps, in days

    Returns:
        List of ``n_steps + 1`` timestamps starting at EPOCH
    """
    step = timedelta(days=step_in_days)
    return [EPOCH + i * step for i in range(n_steps + 1)]


@dataclass
class PricePath:
    """
    A simulated price series; index 0 is the state at t=0.

    ``spot_prices`` is set only by futures simulation, where ``prices`` holds
    the quoted futures prices and ``spot_prices`` the underlying spot path.
    It is None for stock and ETF paths.
    """

    symbol: str
    timestamps: List[datetime]
    prices: np.ndarray
    spot_prices: Optional[np.ndarray] = None

    def __post_init__(self):
        if len(self.timestamps) != len(self.prices):
            raise ValueError(
                f"timestamps and prices must have the same length "
                f"({len(self.timestamps)} != {len(self.prices)})"
            )

    def __len__(self) -> int:
        return len(self.prices)

    def formatted_timestamps(self) -> List[str]:
        return [t.strftime(TIMESTAMP_FORMAT) for t in self.timestamps]


@dataclass
class GBMParameters:
    """Parameters for Geometric Brownian Motion simulation."""

    s0: float  # Initial price
    mu: float  # Drift (annualized)
    sigma: float  # Volatility (annualized)

    def __post_init__(self):
        if not self.s0 > 0:
            raise InvalidParameterError(f"Initial price must be positive. Got {self.s0}")
        if not self.sigma > 0:
            raise InvalidParameterError(
                f"Volatility (sigma) must be positive. Got {self.sigma}"
            )
        if not np.isfinite(self.mu):
            raise InvalidParameterError(f"Drift (mu) must be finite. Got {self.mu}")


class GBMSimulator:
    """
    Simulator for generating price paths using Geometric Brownian Motion.

    Uses the exact solution for GBM over one step:
        S(t+dt) = S(t) * exp((μ - σ²/2)dt + σ√dt * Z)

    The simulator draws from the RandomSource it is given and never creates a
    shared generator; callers pass one source per run.
    """

    def __init__(self, params: GBMParameters, rng: RandomSource):
        """
        Initialize the GBM simulator.

        Args:
            params: GBM parameters (s0, mu, sigma)
            rng: Random source consumed by this simulator
        """
        self.params = params
        self.rng = rng

    @staticmethod
    def _validate(n_steps: int, dt: float, n_paths: int = 1) -> None:
        if n_steps <= 0:
            raise InvalidParameterError(
                f"Number of steps must be positive. Got {n_steps}"
            )
        if not dt > 0:
            raise InvalidParameterError(f"Time step must be positive. Got {dt}")
        if n_paths <= 0:
            raise InvalidParameterError(
                f"Number of paths must be positive. Got {n_paths}"
            )

    def _log_increments(self, z: np.ndarray, dt: float) -> np.ndarray:
        mu = self.params.mu
        sigma = self.params.sigma
        return (mu - 0.5 * sigma**2) * dt + sigma * np.sqrt(dt) * z

    def simulate_path(self, n_steps: int, dt: float) -> np.ndarray:
        """
        Simulate a single price path.

        Args:
            n_steps: Number of time steps
            dt: Step size (in years)

        Returns:
            Array of prices with shape (n_steps + 1,); element 0 is S(0)
        """
        self._validate(n_steps, dt)

        z = self.rng.standard_normal(n_steps)

        path = np.empty(n_steps + 1)
        path[0] = self.params.s0
        path[1:] = self.params.s0 * np.exp(np.cumsum(self._log_increments(z, dt)))

        return path

    def simulate_paths(self, n_steps: int, dt: float, n_paths: int) -> np.ndarray:
        """
        Simulate independent price paths.

        Path ``i`` consumes its ``n_steps`` draws before path ``i + 1``, so a
        seeded source always yields the same paths in the same order.

        Args:
            n_steps: Number of time steps
            dt: Step size (in years)
            n_paths: Number of simulation paths

        Returns:
            Array of price paths with shape (n_paths, n_steps + 1)
            First column is S(0), last column is S(T)
        """
        self._validate(n_steps, dt, n_paths)

        paths = np.empty((n_paths, n_steps + 1))
        paths[:, 0] = self.params.s0

        z = self.rng.standard_normal((n_paths, n_steps))
        log_returns = self._log_increments(z, dt)

        # Cumulative sum of log returns
        paths[:, 1:] = self.params.s0 * np.exp(np.cumsum(log_returns, axis=1))

        return paths


def simulate_gbm_path(
    symbol: str,
    initial_price: float,
    drift: float,
    volatility: float,
    num_steps: int,
    time_step_in_days: float,
    rng: RandomSource,
) -> PricePath:
    """
    Simulate one GBM path with day-based step spacing.

    The step is converted to a year fraction with TRADING_DAYS_PER_YEAR;
    timestamps advance by ``time_step_in_days`` calendar days.
    """
    params = GBMParameters(s0=initial_price, mu=drift, sigma=volatility)
    if not time_step_in_days > 0:
        raise InvalidParameterError(
            f"Time step must be positive. Got {time_step_in_days}"
        )
    prices = GBMSimulator(params, rng).simulate_path(
        num_steps, days_to_years(time_step_in_days)
    )
    return PricePath(
        symbol=symbol,
        timestamps=time_grid(num_steps, time_step_in_days),
        prices=prices,
    )
