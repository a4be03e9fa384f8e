"""
Monte Carlo pricing engine for European options.

Prices options by computing the expected discounted payoff under the
risk-neutral measure using simulated GBM paths.
"""

import logging

import numpy as np

from .black_scholes import validate_contract
from .errors import InvalidParameterError
from .gbm import GBMParameters, GBMSimulator
from .options import MonteCarloSpec, PricingResult
from .payoffs import payoff_for
from .random_source import RandomSource

logger = logging.getLogger(__name__)


class MonteCarloEngine:
    """
    Monte Carlo engine for pricing European options.

    Prices options by:
    1. Simulating price paths with drift equal to the risk-free rate
    2. Evaluating the payoff on each terminal price
    3. Averaging the payoffs and discounting

    The price estimate is: e^(-rT) * E[payoff(S(T))]

    One RandomSource is created per request from the request seed. Paths are
    simulated in index order, in batches of at most ``batch_size`` paths;
    batching only bounds memory and does not change which draws a path gets.
    """

    def __init__(self, batch_size: int = 10_000):
        """
        Initialize the Monte Carlo pricing engine.

        Args:
            batch_size: Maximum number of paths held in memory at once
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size

    @staticmethod
    def _validate(spec: MonteCarloSpec) -> None:
        if (
            not spec.time_to_maturity_years > 0
            or spec.num_paths <= 0
            or spec.num_steps_per_path <= 0
        ):
            raise InvalidParameterError(
                "Invalid parameters for Monte Carlo pricing. "
                "Ensure T > 0, num_paths > 0, num_steps > 0."
            )
        validate_contract(spec.contract)

    def price(self, spec: MonteCarloSpec) -> PricingResult:
        """
        Price a European option using Monte Carlo simulation.

        Args:
            spec: Option contract and simulation settings

        Returns:
            PricingResult with the discounted average payoff
        """
        self._validate(spec)

        t = spec.time_to_maturity_years
        r = spec.risk_free_rate
        n_paths = spec.num_paths
        n_steps = spec.num_steps_per_path
        dt = t / n_steps

        # Risk-neutral measure: drift is the risk-free rate
        params = GBMParameters(s0=spec.initial_price, mu=r, sigma=spec.volatility)
        simulator = GBMSimulator(params, RandomSource.create(spec.seed))
        payoff = payoff_for(spec.option_type, spec.strike_price)

        logger.debug(
            "Monte Carlo pricing %s K=%s: %d paths x %d steps, seed=%s",
            spec.option_type.value,
            spec.strike_price,
            n_paths,
            n_steps,
            spec.seed,
        )

        total_payoff = 0.0
        remaining = n_paths
        while remaining > 0:
            batch = min(self.batch_size, remaining)
            paths = simulator.simulate_paths(n_steps, dt, batch)
            total_payoff += float(np.sum(payoff.evaluate(paths[:, -1])))
            remaining -= batch

        discount_factor = np.exp(-r * t)
        price = discount_factor * total_payoff / n_paths

        return PricingResult(
            option_type=spec.option_type,
            strike_price=spec.strike_price,
            price=float(price),
            method="monte_carlo",
            num_paths=n_paths,
            num_steps=n_steps,
        )
