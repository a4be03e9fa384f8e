"""
Closed-form Black-Scholes prices for European options.

    d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T)
    d2 = d1 - σ√T

    Call = S·N(d1) - K·e^(-rT)·N(d2)
    Put  = K·e^(-rT)·N(-d2) - S·N(-d1)
"""

import logging
from typing import Sequence

import numpy as np
from scipy.stats import norm

from .errors import InvalidParameterError
from .options import OptionContract, OptionType, PricingResult

logger = logging.getLogger(__name__)


def _d1_d2(s0, k, t, r, sigma):
    vol_sqrt_t = sigma * np.sqrt(t)
    d1 = (np.log(s0 / k) + (r + 0.5 * sigma**2) * t) / vol_sqrt_t
    return d1, d1 - vol_sqrt_t


def black_scholes_call(s0: float, k: float, t: float, r: float, sigma: float) -> float:
    """Analytical Black-Scholes price for a European call option."""
    d1, d2 = _d1_d2(s0, k, t, r, sigma)
    return s0 * norm.cdf(d1) - k * np.exp(-r * t) * norm.cdf(d2)


def black_scholes_put(s0: float, k: float, t: float, r: float, sigma: float) -> float:
    """Analytical Black-Scholes price for a European put option."""
    d1, d2 = _d1_d2(s0, k, t, r, sigma)
    return k * np.exp(-r * t) * norm.cdf(-d2) - s0 * norm.cdf(-d1)


def validate_contract(contract: OptionContract) -> None:
    """Raise InvalidParameterError naming the first non-positive input."""
    checks = (
        ("Underlying price (S)", contract.underlying_price),
        ("Strike price (K)", contract.strike_price),
        ("Time to maturity (T)", contract.time_to_maturity_years),
        ("Volatility (sigma)", contract.volatility),
    )
    for name, value in checks:
        if not value > 0:
            raise InvalidParameterError(f"{name} must be positive. Got {value}")


def black_scholes_price(contract: OptionContract) -> PricingResult:
    """
    Price a European option in closed form.

    Args:
        contract: Option to price

    Returns:
        PricingResult with the analytical price

    Raises:
        InvalidParameterError: if S, K, T or sigma is not positive
    """
    validate_contract(contract)

    pricer = (
        black_scholes_call
        if contract.option_type is OptionType.CALL
        else black_scholes_put
    )
    price = pricer(
        contract.underlying_price,
        contract.strike_price,
        contract.time_to_maturity_years,
        contract.risk_free_rate,
        contract.volatility,
    )
    logger.debug("Black-Scholes %s price %.6f for %s", contract.option_type.value, price, contract)

    return PricingResult(
        option_type=contract.option_type,
        strike_price=contract.strike_price,
        price=float(price),
        method="black_scholes",
    )


def black_scholes_price_series(
    contract: OptionContract, underlying_prices: Sequence[float]
) -> np.ndarray:
    """
    Price the same contract at each underlying price of a path.

    Strike, maturity, rate and volatility are held fixed; only the
    underlying varies. ``contract.underlying_price`` is ignored.

    Returns:
        Array of option prices with the same length as ``underlying_prices``
    """
    spots = np.asarray(underlying_prices, dtype=float)
    if spots.ndim != 1 or spots.size == 0:
        raise InvalidParameterError("Underlying prices must be a non-empty 1D sequence")
    if np.any(spots <= 0):
        bad = spots[spots <= 0][0]
        raise InvalidParameterError(f"Underlying price (S) must be positive. Got {bad}")
    # Validate the fixed inputs against the first spot.
    validate_contract(
        OptionContract(
            underlying_price=float(spots[0]),
            strike_price=contract.strike_price,
            time_to_maturity_years=contract.time_to_maturity_years,
            risk_free_rate=contract.risk_free_rate,
            volatility=contract.volatility,
            option_type=contract.option_type,
        )
    )

    pricer = (
        black_scholes_call
        if contract.option_type is OptionType.CALL
        else black_scholes_put
    )
    return pricer(
        spots,
        contract.strike_price,
        contract.time_to_maturity_years,
        contract.risk_free_rate,
        contract.volatility,
    )
