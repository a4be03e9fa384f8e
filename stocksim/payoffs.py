"""
Payoff functions for European options.

Payoffs are evaluated on terminal prices only; there is no path-dependent
payoff support.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .options import OptionType


class Payoff(ABC):
    """Abstract base class for terminal option payoffs."""

    @abstractmethod
    def evaluate(self, terminal_prices: np.ndarray) -> np.ndarray:
        """
        Evaluate the payoff for given terminal prices.

        Args:
            terminal_prices: Prices at maturity with shape (n_paths,)

        Returns:
            Array of payoff values with shape (n_paths,)
        """


@dataclass
class EuropeanCallPayoff(Payoff):
    """
    European call option payoff: max(S(T) - K, 0)

    Attributes:
        strike: Strike price K
    """

    strike: float

    def evaluate(self, terminal_prices: np.ndarray) -> np.ndarray:
        return np.maximum(terminal_prices - self.strike, 0.0)


@dataclass
class EuropeanPutPayoff(Payoff):
    """
    European put option payoff: max(K - S(T), 0)

    Attributes:
        strike: Strike price K
    """

    strike: float

    def evaluate(self, terminal_prices: np.ndarray) -> np.ndarray:
        return np.maximum(self.strike - terminal_prices, 0.0)


def payoff_for(option_type: OptionType, strike: float) -> Payoff:
    if option_type is OptionType.CALL:
        return EuropeanCallPayoff(strike=strike)
    return EuropeanPutPayoff(strike=strike)
