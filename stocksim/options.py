"""Option contract types shared by the closed-form and Monte Carlo pricers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OptionType(Enum):
    """European option side."""

    CALL = "Call"
    PUT = "Put"

    @classmethod
    def parse(cls, value: "str | OptionType") -> "OptionType":
        """Parse the external representation ("Call"/"Put", any case)."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if str(value).strip().lower() == member.value.lower():
                return member
        raise ValueError(f"option_type must be 'Call' or 'Put'. Got {value!r}")


@dataclass(frozen=True)
class OptionContract:
    """A European option on a single underlying."""

    underlying_price: float  # S
    strike_price: float  # K
    time_to_maturity_years: float  # T
    risk_free_rate: float  # r
    volatility: float  # sigma (annualized)
    option_type: OptionType


@dataclass(frozen=True)
class MonteCarloSpec:
    """An option contract plus the Monte Carlo simulation settings."""

    initial_price: float
    strike_price: float
    time_to_maturity_years: float
    risk_free_rate: float
    volatility: float
    option_type: OptionType
    num_paths: int
    num_steps_per_path: int
    seed: Optional[int] = None

    @property
    def contract(self) -> OptionContract:
        return OptionContract(
            underlying_price=self.initial_price,
            strike_price=self.strike_price,
            time_to_maturity_years=self.time_to_maturity_years,
            risk_free_rate=self.risk_free_rate,
            volatility=self.volatility,
            option_type=self.option_type,
        )


@dataclass
class PricingResult:
    """Result of pricing one option."""

    option_type: OptionType
    strike_price: float
    price: float
    method: str  # "black_scholes" or "monte_carlo"
    num_paths: Optional[int] = None
    num_steps: Optional[int] = None

    def __str__(self) -> str:
        text = (
            f"{self.option_type.value} K={self.strike_price:.4f} "
            f"Price: {self.price:.6f} ({self.method}"
        )
        if self.num_paths is not None:
            text += f", {self.num_paths} paths x {self.num_steps} steps"
        return text + ")"
