"""
Stochastic Asset Simulation and Derivative Pricing Engine

Seeded Geometric Brownian Motion (GBM) path simulation, closed-form
Black-Scholes and Monte Carlo pricing of European options, cost-of-carry
futures evolution and weighted ETF NAV aggregation.
"""

from .black_scholes import black_scholes_price, black_scholes_price_series
from .engine import (
    PathSimulationRequest,
    price_option_black_scholes,
    price_option_monte_carlo,
    simulate_etf,
    simulate_futures,
    simulate_stock,
)
from .errors import ConfigLookupError, InvalidParameterError, StockSimError
from .etf import EtfConstituent, EtfDefinition
from .futures import FuturesContract
from .gbm import GBMParameters, GBMSimulator, PricePath
from .models import AssetModelConfig, GBMModelParameters, GlobalConfig, ModelKind
from .options import MonteCarloSpec, OptionContract, OptionType, PricingResult
from .pricing import MonteCarloEngine
from .random_source import RandomSource
from .resolver import AssetModelResolver, ResolvedModelParameters, merge_overrides

__all__ = [
    "AssetModelConfig",
    "AssetModelResolver",
    "ConfigLookupError",
    "EtfConstituent",
    "EtfDefinition",
    "FuturesContract",
    "GBMModelParameters",
    "GBMParameters",
    "GBMSimulator",
    "GlobalConfig",
    "InvalidParameterError",
    "ModelKind",
    "MonteCarloEngine",
    "MonteCarloSpec",
    "OptionContract",
    "OptionType",
    "PathSimulationRequest",
    "PricePath",
    "PricingResult",
    "RandomSource",
    "ResolvedModelParameters",
    "StockSimError",
    "black_scholes_price",
    "black_scholes_price_series",
    "merge_overrides",
    "price_option_black_scholes",
    "price_option_monte_carlo",
    "simulate_etf",
    "simulate_futures",
    "simulate_stock",
]
