#!/usr/bin/env python3
"""
Example usage of the stocksim library.

Simulates a stock path from the example config, prices a European call and
put in closed form and by Monte Carlo, and runs the futures and ETF
simulations.
"""

import numpy as np

from stocksim import (
    AssetModelResolver,
    EtfConstituent,
    EtfDefinition,
    FuturesContract,
    MonteCarloSpec,
    OptionContract,
    OptionType,
    PathSimulationRequest,
    price_option_black_scholes,
    price_option_monte_carlo,
    simulate_etf,
    simulate_futures,
    simulate_stock,
)
from stocksim.config import load_config


def main():
    # Market parameters
    s0 = 100.0  # Initial stock price
    k = 105.0  # Strike price
    t = 1.0  # Time to maturity (1 year)
    r = 0.05  # Risk-free rate (5%)
    sigma = 0.2  # Volatility (20%)

    print("=" * 60)
    print("Stock Path Simulation")
    print("=" * 60)

    config = load_config("config.example.toml")
    resolver = AssetModelResolver(config.asset_models)
    path = simulate_stock(
        PathSimulationRequest(
            identifier="TECH_STOCK_HIGH_VOL",
            initial_price=s0,
            num_steps=10,
            time_step_in_days=1.0,
            seed=config.random_seed,
        ),
        resolver,
    )
    for ts, price in zip(path.formatted_timestamps(), path.prices):
        print(f"  {ts}  {price:10.4f}")

    print("\n" + "=" * 60)
    print("European Option Pricing")
    print("=" * 60)

    for option_type in (OptionType.CALL, OptionType.PUT):
        bs = price_option_black_scholes(
            OptionContract(s0, k, t, r, sigma, option_type)
        )
        mc = price_option_monte_carlo(
            MonteCarloSpec(
                initial_price=s0,
                strike_price=k,
                time_to_maturity_years=t,
                risk_free_rate=r,
                volatility=sigma,
                option_type=option_type,
                num_paths=100_000,
                num_steps_per_path=50,
                seed=42,
            )
        )
        print(f"  Black-Scholes: {bs}")
        print(f"  Monte Carlo:   {mc}")
        print(f"  Difference: {abs(mc.price - bs.price):.6f}")

    print("\n" + "=" * 60)
    print("Futures Price Evolution")
    print("=" * 60)

    futures = simulate_futures(
        FuturesContract(
            symbol="CL_FUT",
            initial_spot_price=80.0,
            risk_free_rate=0.04,
            volatility=0.3,
            time_to_maturity_in_days=90,
            time_step_in_days=15,
            seed=7,
        )
    )
    for spot, fut in zip(futures.spot_prices, futures.prices):
        print(f"  spot {spot:9.4f}  futures {fut:9.4f}")

    print("\n" + "=" * 60)
    print("ETF NAV")
    print("=" * 60)

    nav = simulate_etf(
        EtfDefinition(
            constituents=(
                EtfConstituent("AAA", 50.0, 0.07, 0.25, 0.6),
                EtfConstituent("BBB", 120.0, 0.03, 0.15, 0.4),
            ),
            simulation_days=15,
            time_step_in_days=1,
            seed=99,
        )
    )
    print(f"  NAV: {np.round(nav.prices, 4)}")


if __name__ == "__main__":
    main()
