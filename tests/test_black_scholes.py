"""Unit tests for the Black-Scholes pricer."""

import numpy as np
import pytest

from stocksim.black_scholes import (
    black_scholes_call,
    black_scholes_price,
    black_scholes_price_series,
    black_scholes_put,
)
from stocksim.errors import InvalidParameterError
from stocksim.options import OptionContract, OptionType


def make_contract(**overrides):
    fields = dict(
        underlying_price=100.0,
        strike_price=105.0,
        time_to_maturity_years=0.5,
        risk_free_rate=0.02,
        volatility=0.22,
        option_type=OptionType.CALL,
    )
    fields.update(overrides)
    return OptionContract(**fields)


class TestBlackScholesFormulas:
    """Tests for Black-Scholes analytical formulas."""

    def test_put_atm(self):
        """ATM put price should equal ATM call when r=0 (by put-call parity)."""
        s0, k, t, r, sigma = 100, 100, 1.0, 0.0, 0.2
        call_price = black_scholes_call(s0, k, t, r, sigma)
        put_price = black_scholes_put(s0, k, t, r, sigma)
        assert abs(call_price - put_price) < 1e-10

    @pytest.mark.parametrize(
        "s0, k, t, r, sigma",
        [
            (100, 105, 1.0, 0.05, 0.2),
            (100, 105, 0.5, 0.02, 0.22),
            (50, 80, 2.0, -0.01, 0.6),
            (250, 100, 0.1, 0.1, 0.05),
        ],
    )
    def test_put_call_parity(self, s0, k, t, r, sigma):
        """C - P = S - K*exp(-rT)."""
        call_price = black_scholes_call(s0, k, t, r, sigma)
        put_price = black_scholes_put(s0, k, t, r, sigma)

        lhs = call_price - put_price
        rhs = s0 - k * np.exp(-r * t)

        assert abs(lhs - rhs) < 1e-9

    def test_deep_itm_call(self):
        """Deep ITM call should be approximately S - K*exp(-rT)."""
        s0, k, t, r, sigma = 150, 100, 1.0, 0.05, 0.2
        price = black_scholes_call(s0, k, t, r, sigma)
        intrinsic = s0 - k * np.exp(-r * t)
        assert price >= intrinsic
        assert abs(price - intrinsic) < 5

    def test_deep_otm_call(self):
        price = black_scholes_call(50, 100, 1.0, 0.05, 0.2)
        assert price < 0.1

    def test_higher_volatility_higher_price(self):
        s0, k, t, r = 100, 100, 1.0, 0.05
        assert black_scholes_call(s0, k, t, r, 0.3) > black_scholes_call(s0, k, t, r, 0.1)

    def test_longer_maturity_higher_price(self):
        s0, k, r, sigma = 100, 100, 0.05, 0.2
        assert black_scholes_call(s0, k, 1.0, r, sigma) > black_scholes_call(
            s0, k, 0.25, r, sigma
        )


class TestBlackScholesPrice:
    def test_reference_call_price(self):
        """S=100, K=105, T=0.5, r=0.02, sigma=0.22 call."""
        result = black_scholes_price(make_contract())
        assert result.price == pytest.approx(4.540, abs=0.01)
        assert result.option_type is OptionType.CALL
        assert result.strike_price == 105.0
        assert result.method == "black_scholes"
        assert result.num_paths is None

    def test_reference_put_via_parity(self):
        call = black_scholes_price(make_contract()).price
        put = black_scholes_price(make_contract(option_type=OptionType.PUT)).price
        assert call - put == pytest.approx(100.0 - 105.0 * np.exp(-0.02 * 0.5), abs=1e-9)

    def test_price_is_python_float(self):
        assert isinstance(black_scholes_price(make_contract()).price, float)

    @pytest.mark.parametrize(
        "field, label",
        [
            ("underlying_price", "Underlying price \\(S\\)"),
            ("strike_price", "Strike price \\(K\\)"),
            ("time_to_maturity_years", "Time to maturity \\(T\\)"),
            ("volatility", "Volatility \\(sigma\\)"),
        ],
    )
    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive_inputs_raise(self, field, label, value):
        with pytest.raises(InvalidParameterError, match=f"{label} must be positive. Got {value}"):
            black_scholes_price(make_contract(**{field: value}))

    def test_negative_rate_allowed(self):
        result = black_scholes_price(make_contract(risk_free_rate=-0.01))
        assert result.price > 0


class TestBlackScholesPriceSeries:
    def test_matches_pointwise_prices(self):
        contract = make_contract()
        spots = [90.0, 100.0, 110.0]
        series = black_scholes_price_series(contract, spots)
        expected = [
            black_scholes_price(make_contract(underlying_price=s)).price for s in spots
        ]
        np.testing.assert_allclose(series, expected, rtol=1e-12)

    def test_call_prices_increase_with_spot(self):
        series = black_scholes_price_series(make_contract(), [80.0, 100.0, 120.0])
        assert np.all(np.diff(series) > 0)

    def test_put_prices_decrease_with_spot(self):
        contract = make_contract(option_type=OptionType.PUT)
        series = black_scholes_price_series(contract, [80.0, 100.0, 120.0])
        assert np.all(np.diff(series) < 0)

    def test_non_positive_spot_raises(self):
        with pytest.raises(InvalidParameterError, match="Underlying price"):
            black_scholes_price_series(make_contract(), [100.0, 0.0])

    def test_empty_series_raises(self):
        with pytest.raises(InvalidParameterError, match="non-empty"):
            black_scholes_price_series(make_contract(), [])

    def test_invalid_fixed_input_raises(self):
        with pytest.raises(InvalidParameterError, match="Volatility"):
            black_scholes_price_series(make_contract(volatility=0.0), [100.0])
