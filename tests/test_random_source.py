"""Unit tests for the seeded random source."""

import numpy as np
import pytest

from stocksim.errors import InvalidParameterError
from stocksim.random_source import RandomSource


class TestRandomSource:
    def test_same_seed_same_draws(self):
        a = RandomSource.from_seed(123)
        b = RandomSource.from_seed(123)
        assert [a.next_standard_normal() for _ in range(10)] == [
            b.next_standard_normal() for _ in range(10)
        ]

    def test_different_seeds_different_draws(self):
        a = RandomSource.from_seed(123).standard_normal(100)
        b = RandomSource.from_seed(456).standard_normal(100)
        assert not np.allclose(a, b)

    def test_next_standard_normal_is_float(self):
        assert isinstance(RandomSource.from_seed(1).next_standard_normal(), float)

    def test_vector_draws_reproducible(self):
        a = RandomSource.from_seed(7).standard_normal((3, 4))
        b = RandomSource.from_seed(7).standard_normal((3, 4))
        assert a.shape == (3, 4)
        np.testing.assert_array_equal(a, b)

    def test_create_with_seed_is_deterministic(self):
        a = RandomSource.create(5)
        b = RandomSource.create(5)
        assert a.seed == 5
        np.testing.assert_array_equal(a.standard_normal(5), b.standard_normal(5))

    def test_create_without_seed_uses_entropy(self):
        source = RandomSource.create(None)
        assert source.seed is None
        assert np.isfinite(source.next_standard_normal())

    def test_large_seed_accepted(self):
        source = RandomSource.from_seed(2**64 - 1)
        assert np.isfinite(source.next_standard_normal())

    def test_negative_seed_raises(self):
        with pytest.raises(InvalidParameterError, match="Seed must be non-negative"):
            RandomSource.from_seed(-1)

    def test_draws_are_standard_normal(self):
        z = RandomSource.from_seed(42).standard_normal(200_000)
        assert abs(np.mean(z)) < 0.01
        assert abs(np.std(z) - 1.0) < 0.01
