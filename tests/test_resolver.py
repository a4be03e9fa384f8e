"""Unit tests for asset model resolution."""

import pytest

from stocksim.errors import ConfigLookupError
from stocksim.models import AssetModelConfig, GBMModelParameters, ModelKind
from stocksim.resolver import AssetModelResolver, merge_overrides


def model(identifier, drift, volatility, asset_type="stock"):
    return AssetModelConfig(
        asset_type=asset_type,
        identifier_pattern=identifier,
        model_kind=ModelKind.GEOMETRIC_BROWNIAN_MOTION,
        parameters=GBMModelParameters(drift=drift, volatility=volatility),
    )


@pytest.fixture
def resolver():
    return AssetModelResolver(
        [
            model("DEFAULT_STOCK", 0.05, 0.2),
            model("TECH_STOCK_HIGH_VOL", 0.08, 0.4),
            model("TECH_STOCK_HIGH_VOL", 0.01, 0.9, asset_type="duplicate"),
        ]
    )


class TestMergeOverrides:
    def test_no_overrides_keeps_defaults(self):
        defaults = GBMModelParameters(drift=0.05, volatility=0.2)
        assert merge_overrides(defaults) == defaults

    def test_drift_override(self):
        merged = merge_overrides(GBMModelParameters(0.05, 0.2), drift=0.1)
        assert merged == GBMModelParameters(drift=0.1, volatility=0.2)

    def test_volatility_override(self):
        merged = merge_overrides(GBMModelParameters(0.05, 0.2), volatility=0.35)
        assert merged == GBMModelParameters(drift=0.05, volatility=0.35)

    def test_zero_drift_override_is_applied(self):
        merged = merge_overrides(GBMModelParameters(0.05, 0.2), drift=0.0)
        assert merged.drift == 0.0


class TestAssetModelResolver:
    def test_exact_match(self, resolver):
        resolved = resolver.resolve("DEFAULT_STOCK")
        assert resolved.identifier == "DEFAULT_STOCK"
        assert resolved.model_kind is ModelKind.GEOMETRIC_BROWNIAN_MOTION
        assert resolved.drift == 0.05
        assert resolved.volatility == 0.2

    def test_first_match_wins(self, resolver):
        resolved = resolver.resolve("TECH_STOCK_HIGH_VOL")
        assert (resolved.drift, resolved.volatility) == (0.08, 0.4)

    def test_no_pattern_matching(self, resolver):
        assert resolver.find("DEFAULT_*") is None
        assert resolver.find("default_stock") is None

    def test_overrides_replace_config_values(self, resolver):
        resolved = resolver.resolve(
            "DEFAULT_STOCK", drift_override=-0.02, volatility_override=0.5
        )
        assert (resolved.drift, resolved.volatility) == (-0.02, 0.5)

    def test_unknown_identifier_raises(self, resolver):
        with pytest.raises(
            ConfigLookupError, match="No model config found for stock identifier: NOPE"
        ):
            resolver.resolve("NOPE")

    def test_unknown_identifier_with_partial_override_raises(self, resolver):
        with pytest.raises(ConfigLookupError):
            resolver.resolve("NOPE", drift_override=0.1)

    def test_unknown_identifier_with_full_override_resolves(self, resolver):
        resolved = resolver.resolve("NOPE", drift_override=0.1, volatility_override=0.3)
        assert resolved.model_kind is ModelKind.GEOMETRIC_BROWNIAN_MOTION
        assert (resolved.drift, resolved.volatility) == (0.1, 0.3)

    def test_table_is_immutable(self, resolver):
        assert isinstance(resolver.models, tuple)

    def test_empty_table(self):
        with pytest.raises(ConfigLookupError):
            AssetModelResolver().resolve("DEFAULT_STOCK")
