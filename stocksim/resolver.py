"""
Asset model resolution.

Maps an asset identifier to its configured model and parameters. Lookup is an
exact match on ``identifier_pattern`` (no wildcard or regex), first match
wins. Caller-supplied drift/volatility overrides take precedence over the
configured values; the model kind is never overridden.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import ConfigLookupError
from .models import AssetModelConfig, GBMModelParameters, ModelKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedModelParameters:
    """Effective parameters for one simulation request."""

    identifier: str
    model_kind: ModelKind
    drift: float
    volatility: float


def merge_overrides(
    defaults: GBMModelParameters,
    drift: Optional[float] = None,
    volatility: Optional[float] = None,
) -> GBMModelParameters:
    """Return ``defaults`` with any given override replacing its value."""
    return GBMModelParameters(
        drift=defaults.drift if drift is None else drift,
        volatility=defaults.volatility if volatility is None else volatility,
    )


class AssetModelResolver:
    """Read-only view over the asset model table."""

    def __init__(self, models: Iterable[AssetModelConfig] = ()):
        self._models = tuple(models)

    @property
    def models(self):
        return self._models

    def find(self, identifier: str) -> Optional[AssetModelConfig]:
        for model in self._models:
            if model.identifier_pattern == identifier:
                return model
        return None

    def resolve(
        self,
        identifier: str,
        drift_override: Optional[float] = None,
        volatility_override: Optional[float] = None,
    ) -> ResolvedModelParameters:
        """
        Resolve the effective model parameters for ``identifier``.

        An identifier with no table entry resolves only when both overrides
        are given.

        Raises:
            ConfigLookupError: if no entry matches and the overrides do not
                fully specify the model
        """
        model = self.find(identifier)
        if model is not None:
            params = merge_overrides(model.parameters, drift_override, volatility_override)
            kind = model.model_kind
        elif drift_override is not None and volatility_override is not None:
            logger.debug("No model config for %s; using caller overrides", identifier)
            params = GBMModelParameters(drift=drift_override, volatility=volatility_override)
            kind = ModelKind.GEOMETRIC_BROWNIAN_MOTION
        else:
            raise ConfigLookupError(
                f"No model config found for stock identifier: {identifier}"
            )

        return ResolvedModelParameters(
            identifier=identifier,
            model_kind=kind,
            drift=params.drift,
            volatility=params.volatility,
        )
