"""Asset model configuration types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ModelKind(Enum):
    GEOMETRIC_BROWNIAN_MOTION = "GeometricBrownianMotion"


@dataclass(frozen=True)
class GBMModelParameters:
    drift: float  # Annualized
    volatility: float  # Annualized, > 0


@dataclass(frozen=True)
class AssetModelConfig:
    """One entry of the asset model table, looked up by exact identifier."""

    asset_type: str
    identifier_pattern: str
    model_kind: ModelKind
    parameters: GBMModelParameters


@dataclass(frozen=True)
class GlobalConfig:
    """
    Process-wide configuration; built once at startup and never mutated.

    Only ``asset_models`` drives request handling. ``random_seed``,
    ``simulation_period_days`` and ``time_step_minutes`` are informational
    defaults for scripts such as example.py; requests carry their own seed
    and step settings.
    """

    random_seed: Optional[int] = None
    simulation_period_days: int = 252
    time_step_minutes: int = 1440
    asset_models: Tuple[AssetModelConfig, ...] = field(default_factory=tuple)
