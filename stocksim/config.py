from __future__ import annotations

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import AssetModelConfig, GBMModelParameters, GlobalConfig, ModelKind

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STOCKSIM_CONFIG"


# ============================================================
# File schema
# ============================================================


class GBMParametersFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    drift: float
    volatility: float = Field(..., gt=0.0)


class ModelParametersFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    gbm: GBMParametersFile


class AssetModelFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    asset_type: str
    asset_identifier_pattern: str
    default_model: Literal["GeometricBrownianMotion"] = "GeometricBrownianMotion"
    parameters: ModelParametersFile


class GlobalConfigFile(BaseModel):
    """
    Top-level configuration file.

    Unknown top-level keys are ignored so files can carry settings for other
    tools.
    """

    model_config = ConfigDict(extra="ignore")

    random_seed: Optional[int] = Field(default=None, ge=0)
    simulation_period_days: int = Field(default=252, ge=1)
    time_step_minutes: int = Field(default=1440, ge=1)
    asset_models: List[AssetModelFile] = Field(default_factory=list)

    def to_config(self) -> GlobalConfig:
        return GlobalConfig(
            random_seed=self.random_seed,
            simulation_period_days=self.simulation_period_days,
            time_step_minutes=self.time_step_minutes,
            asset_models=tuple(
                AssetModelConfig(
                    asset_type=m.asset_type,
                    identifier_pattern=m.asset_identifier_pattern,
                    model_kind=ModelKind(m.default_model),
                    parameters=GBMModelParameters(
                        drift=m.parameters.gbm.drift,
                        volatility=m.parameters.gbm.volatility,
                    ),
                )
                for m in self.asset_models
            ),
        )


# ============================================================
# Loading
# ============================================================


def parse_config(raw: dict) -> GlobalConfig:
    """Validate an already-parsed mapping into a GlobalConfig."""
    try:
        return GlobalConfigFile.model_validate(raw).to_config()
    except ValidationError as e:
        raise ValueError(f"Invalid stocksim config: {e}") from e


def load_config(path: str | Path) -> GlobalConfig:
    """
    Load a GlobalConfig from TOML, YAML or JSON.

    The format is chosen from the file suffix and the result is validated
    with Pydantic.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text()
    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            raw = tomllib.loads(text)
        elif suffix in {".yaml", ".yml"}:
            raw = yaml.safe_load(text) or {}
        elif suffix == ".json":
            raw = json.loads(text)
        else:
            raise ValueError("Config path must be TOML, YAML or JSON.")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Failed to parse config: {e}") from e

    config = parse_config(raw)
    logger.info("Loaded %d asset model(s) from %s", len(config.asset_models), path)
    return config


def load_config_from_env(default: Optional[str | Path] = None) -> GlobalConfig:
    """Load the file named by $STOCKSIM_CONFIG, falling back to ``default``."""
    path = os.environ.get(CONFIG_ENV_VAR) or default
    if path is None:
        logger.warning("%s not set; starting with an empty model table", CONFIG_ENV_VAR)
        return GlobalConfig()
    return load_config(path)
