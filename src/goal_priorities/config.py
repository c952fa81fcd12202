"""Configuration for the priority engine.

Reads an optional YAML file and provides typed access to all settings.
The defaults reproduce the production ranking exactly; overriding weights
changes every score and should only be done deliberately.
Pure Python -- no I/O beyond the initial file read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

ENV_VAR = "GOAL_PRIORITIES_ENV"

DEVELOPMENT = "development"
PRODUCTION = "production"


@dataclass(frozen=True)
class ScoreWeights:
    """Multipliers for the five queued-goal score components."""

    order: float = 1000.0
    recency: float = 1.0
    deadline: float = 50.0
    why_link: float = 500.0
    impact: float = 30.0


@dataclass(frozen=True)
class EngineConfig:
    """Top-level engine configuration."""

    top_n: int = 3
    environment: str = PRODUCTION  # production | development
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    @property
    def dev_mode(self) -> bool:
        """True when development-only diagnostics should be emitted."""
        return self.environment == DEVELOPMENT


DEFAULT_CONFIG = EngineConfig()


def _build_sub(cls: type, data: dict[str, Any] | None) -> Any:
    """Build a frozen dataclass from a dict, ignoring unknown keys."""
    if not isinstance(data, dict):
        return cls()
    valid = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in valid}
    return cls(**filtered)


def load_config(config_path: Path) -> EngineConfig:
    """Load engine configuration from a YAML file.

    The environment variable GOAL_PRIORITIES_ENV, when set, overrides the
    file's ``environment`` key.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Populated EngineConfig.

    Raises:
        FileNotFoundError: If config file does not exist.
        yaml.YAMLError: If YAML is malformed.
    """
    raw = yaml.safe_load(config_path.read_text())
    if not isinstance(raw, dict):
        return config_from_env()

    defaults = EngineConfig()
    top_n = raw.get("top_n", defaults.top_n)
    if not isinstance(top_n, int) or isinstance(top_n, bool):
        top_n = defaults.top_n

    return EngineConfig(
        top_n=max(0, top_n),
        environment=os.environ.get(ENV_VAR)
        or str(raw.get("environment", defaults.environment)),
        weights=_build_sub(ScoreWeights, raw.get("weights")),
    )


def config_from_env() -> EngineConfig:
    """Default configuration with the environment taken from GOAL_PRIORITIES_ENV."""
    return EngineConfig(environment=os.environ.get(ENV_VAR) or PRODUCTION)
