"""Configuration models using Pydantic for validation."""
import logging
import os
import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r'^([a-zA-Z_:][a-zA-Z0-9_:]*)?$')


class GlobalConfig(BaseModel):
    """Global configuration settings."""
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


class SelfMetricsConfig(BaseModel):
    """Prometheus self-metrics configuration."""
    enabled: bool = True
    prefix: str = "seriesrows_"

    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v):
        """Prefix must keep metric names Prometheus-safe."""
        if not _PREFIX_RE.match(v):
            raise ValueError(f"Invalid metric prefix '{v}'")
        return v


class SortingConfig(BaseModel):
    """Row ordering behavior."""
    stable: bool = True  # preserve input order of same-series rows


class Config(BaseModel):
    """Root configuration model."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    self_metrics: SelfMetricsConfig = Field(default_factory=SelfMetricsConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)


def load_config(config_path: str) -> Config:
    """Load and validate configuration from YAML file."""
    import yaml

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")

    # Apply environment variable overrides
    if env_log_level := os.getenv('LOG_LEVEL'):
        raw_config.setdefault('global', {})['log_level'] = env_log_level

    if env_prefix := os.getenv('SERIESROWS_METRICS_PREFIX'):
        raw_config.setdefault('self_metrics', {})['prefix'] = env_prefix

    try:
        config = Config(**raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e

    logger.info(f"Configuration loaded from: {config_path}")
    return config
