"""Configuration models and loading."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from rule_tictactoe.exceptions import ConfigurationError


class SimulationConfig(BaseModel):
    """Game simulation configuration."""

    turn_cap: int = Field(default=10, description="Maximum turns per game")
    player_one_name: str = Field(default="Nietzsche", description="Player one name")
    player_two_name: str = Field(default="Kierkegaard", description="Player two name")

    @field_validator("turn_cap")
    @classmethod
    def validate_turn_cap(cls, v: int) -> int:
        """Validate turn cap."""
        if v < 1:
            raise ValueError("turn_cap must be at least 1")
        return v


class FeedbackConfig(BaseModel):
    """Rule weight feedback configuration."""

    strategy: str = Field(default="default", description="Feedback strategy")
    match_reward: float = Field(default=1.0, description="Added when a rule fires")
    unmatch_penalty: float = Field(
        default=1.0, description="Subtracted when a rule does not match"
    )
    invalid_penalty: float = Field(
        default=100.0, description="Subtracted when a rule targets an occupied cell"
    )
    min_weight: float = Field(default=-1000.0, description="Lower bound (bounded strategy)")
    max_weight: float = Field(default=1000.0, description="Upper bound (bounded strategy)")
    decay: float = Field(default=0.99, description="Weight decay factor (decaying strategy)")

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Validate strategy name."""
        valid_strategies = ["default", "bounded", "decaying"]
        if v not in valid_strategies:
            raise ValueError(f"strategy must be one of: {', '.join(valid_strategies)}")
        return v

    @field_validator("decay")
    @classmethod
    def validate_decay(cls, v: float) -> float:
        """Validate decay factor."""
        if not 0.0 < v <= 1.0:
            raise ValueError("decay must be in (0, 1]")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "FeedbackConfig":
        """Validate weight bounds."""
        if self.min_weight >= self.max_weight:
            raise ValueError("min_weight must be lower than max_weight")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class AppConfig(BaseModel):
    """Top-level configuration."""

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    feedback: FeedbackConfig = Field(default_factory=FeedbackConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load configuration, overlaying a YAML file on the defaults.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    if config_path is None:
        return AppConfig()

    try:
        config_data = _load_yaml_file(Path(config_path))
        return AppConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from file."""
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {file_path} must be a mapping")
    return data
