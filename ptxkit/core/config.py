"""Configuration loading for the PTX reader and service."""

import logging
import os
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PTX_CONFIG"


class ReaderConfig(BaseModel):
    """Options of the scan reader and its reference sinks."""

    delimiter: str = Field(default=" ", description="Field separator of header and record lines")
    strict_headers: bool = Field(
        default=False, description="Raise on a malformed header instead of ending the read"
    )
    skip_unsampled: bool = Field(
        default=True, description="Drop (0, 0, 0) points in the collecting sinks"
    )

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v):
        if len(v) != 1:
            raise ValueError("Delimiter must be a single character")
        return v


class LoggingConfig(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class Settings(BaseModel):
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file. Falls back to the PTX_CONFIG
            environment variable, then to built-in defaults.

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ValueError: If the file is not valid YAML or holds invalid values
    """
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return Settings()

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration {config_path}: {e}") from e

    try:
        settings = Settings(**config_data)
    except (ValidationError, TypeError) as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    logger.info(f"Loaded configuration from {config_path}")
    return settings
