"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading functionality, including
support for JSON configuration files, environment variable overrides, and
configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from patient_store.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from patient_store.config.schema import Config, LoggingConfig, StoreConfig
from patient_store.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "PATIENT_STORE_"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (PATIENT_STORE_* prefix)
    3. Configuration file (JSON)
    4. Default values

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> seed_file = config.store.seed_file
    """
    # Load .env file if present in project root
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If JSON is malformed or the file cannot be read
    """
    if not config_path.exists():
        logger.info(
            f"Config file not found: {config_path}. Using default configuration."
        )
        # Deep copy of defaults to avoid mutation
        return json.loads(json.dumps(DEFAULT_CONFIG))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}\n"
            f"Error: {e}\n"
            f"Fix: Check file permissions and path"
        ) from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a JSON object"
        )

    logger.info(f"Loaded configuration from {config_path}")
    return config_dict


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with PATIENT_STORE_ prefix.

    Supported variables: PATIENT_STORE_LOG_LEVEL, PATIENT_STORE_LOG_FILE,
    PATIENT_STORE_REDACT_PII, PATIENT_STORE_SEED_FILE,
    PATIENT_STORE_AUDIT_ENABLED.

    Args:
        config_dict: Configuration dictionary to update

    Returns:
        Updated configuration dictionary with environment overrides applied
    """
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")

    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")

    if redact_pii := os.getenv(f"{ENV_PREFIX}REDACT_PII"):
        config_dict.setdefault("logging", {})["redact_pii"] = _parse_bool(redact_pii)
        logger.debug("Override: redact_pii from environment")

    if seed_file := os.getenv(f"{ENV_PREFIX}SEED_FILE"):
        config_dict.setdefault("store", {})["seed_file"] = seed_file
        logger.debug("Override: seed_file from environment")

    if audit_enabled := os.getenv(f"{ENV_PREFIX}AUDIT_ENABLED"):
        config_dict.setdefault("store", {})["audit_enabled"] = _parse_bool(audit_enabled)
        logger.debug("Override: audit_enabled from environment")

    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Args:
        config: Configuration instance

    Returns:
        LoggingConfig instance
    """
    return config.logging


def get_store_config(config: Config) -> StoreConfig:
    """Get patient store configuration.

    Args:
        config: Configuration instance

    Returns:
        StoreConfig instance
    """
    return config.store
