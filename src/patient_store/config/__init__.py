"""Config module.

This module provides configuration management functionality.
"""

from patient_store.config.manager import (
    get_logging_config,
    get_store_config,
    load_config,
)
from patient_store.config.schema import (
    Config,
    LoggingConfig,
    StoreConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_logging_config",
    "get_store_config",
    # Configuration models
    "Config",
    "LoggingConfig",
    "StoreConfig",
]
