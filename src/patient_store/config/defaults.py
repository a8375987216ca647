"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "log_file": "logs/patient-store.log",
        # Do not redact PII by default (user must opt-in for privacy)
        "redact_pii": False,
    },
    "store": {
        "seed_file": None,
        "audit_enabled": True,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
