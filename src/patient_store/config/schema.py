"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PII from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/patient-store.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class StoreConfig(BaseModel):
    """Configuration for the patient store.

    Attributes:
        seed_file: JSON or CSV file used to seed the store
        audit_enabled: Whether store mutations emit audit events
    """

    seed_file: Optional[Path] = Field(
        default=None,
        description="Seed file (.json or .csv)"
    )
    audit_enabled: bool = Field(
        default=True,
        description="Emit audit events for store mutations"
    )

    @field_validator("seed_file")
    @classmethod
    def validate_seed_file(cls, v: Optional[Path]) -> Optional[Path]:
        """Validate seed file suffix.

        Raises:
            ValueError: If the suffix is not .json or .csv
        """
        if v is not None and v.suffix.lower() not in (".json", ".csv"):
            raise ValueError(
                f"Invalid seed_file: {v}. Must be a .json or .csv file"
            )
        return v


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        logging: Logging configuration
        store: Patient store configuration

    Example:
        >>> config = Config(store=StoreConfig(seed_file=Path("seed/patients.json")))
        >>> config.logging.level
        'INFO'
    """

    logging: LoggingConfig = LoggingConfig()
    store: StoreConfig = StoreConfig()
