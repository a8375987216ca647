"""Audit trail functionality for Patient Store.

This module provides structured audit logging for store mutations and
rejected input.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Key fields rendered first, in this order
FIELD_ORDER = [
    "status",
    "patient_id",
    "fields",
    "record_count",
    "error_field",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.

    Creates a structured audit log entry. Audit events are logged at INFO level
    for successful operations and ERROR level for failures.

    Args:
        event_type: Type of operation (e.g., "PATIENT_CREATED", "PATIENT_UPDATED",
                   "PATIENT_DELETED", "VALIDATION_FAILED", "STORE_SEEDED")
        details: Dictionary with event details. Common fields include:
                - status: "success" or "failure"
                - patient_id: Affected patient id
                - fields: Names of the fields written
                - error_field: Field that failed validation
                - error_message: Error details (if status is failure)
                - correlation_id: Optional correlation ID for tracking related events

    Example:
        >>> log_audit_event("PATIENT_CREATED", {
        ...     "status": "success",
        ...     "patient_id": 1,
        ...     "fields": ["name", "date_of_birth", "gender"],
        ... })
    """
    # Work on a copy so callers' dictionaries stay untouched
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))

    message_parts = [f"AUDIT [{event_type}]"]

    for field in FIELD_ORDER:
        if field in details:
            value = details[field]
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value) or "-"
            message_parts.append(f"{field}={value}")

    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")

    audit_message = " | ".join(message_parts)

    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
