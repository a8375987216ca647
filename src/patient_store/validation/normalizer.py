"""Field validation and normalization for patient demographics.

This module turns loosely typed input mappings into validated, normalized
PatientChanges. Validation is fail-fast: the first invalid field raises.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from patient_store.logging_audit import get_logger
from patient_store.models.patient import PatientChanges
from patient_store.utils.exceptions import FieldTypeError, ValidationError


logger = get_logger(__name__)

# Valid gender values (case-insensitive input, stored lowercase)
VALID_GENDERS = ["male", "female", "other"]

# Exact YYYY-MM-DD mask; strptime alone accepts single-digit month/day
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATE_FORMAT = "%Y-%m-%d"

REQUIRED_FIELDS = ["name", "date_of_birth", "gender"]
OPTIONAL_FIELDS = ["address", "phone"]


def normalize(raw_fields: Mapping[str, Any], require_all_fields: bool) -> PatientChanges:
    """Validate and normalize raw patient field input.

    In creation mode (require_all_fields=True) every field is produced: missing
    required fields fail validation and missing optional fields become None.
    In update mode only keys present in raw_fields are validated; the rest stay
    UNSET so a merge leaves them untouched.

    Args:
        raw_fields: Mapping of field name to arbitrary value. Unknown keys are
            ignored and the mapping is never mutated.
        require_all_fields: True for creation, False for partial update

    Returns:
        PatientChanges with the normalized fields

    Raises:
        FieldTypeError: If a string field receives a non-string value
        ValidationError: If a field is missing, empty or violates its format

    Example:
        >>> changes = normalize({"gender": "  MALE  "}, require_all_fields=False)
        >>> changes.gender
        'male'
    """
    normalized: dict[str, Any] = {}

    if require_all_fields or "name" in raw_fields:
        normalized["name"] = sanitize_required_string(raw_fields.get("name"), "name")

    if require_all_fields or "date_of_birth" in raw_fields:
        normalized["date_of_birth"] = sanitize_date(raw_fields.get("date_of_birth"))

    if require_all_fields or "gender" in raw_fields:
        normalized["gender"] = sanitize_gender(raw_fields.get("gender"))

    for field in OPTIONAL_FIELDS:
        if field in raw_fields:
            value = raw_fields[field]
            normalized[field] = None if value is None else sanitize_optional_string(value, field)
        elif require_all_fields:
            normalized[field] = None

    logger.debug(f"Normalized fields: {', '.join(normalized) or '(none)'}")
    return PatientChanges(**normalized)


def sanitize_required_string(value: Any, field: str) -> str:
    """Validate a required string field and return it trimmed.

    Args:
        value: Raw value
        field: Field name used in error messages

    Returns:
        Trimmed, non-empty string

    Raises:
        FieldTypeError: If value is not a string
        ValidationError: If value is empty after trimming
    """
    string = sanitize_optional_string(value, field)

    if string == "":
        raise ValidationError(f"{_label(field)} is required.", field=field)

    return string


def sanitize_optional_string(value: Any, field: str) -> str:
    """Validate a string field and return it trimmed.

    Args:
        value: Raw value
        field: Field name used in error messages

    Returns:
        Trimmed string (may be empty)

    Raises:
        FieldTypeError: If value is not a string
    """
    if not isinstance(value, str):
        raise FieldTypeError(f"{_label(field)} must be a string.", field=field)

    return value.strip()


def sanitize_date(value: Any) -> str:
    """Validate date of birth and return it in canonical YYYY-MM-DD form.

    Args:
        value: Raw value

    Returns:
        Canonical date string

    Raises:
        ValidationError: If value is not a non-empty string, does not match
            YYYY-MM-DD, or is not a real calendar date (e.g. 2023-02-30)
    """
    if not isinstance(value, str) or value == "":
        raise ValidationError(
            "Date of birth is required and must be a non-empty string.",
            field="date_of_birth",
        )

    if not DATE_PATTERN.fullmatch(value):
        raise ValidationError(
            "Date of birth must follow the format YYYY-MM-DD.", field="date_of_birth"
        )

    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(
            "Date of birth must follow the format YYYY-MM-DD.", field="date_of_birth"
        ) from e

    return parsed.date().isoformat()


def sanitize_gender(value: Any) -> str:
    """Validate gender and return it lowercased.

    Args:
        value: Raw value

    Returns:
        One of VALID_GENDERS

    Raises:
        ValidationError: If value is not a non-empty string or not an allowed value
    """
    if not isinstance(value, str) or value == "":
        raise ValidationError(
            "Gender is required and must be a non-empty string.", field="gender"
        )

    normalized = value.strip().lower()

    if normalized not in VALID_GENDERS:
        raise ValidationError(
            f"Gender must be one of: {', '.join(VALID_GENDERS)}.", field="gender"
        )

    return normalized


def _label(field: str) -> str:
    """Human-readable field label for messages (name -> Name)."""
    return field[:1].upper() + field[1:]
