"""Custom exception classes for Patient Store.

All exceptions inherit from PatientStoreError to allow catching all custom exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PatientStoreError(Exception):
    """Base exception for all Patient Store custom exceptions."""

    pass


class ValidationError(PatientStoreError):
    """Raised when patient field data fails validation.

    Examples:
        - Missing required field (name, date_of_birth, gender)
        - Empty name after trimming
        - Date of birth not in YYYY-MM-DD form
        - Gender outside the allowed values

    Attributes:
        field: Name of the offending field, if known
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class FieldTypeError(ValidationError, TypeError):
    """Raised when a field value has the wrong type.

    Also a TypeError so callers can tell wrong-type input apart from
    domain constraint failures.

    Examples:
        - Integer passed for name
        - List passed for phone
    """

    pass


class NotFoundError(PatientStoreError):
    """Raised when an operation references a patient id that is not stored.

    Attributes:
        patient_id: The id that was looked up
    """

    def __init__(self, patient_id: int) -> None:
        super().__init__(f"Patient with id {patient_id} not found")
        self.patient_id = patient_id


class ConfigurationError(PatientStoreError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass


class SeedFileError(PatientStoreError):
    """Raised when a seed file cannot be read or has an unexpected shape.

    Examples:
        - Unsupported file extension
        - Malformed JSON
        - JSON document that is not a list of patient objects
    """

    pass


class ErrorCategory(Enum):
    """Error categorization used when translating errors for callers.

    Attributes:
        VALIDATION: Input rejected by the normalizer (422)
        NOT_FOUND: Referenced patient id does not exist (404)
        CONFIGURATION: Configuration or seed data could not be loaded (500)
        INTERNAL: Anything else (500)
    """

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFIGURATION = "CONFIGURATION"
    INTERNAL = "INTERNAL"


STATUS_CODES = {
    ErrorCategory.VALIDATION: 422,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.CONFIGURATION: 500,
    ErrorCategory.INTERNAL: 500,
}


@dataclass
class ErrorInfo:
    """Structured error information for transport layers and CLI output.

    Attributes:
        category: Error category
        error_type: Exception class name (e.g., "ValidationError")
        message: Human-readable error message
        status_code: Suggested response status for an HTTP layer
        remediation: Actionable guidance for resolving the error
        field: Offending field for validation errors
        patient_id: Patient id for not-found errors

    Example:
        >>> info = create_error_info(NotFoundError(7))
        >>> info.status_code
        404
    """

    category: ErrorCategory
    error_type: str
    message: str
    status_code: int
    remediation: str
    field: Optional[str] = None
    patient_id: Optional[int] = None

    def to_dict(self) -> dict:
        """Export error information as a JSON-serializable dictionary."""
        return {
            "category": self.category.value,
            "error_type": self.error_type,
            "message": self.message,
            "status_code": self.status_code,
            "remediation": self.remediation,
            "field": self.field,
            "patient_id": self.patient_id,
        }


def categorize_error(exception: Exception) -> ErrorCategory:
    """Categorize an exception for response translation.

    Args:
        exception: The exception to categorize

    Returns:
        ErrorCategory for the exception

    Example:
        >>> categorize_error(ValidationError("Name is required.", field="name"))
        ErrorCategory.VALIDATION
        >>> categorize_error(NotFoundError(3))
        ErrorCategory.NOT_FOUND
    """
    if isinstance(exception, ValidationError):
        return ErrorCategory.VALIDATION

    if isinstance(exception, NotFoundError):
        return ErrorCategory.NOT_FOUND

    if isinstance(exception, (ConfigurationError, SeedFileError, FileNotFoundError)):
        return ErrorCategory.CONFIGURATION

    return ErrorCategory.INTERNAL


def create_error_info(exception: Exception) -> ErrorInfo:
    """Create structured error information from an exception.

    Args:
        exception: Exception that occurred

    Returns:
        ErrorInfo with category, status code and remediation guidance
    """
    category = categorize_error(exception)

    return ErrorInfo(
        category=category,
        error_type=type(exception).__name__,
        message=str(exception),
        status_code=STATUS_CODES[category],
        remediation=_generate_remediation(exception, category),
        field=getattr(exception, "field", None),
        patient_id=getattr(exception, "patient_id", None),
    )


def _generate_remediation(exception: Exception, category: ErrorCategory) -> str:
    """Generate actionable remediation message for an error.

    Args:
        exception: Exception that occurred
        category: Error category

    Returns:
        Actionable remediation message
    """
    if isinstance(exception, FieldTypeError):
        return f"Send {exception.field or 'the field'} as a string value or omit it."

    if category == ErrorCategory.VALIDATION:
        return (
            "Check the patient data: name must be non-empty, date_of_birth must be "
            "YYYY-MM-DD and gender one of male, female, other."
        )

    if category == ErrorCategory.NOT_FOUND:
        return "List stored patients to find a valid id. Ids are never reused after deletion."

    if isinstance(exception, FileNotFoundError):
        return "Check the file path and that the file exists."

    if category == ErrorCategory.CONFIGURATION:
        return (
            "Check the configuration or seed file for missing or invalid values. "
            "Use examples/config.example.json as template."
        )

    return "Review error message and check logs/ for complete details."
