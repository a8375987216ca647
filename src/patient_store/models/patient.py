"""Patient record data models.

This module defines the PatientRecord dataclass held by the store and the
PatientChanges container produced by the normalizer.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Optional, Union


class _Unset:
    """Marker for a field that was not supplied at all."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class PatientChanges:
    """Normalized patient fields, distinguishing absent from explicit null.

    Each attribute is UNSET when the key was missing from the input, None when
    an optional field was explicitly cleared, or the normalized value.

    Attributes:
        name: Trimmed, non-empty name
        date_of_birth: Canonical YYYY-MM-DD date
        gender: Lowercase gender (male, female, other)
        address: Trimmed address or None
        phone: Trimmed phone number or None
    """

    name: Union[str, _Unset] = UNSET
    date_of_birth: Union[str, _Unset] = UNSET
    gender: Union[str, _Unset] = UNSET
    address: Union[str, None, _Unset] = UNSET
    phone: Union[str, None, _Unset] = UNSET

    def as_dict(self) -> dict[str, Any]:
        """Return only the supplied fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    @property
    def field_names(self) -> list[str]:
        """Names of the supplied fields, in declaration order."""
        return list(self.as_dict())


@dataclass(frozen=True)
class PatientRecord:
    """A stored patient demographic record.

    Attributes:
        id: Store-assigned identifier, never reused
        name: Patient name
        date_of_birth: Date of birth as YYYY-MM-DD
        gender: male, female or other
        address: Street address (optional)
        phone: Contact phone number (optional)
    """

    id: int
    name: str
    date_of_birth: str
    gender: str
    address: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_changes(cls, patient_id: int, changes: PatientChanges) -> "PatientRecord":
        """Build a record from fully populated creation-mode changes."""
        return cls(id=patient_id, **changes.as_dict())

    def merge(self, changes: PatientChanges) -> "PatientRecord":
        """Return a copy with the supplied fields of changes applied."""
        return replace(self, **changes.as_dict())

    def to_dict(self) -> dict[str, Any]:
        """Export the record as a plain dictionary."""
        return asdict(self)
