"""In-memory patient record store.

This module provides the PatientStore, which owns patient records, assigns
their ids and runs all incoming field data through the normalizer before
changing any state.

The store has no internal locking. Callers sharing one instance across
threads must serialize access themselves.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional

from patient_store.logging_audit import get_logger, log_audit_event
from patient_store.models.patient import PatientChanges, PatientRecord
from patient_store.seed.loader import load_seed_file
from patient_store.utils.exceptions import NotFoundError, ValidationError
from patient_store.validation.normalizer import normalize


logger = get_logger(__name__)


class PatientStore:
    """Authoritative collection of patient records.

    Ids start at 1 and increase by one per successful create. They are never
    reused, even after deletion. Every operation either applies fully or
    leaves the store unchanged.

    Attributes:
        audit_enabled: Whether mutations emit audit events

    Example:
        >>> store = PatientStore()
        >>> patient = store.create(
        ...     {"name": "Jane Doe", "date_of_birth": "1990-05-12", "gender": "Female"}
        ... )
        >>> patient.id, patient.gender
        (1, 'female')
    """

    def __init__(
        self,
        seed_data: Iterable[Mapping[str, Any]] = (),
        audit_enabled: bool = True,
    ) -> None:
        """Create a store, running each seed mapping through create().

        Args:
            seed_data: Raw patient field mappings, created in order
            audit_enabled: Whether mutations emit audit events

        Raises:
            ValidationError: If any seed mapping is invalid
        """
        self._patients: dict[int, PatientRecord] = {}
        self._next_id = 1
        self.audit_enabled = audit_enabled

        for raw_fields in seed_data:
            self.create(raw_fields)

        if self._patients:
            logger.info(f"Seeded store with {len(self._patients)} patient record(s)")
            self._audit("STORE_SEEDED", {"status": "success", "record_count": len(self._patients)})

    @classmethod
    def from_seed_file(cls, file_path: Path, audit_enabled: bool = True) -> "PatientStore":
        """Create a store seeded from a JSON or CSV file.

        Args:
            file_path: Seed file path
            audit_enabled: Whether mutations emit audit events

        Returns:
            Seeded PatientStore

        Raises:
            FileNotFoundError: If the file does not exist
            SeedFileError: If the file cannot be parsed
            ValidationError: If any seed record is invalid
        """
        return cls(load_seed_file(file_path), audit_enabled=audit_enabled)

    @property
    def next_id(self) -> int:
        """Id that the next successful create will assign."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._patients)

    def __contains__(self, patient_id: object) -> bool:
        return patient_id in self._patients

    def list_patients(self) -> list[PatientRecord]:
        """Return all stored records in insertion order."""
        return list(self._patients.values())

    def get(self, patient_id: int) -> PatientRecord:
        """Return the record with the given id.

        Raises:
            NotFoundError: If no record has that id
        """
        try:
            return self._patients[patient_id]
        except KeyError:
            raise NotFoundError(patient_id) from None

    def create(self, raw_fields: Mapping[str, Any]) -> PatientRecord:
        """Validate raw fields and store them as a new record.

        Args:
            raw_fields: Raw patient field mapping. name, date_of_birth and
                gender are required; address and phone default to None.

        Returns:
            The stored record with its assigned id

        Raises:
            ValidationError: If any field is missing or invalid. No id is
                consumed and the store is unchanged.
        """
        changes = self._normalize(raw_fields, require_all_fields=True, patient_id=None)

        patient = PatientRecord.from_changes(self._next_id, changes)
        self._patients[patient.id] = patient
        self._next_id += 1

        logger.debug(f"Created patient {patient.id}")
        self._audit(
            "PATIENT_CREATED",
            {"status": "success", "patient_id": patient.id, "fields": changes.field_names},
        )
        return patient

    def update(self, patient_id: int, raw_fields: Mapping[str, Any]) -> PatientRecord:
        """Validate supplied fields and merge them over an existing record.

        Keys absent from raw_fields keep their stored value. An explicit None
        clears address or phone; for name, date_of_birth and gender it fails
        validation.

        Args:
            patient_id: Id of the record to update
            raw_fields: Raw field mapping with the fields to change

        Returns:
            The merged record

        Raises:
            NotFoundError: If no record has that id
            ValidationError: If a supplied field is invalid. The stored record
                is unchanged.
        """
        existing = self.get(patient_id)
        changes = self._normalize(raw_fields, require_all_fields=False, patient_id=patient_id)

        updated = existing.merge(changes)
        self._patients[patient_id] = updated

        logger.debug(f"Updated patient {patient_id}")
        self._audit(
            "PATIENT_UPDATED",
            {"status": "success", "patient_id": patient_id, "fields": changes.field_names},
        )
        return updated

    def delete(self, patient_id: int) -> None:
        """Remove a record permanently.

        Raises:
            NotFoundError: If no record has that id
        """
        if patient_id not in self._patients:
            raise NotFoundError(patient_id)

        del self._patients[patient_id]

        logger.debug(f"Deleted patient {patient_id}")
        self._audit("PATIENT_DELETED", {"status": "success", "patient_id": patient_id})

    def _normalize(
        self,
        raw_fields: Mapping[str, Any],
        require_all_fields: bool,
        patient_id: Optional[int],
    ) -> PatientChanges:
        try:
            return normalize(raw_fields, require_all_fields=require_all_fields)
        except ValidationError as e:
            details: dict[str, Any] = {
                "status": "failure",
                "operation": "create" if require_all_fields else "update",
                "error_field": e.field,
                "error_message": str(e),
            }
            if patient_id is not None:
                details["patient_id"] = patient_id
            self._audit("VALIDATION_FAILED", details)
            raise

    def _audit(self, event_type: str, details: dict[str, Any]) -> None:
        if self.audit_enabled:
            log_audit_event(event_type, details)
