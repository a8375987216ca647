"""Models module.

This module provides data models and dataclasses for the application.
"""

from patient_store.models.patient import UNSET, PatientChanges, PatientRecord

__all__ = [
    "UNSET",
    "PatientChanges",
    "PatientRecord",
]
