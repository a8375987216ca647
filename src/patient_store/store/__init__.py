"""Store module.

This module provides the in-memory patient record store.
"""

from patient_store.store.patient_store import PatientStore

__all__ = [
    "PatientStore",
]
