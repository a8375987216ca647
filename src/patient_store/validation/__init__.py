"""Validation module.

This module provides patient field validation and normalization.
"""

from patient_store.validation.normalizer import VALID_GENDERS, normalize

__all__ = [
    "VALID_GENDERS",
    "normalize",
]
