"""Seed module.

This module loads seed patient data from JSON and CSV files.
"""

from patient_store.seed.loader import load_seed_file

__all__ = [
    "load_seed_file",
]
