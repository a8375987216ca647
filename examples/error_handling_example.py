"""Error handling examples for the patient store.

This module demonstrates how a transport layer can translate store errors
into responses: validation errors (422), missing patients (404).
"""

import logging
from pathlib import Path

from patient_store.store import PatientStore
from patient_store.utils.exceptions import PatientStoreError, create_error_info

# Configure logging to see audit events in action
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def example_1_handle_validation_errors():
    """Example 1: Invalid input is rejected and nothing is stored."""
    print("=" * 80)
    print("EXAMPLE 1: Handling Validation Errors")
    print("=" * 80)
    print()

    store = PatientStore()

    try:
        store.create({"name": "Jane Doe", "date_of_birth": "2023-02-30", "gender": "female"})
    except PatientStoreError as e:
        info = create_error_info(e)
        print(f"  Status: {info.status_code}")
        print(f"  Field: {info.field}")
        print(f"  Message: {info.message}")
        print(f"  Remediation: {info.remediation}")

    print(f"  Stored patients: {len(store)} (next id still {store.next_id})")
    print()


def example_2_handle_not_found():
    """Example 2: Deleted ids stay gone and are never reused."""
    print("=" * 80)
    print("EXAMPLE 2: Handling Missing Patients")
    print("=" * 80)
    print()

    store = PatientStore.from_seed_file(Path("examples/patients_sample.json"))
    store.delete(1)

    try:
        store.get(1)
    except PatientStoreError as e:
        info = create_error_info(e)
        print(f"  Status: {info.status_code}")
        print(f"  Message: {info.message}")

    created = store.create({"name": "Sam Lee", "date_of_birth": "1979-07-14", "gender": "Male"})
    print(f"  New patient id: {created.id}")
    print()


if __name__ == "__main__":
    example_1_handle_validation_errors()
    example_2_handle_not_found()
