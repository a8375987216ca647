"""Seed file loader for patient records.

This module reads raw patient field mappings from JSON or CSV files for
seeding a PatientStore. Values are passed through untouched (apart from
empty CSV cells becoming None); validation is left to the store.
"""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from patient_store.utils.exceptions import SeedFileError
from patient_store.validation.normalizer import OPTIONAL_FIELDS, REQUIRED_FIELDS


logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = [".json", ".csv"]


def load_seed_file(file_path: Path) -> list[dict[str, Any]]:
    """Load raw patient mappings from a seed file.

    Supported formats:
    - .json: a list of objects, or an object with a "patients" list
    - .csv: UTF-8 with a header row; every cell is read as a string and
      empty cells become None

    Args:
        file_path: Path to seed file

    Returns:
        List of raw patient field mappings, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        SeedFileError: If the suffix is unsupported or the content is malformed
    """
    logger.info(f"Loading seed data from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"Seed file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix == ".json":
        records = _load_json(file_path)
    elif suffix == ".csv":
        records = _load_csv(file_path)
    else:
        raise SeedFileError(
            f"Unsupported seed file type '{file_path.suffix}' for {file_path}. "
            f"Supported types: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    logger.info(f"Loaded {len(records)} seed record(s) from {file_path}")
    return records


def _load_json(file_path: Path) -> list[dict[str, Any]]:
    """Load seed records from a JSON document.

    Args:
        file_path: Path to JSON file

    Returns:
        List of raw patient mappings

    Raises:
        SeedFileError: If JSON is malformed or has the wrong shape
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise SeedFileError(
            f"Invalid JSON in seed file: {file_path}\n"
            f"Error: {e}\n"
            f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SeedFileError(f"Failed to read seed file: {file_path}. Error: {e}") from e

    if isinstance(document, dict) and "patients" in document:
        document = document["patients"]

    if not isinstance(document, list):
        raise SeedFileError(
            f"Seed file {file_path} must contain a JSON array of patient objects "
            f'or an object with a "patients" array'
        )

    for index, entry in enumerate(document, start=1):
        if not isinstance(entry, dict):
            raise SeedFileError(
                f"Seed file {file_path}: entry {index} is not a JSON object"
            )

    return document


def _load_csv(file_path: Path) -> list[dict[str, Any]]:
    """Load seed records from a CSV file.

    Args:
        file_path: Path to CSV file

    Returns:
        List of raw patient mappings

    Raises:
        SeedFileError: If the CSV cannot be read
    """
    try:
        df = pd.read_csv(
            file_path, encoding="utf-8", dtype=str, keep_default_na=False, na_values=[""]
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"Seed file {file_path} is empty")
        return []
    except Exception as e:
        raise SeedFileError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV with "
            f"UTF-8 encoding. Error: {e}"
        ) from e

    missing_columns = [col for col in REQUIRED_FIELDS if col not in df.columns]
    if missing_columns:
        logger.warning(
            f"Seed file {file_path} is missing columns: {', '.join(missing_columns)}"
        )

    known_columns = set(REQUIRED_FIELDS + OPTIONAL_FIELDS)
    unknown_columns = [col for col in df.columns if col not in known_columns]
    if unknown_columns:
        logger.warning(
            f"CSV contains unknown columns that will be ignored: {', '.join(unknown_columns)}"
        )

    # Empty cells come back as NaN; the store expects None
    df = df.astype(object).where(pd.notna(df), None)

    return df.to_dict(orient="records")
