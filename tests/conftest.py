"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import json
import logging
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def examples_dir(project_root: Path) -> Path:
    """
    Return the examples directory path.

    Args:
        project_root: Project root directory fixture.

    Returns:
        Path: Absolute path to the examples directory.
    """
    return project_root / "examples"


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Restore root logger handlers and level after each test.

    configure_logging() replaces the root handlers, so handlers bound to a
    finished CliRunner stream or a removed tmp_path are dropped here.
    """
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


@pytest.fixture
def sample_patient_dict() -> dict:
    """
    Return valid raw patient fields as a dictionary.

    Returns:
        dict: Raw patient field mapping accepted by PatientStore.create.
    """
    return {
        "name": "Jane Doe",
        "date_of_birth": "1990-05-12",
        "gender": "Female",
    }


@pytest.fixture
def seed_patients() -> list[dict]:
    """
    Return a list of valid raw seed records.

    Returns:
        list[dict]: Three raw patient mappings.
    """
    return [
        {
            "name": "Jane Doe",
            "date_of_birth": "1990-05-12",
            "gender": "Female",
            "address": "12 Harbor Lane",
            "phone": "555-555-1234",
        },
        {"name": " John Smith ", "date_of_birth": "1985-11-03", "gender": "MALE"},
        {"name": "Alex Rivera", "date_of_birth": "2001-02-28", "gender": "other"},
    ]


@pytest.fixture
def seed_json_file(tmp_path: Path, seed_patients: list[dict]) -> Path:
    """
    Write seed_patients to a temporary JSON seed file.

    Args:
        tmp_path: Pytest's temporary directory fixture.
        seed_patients: Seed records fixture.

    Returns:
        Path: Path to the JSON seed file.
    """
    seed_file = tmp_path / "patients.json"
    seed_file.write_text(json.dumps(seed_patients), encoding="utf-8")
    return seed_file


@pytest.fixture
def seed_csv_file(tmp_path: Path) -> Path:
    """
    Create a temporary CSV seed file.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Returns:
        Path: Path to the CSV seed file.
    """
    seed_file = tmp_path / "patients.csv"
    seed_file.write_text(
        "name,date_of_birth,gender,address,phone\n"
        'Jane Doe,1990-05-12,Female,"12 Harbor Lane, Portland",555-555-1234\n'
        "John Smith,1985-11-03,MALE,,\n",
        encoding="utf-8",
    )
    return seed_file
