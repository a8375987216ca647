"""Seed-related CLI commands for Patient Store.

This module provides CLI commands for validating seed files and inspecting
the store they produce.
"""

import json as json_lib
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import click

from patient_store.models.patient import PatientRecord
from patient_store.seed.loader import load_seed_file
from patient_store.store.patient_store import PatientStore
from patient_store.utils.exceptions import (
    NotFoundError,
    SeedFileError,
    ValidationError,
    create_error_info,
)
from patient_store.validation.normalizer import normalize

logger = logging.getLogger(__name__)


@contextmanager
def _console_logging_suppressed(enabled: bool) -> Iterator[None]:
    """Silence the console log handler so JSON output stays machine-readable."""
    root_logger = logging.getLogger()
    original_levels: dict[logging.Handler, int] = {}

    if enabled:
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not hasattr(handler, "baseFilename"):
                original_levels[handler] = handler.level
                handler.setLevel(logging.CRITICAL + 1)  # Effectively disable

    try:
        yield
    finally:
        for handler, level in original_levels.items():
            handler.setLevel(level)


@click.group()
def seed() -> None:
    """Seed file validation and inspection commands."""
    pass


@seed.command("validate")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
def validate_seed_command(file: Path, json_output: bool) -> None:
    """Validate every patient record in a seed file.

    Each record is checked on its own, so all invalid rows are reported at
    once. Exits with code 0 when every record is valid, 1 otherwise.

    Examples:

        # Validate a JSON seed file
        patient-store seed validate patients.json

        # Validate a CSV seed file and emit JSON for automation
        patient-store seed validate patients.csv --json
    """
    with _console_logging_suppressed(json_output):
        try:
            records = load_seed_file(file)
        except SeedFileError as e:
            if json_output:
                click.echo(json_lib.dumps({"error": create_error_info(e).to_dict()}, indent=2))
            else:
                click.secho(f"Seed file error: {e}", fg="red", err=True)
            logger.error(f"Seed file error: {e}")
            sys.exit(1)

        issues: list[dict[str, Any]] = []
        for row_number, raw_fields in enumerate(records, start=1):
            try:
                normalize(raw_fields, require_all_fields=True)
            except ValidationError as e:
                issues.append({"row": row_number, "field": e.field, "message": str(e)})

        summary = {
            "file": str(file),
            "total_rows": len(records),
            "valid_rows": len(records) - len(issues),
            "errors": issues,
        }

        if json_output:
            click.echo(json_lib.dumps(summary, indent=2))
        else:
            click.echo(f"Seed file: {file}")
            click.echo(f"  Total rows: {summary['total_rows']}")
            click.echo(f"  Valid rows: {summary['valid_rows']}")
            if issues:
                click.secho(f"\nERRORS ({len(issues)}):", fg="red")
                for issue in issues:
                    click.secho(
                        f"  Row {issue['row']} [{issue['field']}]: {issue['message']}",
                        fg="red",
                    )
            else:
                click.secho("\n✓ All records are valid", fg="green")

        if issues:
            logger.error(f"Seed validation failed: {len(issues)} invalid row(s)")
            sys.exit(1)

        logger.info("Seed validation complete. Exit code: 0")


@seed.command("show")
@click.argument("file", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--id", "patient_id", type=int, help="Show a single patient by id")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def show_seed_command(
    ctx: click.Context,
    file: Optional[Path],
    patient_id: Optional[int],
    json_output: bool,
) -> None:
    """Load a seed file into a store and display its patients.

    FILE defaults to store.seed_file from the configuration.

    Examples:

        # List all patients from a seed file
        patient-store seed show patients.json

        # Show one patient as JSON
        patient-store seed show patients.csv --id 2 --json
    """
    config = (ctx.obj or {}).get("config")
    if file is None and config is not None:
        file = config.store.seed_file
    if file is None:
        click.secho(
            "No seed file given. Pass FILE or set store.seed_file in the configuration.",
            fg="red",
            err=True,
        )
        sys.exit(1)

    audit_enabled = config.store.audit_enabled if config is not None else True

    with _console_logging_suppressed(json_output):
        try:
            store = PatientStore.from_seed_file(file, audit_enabled=audit_enabled)
            if patient_id is not None:
                patients = [store.get(patient_id)]
            else:
                patients = store.list_patients()
        except (ValidationError, NotFoundError, SeedFileError, FileNotFoundError) as e:
            if json_output:
                click.echo(json_lib.dumps({"error": create_error_info(e).to_dict()}, indent=2))
            else:
                click.secho(f"Error: {e}", fg="red", err=True)
            logger.error(f"Failed to show seed data from {file}: {e}")
            sys.exit(1)

        if json_output:
            if patient_id is not None:
                click.echo(json_lib.dumps(patients[0].to_dict(), indent=2))
            else:
                click.echo(json_lib.dumps([p.to_dict() for p in patients], indent=2))
            return

        click.echo(f"Patients ({len(patients)}):")
        for patient in patients:
            click.echo(_format_patient(patient))


def _format_patient(patient: PatientRecord) -> str:
    """Format one patient as a single display line."""
    return (
        f"  [{patient.id}] {patient.name} | {patient.date_of_birth} | {patient.gender}"
        f" | address: {patient.address or '-'} | phone: {patient.phone or '-'}"
    )
