"""Main CLI entry point for Patient Store.

This module provides the main Click command group for the patient-store CLI.
"""

from pathlib import Path
from typing import Optional

import click

from patient_store import __version__
from patient_store.cli.seed_commands import seed
from patient_store.config import load_config
from patient_store.logging_audit import configure_logging
from patient_store.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="patient-store")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact PII (names, dates of birth, addresses, phones) from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Patient Store - in-memory patient demographic records.

    Validates and inspects patient seed data using the same rules the store
    applies on create and update.

    Common usage:

        # Validate a seed file
        patient-store seed validate patients.json

        # Show the records a seed file produces
        patient-store seed show patients.csv

        # Enable verbose logging for debugging
        patient-store --verbose seed validate patients.json

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = verbose

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii or config_obj.logging.redact_pii

    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )


cli.add_command(seed)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        patient-store config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")

    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")

    click.echo("\nStore:")
    click.echo(f"  Seed file:   {config_obj.store.seed_file or 'Not configured'}")
    click.echo(f"  Audit:       {config_obj.store.audit_enabled}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"patient-store version {__version__}")
