"""Entry point for running patient_store as a module.

This allows the package to be executed as:
    python -m patient_store
"""

from patient_store.cli.main import cli

if __name__ == "__main__":
    cli()
