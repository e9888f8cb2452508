"""
Command-line interface for Weight Ledger.

Provides commands for adding, listing, deleting, clearing and exporting
weight records, and for showing the running totals.
"""

from pathlib import Path

import typer

from weight_ledger.domain.weight import WeightUnit
from weight_ledger.infrastructure.storage.key_value_store import JsonFileStore
from weight_ledger.services.ledger import Ledger
from weight_ledger.services.output import OutputService
from weight_ledger.services.validation import validate_and_build
from weight_ledger.utils.exceptions import ValidationError, WeightLedgerError
from weight_ledger.utils.logging_config import get_logger, setup_logging
from weight_ledger.utils.parameters import ParameterLoader

app = typer.Typer(help="Weight Ledger - Item weights with unit conversion and running totals")

logger = get_logger(__name__)


def init_config(config_path: str = "config/config.yaml") -> ParameterLoader:
    """
    Initialize configuration and logging.

    Args:
        config_path: Path to configuration file.

    Returns:
        Parameter loader instance.
    """
    param_loader = ParameterLoader(config_path)
    setup_logging(param_loader.get_logging_config(), "weight_ledger")
    return param_loader


def open_ledger(param_loader: ParameterLoader) -> Ledger:
    """
    Create the session ledger and load its snapshot.

    Args:
        param_loader: Loaded configuration.

    Returns:
        Ledger rehydrated from storage.
    """
    storage_config = param_loader.get_storage_config()
    ledger = Ledger(JsonFileStore(storage_config.path), key=storage_config.key)
    ledger.load()
    return ledger


@app.command()
def add(
    name: str = typer.Argument("", help="Item name"),
    weight: str = typer.Argument("", help="Weight in the chosen unit"),
    unit: WeightUnit | None = typer.Option(None, help="Unit (default from config)"),
    notes: str = typer.Option("", help="Optional notes"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Add a weight record at the top of the ledger.
    """
    try:
        param_loader = init_config(config_path)
        display_config = param_loader.get_display_config()
        ledger = open_ledger(param_loader)

        record = validate_and_build(
            name,
            weight,
            unit or display_config.default_unit,
            notes,
            display=display_config,
        )
        ledger.insert(record)

        output_service = OutputService()
        row = output_service.table_row(record)
        typer.echo(f"Added {record.id}: {record.name} {row['weight']} ({row['weight_kg']} kg)")

    except ValidationError as e:
        logger.warning(f"Record rejected: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    except WeightLedgerError as e:
        logger.error(f"Add failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command(name="list")
def list_records(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Show every record, newest first, followed by the totals.
    """
    try:
        param_loader = init_config(config_path)
        ledger = open_ledger(param_loader)

        output_service = OutputService()
        typer.echo(output_service.render_table(ledger.records))
        typer.echo("")
        typer.echo(output_service.render_statistics(ledger.statistics()))

    except WeightLedgerError as e:
        logger.error(f"List failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def stats(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Show record count, total weight and average weight in kilograms.
    """
    try:
        param_loader = init_config(config_path)
        ledger = open_ledger(param_loader)

        output_service = OutputService()
        typer.echo(output_service.render_statistics(ledger.statistics()))

    except WeightLedgerError as e:
        logger.error(f"Stats failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def delete(
    record_id: str = typer.Argument(..., help="Identifier of the record to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Delete one record after confirmation.
    """
    try:
        param_loader = init_config(config_path)
        ledger = open_ledger(param_loader)

        record = ledger.get(record_id)
        if record is None:
            typer.echo(f"No record with id {record_id}")
            return

        if not yes:
            typer.confirm(f"Delete '{record.name}' ({record_id})?", abort=True)

        ledger.remove(record_id)
        typer.echo(f"Deleted {record_id}")

    except WeightLedgerError as e:
        logger.error(f"Delete failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Delete every record after confirmation.
    """
    try:
        param_loader = init_config(config_path)
        ledger = open_ledger(param_loader)

        if not yes:
            typer.confirm(f"Delete all {len(ledger)} records?", abort=True)

        ledger.clear()
        typer.echo("All records deleted")

    except WeightLedgerError as e:
        logger.error(f"Clear failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def export(
    output_file: str = typer.Argument(..., help="Destination file"),
    output_format: str = typer.Option("csv", help="Output format: csv or json"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """
    Export the record table to CSV or JSON.
    """
    try:
        if output_format not in ("csv", "json"):
            raise WeightLedgerError(f"Unsupported export format: {output_format}")

        param_loader = init_config(config_path)
        ledger = open_ledger(param_loader)

        output_service = OutputService()
        path = output_service.export(
            ledger.records, ledger.statistics(), Path(output_file), output_format
        )
        typer.echo(f"Exported {len(ledger)} records to {path}")

    except WeightLedgerError as e:
        logger.error(f"Export failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
