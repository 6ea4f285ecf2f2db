"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from sheet_webhook_relay.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    RelayConfiguration,
    load_configuration,
    write_placeholder_configuration,
)
from sheet_webhook_relay.lead_normalization import build_sample_lead
from sheet_webhook_relay.row_ingestion import (
    RowSourceError,
    WorkbookRowSource,
    diagnose_sheet,
    render_diagnosis,
)
from sheet_webhook_relay.trigger_handling import (
    RowAppendEvent,
    TriggerOutcome,
    deliver_record,
    handle_row_append,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sheet-webhook-relay")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Relay appended spreadsheet rows to a JSON webhook."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML relay configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML relay configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON relay configuration file",
)
_WORKBOOK_OPTION = click.option(
    "--workbook",
    "workbook_path",
    required=False,
    type=click.Path(path_type=str),
    help="Workbook to read instead of sheet.path from the configuration",
)


@cli.command(name="diagnose")
@_CONFIG_OPTION
@_WORKBOOK_OPTION
def diagnose(config_path: str, workbook_path: str | None) -> None:
    """Show the sheet header row and where each configured column points."""
    configuration = _load(config_path)
    workbook = _resolve_workbook(configuration, workbook_path)
    try:
        diagnosis = diagnose_sheet(workbook, configuration.sheet.name, configuration.columns)
    except RowSourceError as exc:
        raise CliError(str(exc)) from exc
    click.echo(render_diagnosis(diagnosis))
    if not diagnosis.sheet_found:
        raise CliError(f"Sheet '{configuration.sheet.name}' not found.")


@cli.command(name="relay-last-row")
@_CONFIG_OPTION
@_WORKBOOK_OPTION
def relay_last_row(config_path: str, workbook_path: str | None) -> None:
    """Send the last appended sheet row to the webhook."""
    configuration = _load(config_path)
    workbook = _resolve_workbook(configuration, workbook_path)
    source = WorkbookRowSource(workbook, configuration.sheet.name)
    outcome = handle_row_append(RowAppendEvent(source=source), configuration)
    _report(outcome)


@cli.command(name="send-test")
@_CONFIG_OPTION
def send_test(config_path: str) -> None:
    """Send a fixed sample lead to check the webhook connection."""
    configuration = _load(config_path)
    outcome = deliver_record(build_sample_lead(), configuration)
    _report(outcome)


def _load(config_path: str) -> RelayConfiguration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _resolve_workbook(configuration: RelayConfiguration, workbook_path: str | None) -> Path:
    if workbook_path:
        return Path(workbook_path)
    if configuration.sheet.path is None:
        raise CliError("No workbook given: pass --workbook or set sheet.path.")
    return configuration.sheet.path


def _report(outcome: TriggerOutcome) -> None:
    if outcome.delivered and outcome.delivery is not None:
        click.echo(f"delivered: status {outcome.delivery.status_code}")
        return
    if outcome.delivery is not None:
        raise CliError(f"{outcome.status.value}: {outcome.delivery.describe()}")
    detail = f": {outcome.detail}" if outcome.detail else ""
    raise CliError(f"{outcome.status.value}{detail}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
