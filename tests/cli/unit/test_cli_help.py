"""CLI smoke tests."""

from click.testing import CliRunner
from sheet_webhook_relay.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "diagnose" in result.output
    assert "relay-last-row" in result.output
    assert "send-test" in result.output
