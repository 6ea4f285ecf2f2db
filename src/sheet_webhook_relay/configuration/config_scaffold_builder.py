"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Relay configuration template for sheet-webhook-relay.
# Replace every <REQUIRED> placeholder before running diagnose, relay-last-row or send-test.
# Replace <OPTIONAL> placeholders only when your setup needs them.

webhook:
  # Endpoint receiving one JSON POST per appended row.
  url: "<REQUIRED>"
  timeout_seconds: 30

sheet:
  # Sheet (tab) name holding the appended rows, matched exactly.
  name: "leads"
  # Workbook file, relative to this configuration file.
  path: "<OPTIONAL>"
  # IANA zone of date-times typed into the sheet; UTC when omitted.
  # timezone: "Asia/Muscat"

columns:
  # Choose the layout matching your sheet:
  #   leads          - 13 columns, Name in column A
  #   form_responses - 14 columns, form timestamp in column A, Name in column B
  layout: "leads"
  # Override single 1-based positions when your sheet differs from the layout.
  # mapping:
  #   email: 2
  #   response: 11

normalization:
  # Lowercase the language cell ("AR" -> "ar"). Off keeps the cell as typed.
  lowercase_language: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML relay configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder relay configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Relay configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
