"""Row-to-lead normalization service."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo

from sheet_webhook_relay.configuration.runtime_settings import ColumnMapping
from sheet_webhook_relay.row_ingestion.cell_values import (
    DateCell,
    RawRow,
    TextCell,
    cell_at,
)

from .lead_models import DEFAULT_LANGUAGE, LeadRecord


def normalize(
    raw_row: RawRow,
    column_mapping: ColumnMapping,
    *,
    lowercase_language: bool = False,
    sheet_timezone: tzinfo = UTC,
    now: datetime | None = None,
) -> LeadRecord:
    """Map a positional row onto a LeadRecord, degrading every field to its default.

    Args:
      raw_row: Cells of the appended row; may be shorter than the mapping expects.
      column_mapping: Logical field to 1-based column position.
      lowercase_language: Lowercase the language value after trimming.
      sheet_timezone: Zone of naive date-times in the row.
      now: Clock value used when the row carries no date-added value.

    Returns:
      The normalized lead. An empty ``email`` is not an error here; callers
      check ``LeadRecord.has_email`` before dispatching.
    """

    def text(field_name: str, default: str = "") -> str:
        cell = cell_at(raw_row, column_mapping.position_of(field_name))
        if isinstance(cell, DateCell):
            return cell.isoformat(sheet_timezone)
        return cell.as_text().strip() or default

    language = text("language", DEFAULT_LANGUAGE)
    if lowercase_language:
        language = language.lower()

    return LeadRecord(
        timestamp=resolve_timestamp(
            raw_row, column_mapping, sheet_timezone=sheet_timezone, now=now
        ),
        name=text("name"),
        email=text("email").lower(),
        phone=text("phone"),
        language=language,
        status=text("status"),
        response=text("response"),
        response_date=text("response_date"),
        comments=text("comments"),
    )


def resolve_timestamp(
    raw_row: RawRow,
    column_mapping: ColumnMapping,
    *,
    sheet_timezone: tzinfo = UTC,
    now: datetime | None = None,
) -> str:
    """Return the ISO-8601 timestamp for the row's date-added cell."""
    cell = cell_at(raw_row, column_mapping.position_of("date_added"))
    if isinstance(cell, DateCell):
        return cell.isoformat(sheet_timezone)
    if isinstance(cell, TextCell) and cell.value.strip():
        return cell.value
    return (now or datetime.now(UTC)).isoformat()
