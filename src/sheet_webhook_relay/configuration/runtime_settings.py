"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, tzinfo
from pathlib import Path

REQUIRED_COLUMN_FIELDS = ("email",)

# Fields whose cell values end up in the outgoing payload.
PAYLOAD_COLUMN_FIELDS = (
    "name",
    "email",
    "phone",
    "language",
    "status",
    "date_added",
    "response",
    "response_date",
    "comments",
)

# Columns present in the sheet layouts but never sent.
INFORMATIONAL_COLUMN_FIELDS = (
    "timestamp",
    "email_1_date",
    "email_2_date",
    "email_3_date",
    "notes",
)

KNOWN_COLUMN_FIELDS = PAYLOAD_COLUMN_FIELDS + INFORMATIONAL_COLUMN_FIELDS


@dataclass(frozen=True)
class ColumnMapping:
    """Logical field name to 1-based column position."""

    positions: Mapping[str, int]

    def position_of(self, field_name: str) -> int | None:
        return self.positions.get(field_name)

    def ordered_items(self) -> list[tuple[str, int]]:
        return sorted(self.positions.items(), key=lambda item: item[1])


@dataclass(frozen=True)
class WebhookSettings:
    """Webhook endpoint configuration."""

    url: str
    timeout_seconds: int = 30


@dataclass(frozen=True)
class SheetSettings:
    """Location of the sheet that receives appended rows."""

    name: str
    path: Path | None = None
    # Zone of the wall-clock date-times typed into the sheet.
    timezone: tzinfo = UTC


@dataclass(frozen=True)
class NormalizationSettings:
    """Toggles for behaviour that differs between sheet deployments."""

    lowercase_language: bool = False


@dataclass(frozen=True)
class RelayConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None
    webhook: WebhookSettings
    sheet: SheetSettings
    columns: ColumnMapping
    normalization: NormalizationSettings = field(default_factory=NormalizationSettings)
