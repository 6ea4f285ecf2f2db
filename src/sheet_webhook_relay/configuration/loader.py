"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from datetime import UTC, tzinfo
from typing import Any
from urllib.parse import urlsplit
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .column_layouts import COLUMN_LAYOUTS
from .runtime_settings import (
    KNOWN_COLUMN_FIELDS,
    REQUIRED_COLUMN_FIELDS,
    ColumnMapping,
    NormalizationSettings,
    RelayConfiguration,
    SheetSettings,
    WebhookSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> RelayConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return RelayConfiguration(
        path=path,
        webhook=_parse_webhook_section(parsed.get("webhook")),
        sheet=_parse_sheet_section(parsed.get("sheet"), path.parent),
        columns=_parse_columns_section(parsed.get("columns")),
        normalization=_parse_normalization_section(parsed.get("normalization")),
    )


def _parse_webhook_section(value: Any) -> WebhookSettings:
    section = _require_mapping(value, "webhook")
    url = _require_non_empty_string(section.get("url"), "webhook.url")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError("webhook.url must be an absolute http(s) URL.")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "webhook.timeout_seconds"
    )
    return WebhookSettings(url=url, timeout_seconds=timeout_seconds)


def _parse_sheet_section(value: Any, base_path: Path) -> SheetSettings:
    section = _require_mapping(value, "sheet")
    name = _require_non_empty_string(section.get("name"), "sheet.name")
    path_value = _optional_string(section.get("path"), "sheet.path")
    workbook_path = _resolve_path(base_path, path_value) if path_value else None
    timezone_name = _optional_string(section.get("timezone"), "sheet.timezone")
    return SheetSettings(
        name=name,
        path=workbook_path,
        timezone=_resolve_timezone(timezone_name) if timezone_name else UTC,
    )


def _resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ConfigurationError(
            f"sheet.timezone '{name}' is not a known IANA time zone."
        ) from exc


def _parse_columns_section(value: Any) -> ColumnMapping:
    section = _require_mapping(value, "columns")
    layout_name = _optional_string(section.get("layout"), "columns.layout")
    overrides = section.get("mapping")
    if layout_name is None and overrides is None:
        raise ConfigurationError("columns requires a layout, a mapping, or both.")

    positions: dict[str, int] = {}
    if layout_name is not None:
        if layout_name not in COLUMN_LAYOUTS:
            available = ", ".join(sorted(COLUMN_LAYOUTS))
            raise ConfigurationError(
                f"columns.layout '{layout_name}' is unknown (available: {available})."
            )
        positions.update(COLUMN_LAYOUTS[layout_name].positions)

    if overrides is not None:
        mapping = _require_mapping(overrides, "columns.mapping")
        for field_name, position in mapping.items():
            if field_name not in KNOWN_COLUMN_FIELDS:
                raise ConfigurationError(f"columns.mapping field '{field_name}' is unknown.")
            positions[field_name] = _require_positive_int(
                position, f"columns.mapping.{field_name}"
            )

    for field_name in REQUIRED_COLUMN_FIELDS:
        if field_name not in positions:
            raise ConfigurationError(f"columns must map the '{field_name}' field.")
    return ColumnMapping(positions=positions)


def _parse_normalization_section(value: Any) -> NormalizationSettings:
    if value is None:
        return NormalizationSettings()
    section = _require_mapping(value, "normalization")
    lowercase_language = section.get("lowercase_language", False)
    if not isinstance(lowercase_language, bool):
        raise ConfigurationError("normalization.lowercase_language must be a boolean.")
    return NormalizationSettings(lowercase_language=lowercase_language)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
