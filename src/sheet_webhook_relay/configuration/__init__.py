"""Configuration domain exports."""

from .column_layouts import COLUMN_LAYOUTS, FORM_RESPONSES_LAYOUT, LEADS_LAYOUT, column_layout
from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    ColumnMapping,
    NormalizationSettings,
    RelayConfiguration,
    SheetSettings,
    WebhookSettings,
)

__all__ = [
    "ColumnMapping",
    "NormalizationSettings",
    "RelayConfiguration",
    "SheetSettings",
    "WebhookSettings",
    "COLUMN_LAYOUTS",
    "LEADS_LAYOUT",
    "FORM_RESPONSES_LAYOUT",
    "column_layout",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
