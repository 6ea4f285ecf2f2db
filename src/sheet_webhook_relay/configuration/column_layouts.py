"""Built-in sheet column layouts."""

from __future__ import annotations

from types import MappingProxyType

from .runtime_settings import ColumnMapping

LEADS_LAYOUT = "leads"
FORM_RESPONSES_LAYOUT = "form_responses"

# Hand-maintained "leads" sheet, no timestamp column.
_LEADS_POSITIONS = {
    "name": 1,
    "email": 2,
    "phone": 3,
    "language": 4,
    "status": 5,
    "date_added": 6,
    "email_1_date": 7,
    "email_2_date": 8,
    "email_3_date": 9,
    "notes": 10,
    "response": 11,
    "response_date": 12,
    "comments": 13,
}

# Form-linked sheet: the form host inserts a timestamp as column 1.
_FORM_RESPONSES_POSITIONS = {"timestamp": 1} | {
    name: position + 1 for name, position in _LEADS_POSITIONS.items()
}

COLUMN_LAYOUTS = MappingProxyType(
    {
        LEADS_LAYOUT: ColumnMapping(MappingProxyType(_LEADS_POSITIONS)),
        FORM_RESPONSES_LAYOUT: ColumnMapping(MappingProxyType(_FORM_RESPONSES_POSITIONS)),
    }
)


def column_layout(name: str) -> ColumnMapping:
    """Return the built-in column mapping registered under ``name``.

    Raises:
      KeyError: If no layout with that name exists.
    """
    return COLUMN_LAYOUTS[name]
