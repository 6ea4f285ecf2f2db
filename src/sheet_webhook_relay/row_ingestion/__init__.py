"""Row ingestion exports."""

from .cell_values import (
    Cell,
    DateCell,
    EmptyCell,
    NumberCell,
    RawRow,
    TextCell,
    cell_at,
    to_cell,
    to_raw_row,
)
from .row_sources import RowSource, RowSourceError, StaticRowSource, WorkbookRowSource
from .sheet_diagnostics import SheetDiagnosis, diagnose_sheet, render_diagnosis

__all__ = [
    "Cell",
    "DateCell",
    "EmptyCell",
    "NumberCell",
    "RawRow",
    "TextCell",
    "cell_at",
    "to_cell",
    "to_raw_row",
    "RowSource",
    "RowSourceError",
    "StaticRowSource",
    "WorkbookRowSource",
    "SheetDiagnosis",
    "diagnose_sheet",
    "render_diagnosis",
]
