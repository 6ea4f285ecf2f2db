"""Row source adapters for appended sheet rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from .cell_values import RawRow, to_raw_row

logger = logging.getLogger(__name__)

HEADER_ROW = 1


class RowSourceError(Exception):
    """Raised when a row source cannot be opened."""


class RowSource(Protocol):
    """Capability handed to the trigger handler by the hosting spreadsheet."""

    def last_appended_row(self) -> RawRow | None: ...

    def describe(self) -> str: ...


class StaticRowSource:
    """In-memory row source for manual invocations and tests."""

    def __init__(self, values: Iterable[object] | None, *, label: str = "static row") -> None:
        self._row = to_raw_row(values) if values is not None else None
        self._label = label

    def last_appended_row(self) -> RawRow | None:
        return self._row

    def describe(self) -> str:
        return self._label


class WorkbookRowSource:
    """Reads the most recently appended row of a named sheet in an .xlsx workbook."""

    def __init__(self, workbook_path: Path | str, sheet_name: str) -> None:
        self._path = Path(workbook_path)
        self._sheet_name = sheet_name

    def describe(self) -> str:
        return f"{self._path.name}!{self._sheet_name}"

    def last_appended_row(self) -> RawRow | None:
        sheet = find_sheet(open_workbook(self._path), self._sheet_name)
        if sheet is None:
            return None
        row_number = last_data_row(sheet)
        if row_number is None:
            logger.warning("No data rows found in sheet %r (only a header row).", self._sheet_name)
            return None
        logger.debug("Reading row %d of sheet %r.", row_number, self._sheet_name)
        values = [
            sheet.cell(row=row_number, column=column).value
            for column in range(1, sheet.max_column + 1)
        ]
        return to_raw_row(values)


def open_workbook(workbook_path: Path) -> Workbook:
    """Load a workbook with computed cell values instead of formulas.

    Raises:
      RowSourceError: If the workbook file does not exist or cannot be read.
    """
    if not workbook_path.exists():
        raise RowSourceError(f"Workbook file not found: {workbook_path}")
    try:
        return load_workbook(workbook_path, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, ValueError, KeyError) as exc:
        raise RowSourceError(f"Failed to read workbook {workbook_path}: {exc}") from exc


def find_sheet(workbook: Workbook, sheet_name: str) -> Worksheet | None:
    """Return the worksheet with exactly this name, or None when it is missing."""
    if sheet_name not in workbook.sheetnames:
        logger.error(
            "Sheet %r not found. Available sheets: %s",
            sheet_name,
            ", ".join(workbook.sheetnames),
        )
        return None
    sheet = workbook[sheet_name]
    assert isinstance(sheet, Worksheet)
    return sheet


def last_data_row(sheet: Worksheet) -> int | None:
    """Return the last non-empty row number below the header, if any."""
    for row_number in range(sheet.max_row, HEADER_ROW, -1):
        for column in range(1, sheet.max_column + 1):
            if _has_value(sheet.cell(row=row_number, column=column).value):
                return row_number
    return None


def _has_value(value: object) -> bool:
    if value is None:
        return False
    return str(value).strip() != ""
