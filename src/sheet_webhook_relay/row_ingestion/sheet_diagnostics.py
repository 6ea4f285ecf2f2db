"""Sheet structure diagnostics used to verify a column mapping against a real sheet."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openpyxl.utils import get_column_letter

from sheet_webhook_relay.configuration.runtime_settings import ColumnMapping

from .row_sources import HEADER_ROW, find_sheet, open_workbook

NOT_FOUND = "NOT FOUND"
EMPTY_HEADER = "(empty)"

# Text expected in the header of a mapped column; a miss usually means a column offset.
HEADER_HINTS = {"name": "Name", "email": "Email"}


@dataclass(frozen=True)
class HeaderColumn:
    """One header cell of the diagnosed sheet."""

    letter: str
    position: int
    title: str


@dataclass(frozen=True)
class MappingCheck:
    """Header text found at the position a logical field is mapped to."""

    field_name: str
    position: int
    header: str

    @property
    def found(self) -> bool:
        return self.header != NOT_FOUND


@dataclass(frozen=True)
class SheetDiagnosis:
    """Structure of a sheet compared against the configured column mapping."""

    sheet_name: str
    sheet_found: bool
    available_sheets: tuple[str, ...]
    row_count: int
    column_count: int
    headers: tuple[HeaderColumn, ...]
    mapping_checks: tuple[MappingCheck, ...]
    warnings: tuple[str, ...] = ()


def diagnose_sheet(
    workbook_path: Path | str, sheet_name: str, column_mapping: ColumnMapping
) -> SheetDiagnosis:
    """Describe the sheet layout and where each mapped field lands.

    Raises:
      RowSourceError: If the workbook cannot be opened.
    """
    workbook = open_workbook(Path(workbook_path))
    sheet = find_sheet(workbook, sheet_name)
    if sheet is None:
        return SheetDiagnosis(
            sheet_name=sheet_name,
            sheet_found=False,
            available_sheets=tuple(workbook.sheetnames),
            row_count=0,
            column_count=0,
            headers=(),
            mapping_checks=(),
        )

    header_values = [
        sheet.cell(row=HEADER_ROW, column=column).value
        for column in range(1, sheet.max_column + 1)
    ]
    headers = tuple(
        HeaderColumn(
            letter=get_column_letter(index),
            position=index,
            title=_header_text(value) or EMPTY_HEADER,
        )
        for index, value in enumerate(header_values, start=1)
    )
    checks = tuple(
        MappingCheck(
            field_name=field_name,
            position=position,
            header=_header_at(header_values, position),
        )
        for field_name, position in column_mapping.ordered_items()
    )
    warnings = tuple(
        warning for warning in (_header_warning(check) for check in checks) if warning
    )
    return SheetDiagnosis(
        sheet_name=sheet_name,
        sheet_found=True,
        available_sheets=tuple(workbook.sheetnames),
        row_count=sheet.max_row,
        column_count=sheet.max_column,
        headers=headers,
        mapping_checks=checks,
        warnings=warnings,
    )


def render_diagnosis(diagnosis: SheetDiagnosis) -> str:
    """Format a diagnosis as human-readable report lines."""
    if not diagnosis.sheet_found:
        return "\n".join(
            [
                f"Sheet '{diagnosis.sheet_name}' not found.",
                "Available sheets: " + ", ".join(diagnosis.available_sheets),
            ]
        )
    lines = [
        "=== SHEET STRUCTURE ===",
        f"Sheet Name: {diagnosis.sheet_name}",
        f"Total Columns: {diagnosis.column_count}",
        f"Total Rows: {diagnosis.row_count}",
        "",
        "=== HEADER ROW ===",
    ]
    lines.extend(
        f'Column {header.letter} ({header.position}): "{header.title}"'
        for header in diagnosis.headers
    )
    lines.extend(["", "=== COLUMN MAPPING ==="])
    lines.extend(
        f'{check.field_name} column {check.position} -> "{check.header}"'
        for check in diagnosis.mapping_checks
    )
    if diagnosis.warnings:
        lines.extend(["", "=== RECOMMENDATIONS ==="])
        lines.extend(f"WARNING: {warning}" for warning in diagnosis.warnings)
    return "\n".join(lines)


def _header_at(header_values: list[object], position: int) -> str:
    if position > len(header_values):
        return NOT_FOUND
    return _header_text(header_values[position - 1]) or NOT_FOUND


def _header_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _header_warning(check: MappingCheck) -> str | None:
    hint = HEADER_HINTS.get(check.field_name)
    if hint is None or hint.lower() in check.header.lower():
        return None
    return (
        f"Column {get_column_letter(check.position)} ({check.position}) mapped to "
        f'{check.field_name} does not appear to contain "{hint}".'
    )
