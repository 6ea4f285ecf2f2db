"""Row ingestion entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo


@dataclass(frozen=True)
class TextCell:
    """Cell holding free text."""

    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberCell:
    """Cell holding a numeric value."""

    value: int | float

    def as_text(self) -> str:
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


@dataclass(frozen=True)
class DateCell:
    """Cell holding a date or date-time value."""

    value: date

    def as_text(self) -> str:
        return self.isoformat()

    def isoformat(self, sheet_timezone: tzinfo = UTC) -> str:
        """Render the value as an ISO-8601 UTC date-time.

        Naive values are wall-clock times of the sheet and are read in
        ``sheet_timezone``. Date-only values stand for midnight in that zone.
        """
        if isinstance(self.value, datetime):
            moment = self.value
        else:
            moment = datetime.combine(self.value, time())
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=sheet_timezone)
        return moment.astimezone(UTC).isoformat()


@dataclass(frozen=True)
class EmptyCell:
    """Cell without a value."""

    def as_text(self) -> str:
        return ""


Cell = TextCell | NumberCell | DateCell | EmptyCell
RawRow = tuple[Cell, ...]

EMPTY_CELL = EmptyCell()


def to_cell(value: object) -> Cell:
    """Convert a raw host value (openpyxl cell value or Python scalar) into a Cell."""
    if value is None:
        return EMPTY_CELL
    if isinstance(value, bool):
        return TextCell("true" if value else "false")
    if isinstance(value, int | float):
        return NumberCell(value)
    if isinstance(value, date):
        return DateCell(value)
    if isinstance(value, time):
        return TextCell(value.isoformat())
    text = str(value)
    if not text.strip():
        return EMPTY_CELL
    return TextCell(text)


def to_raw_row(values: Iterable[object]) -> RawRow:
    """Convert an iterable of raw host values into a RawRow."""
    return tuple(to_cell(value) for value in values)


def cell_at(row: RawRow, position: int | None) -> Cell:
    """Return the cell at a 1-based position, EmptyCell when out of range."""
    if position is None or position < 1 or position > len(row):
        return EMPTY_CELL
    return row[position - 1]
