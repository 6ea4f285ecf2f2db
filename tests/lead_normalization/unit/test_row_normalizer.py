"""Row normalization tests."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest
from sheet_webhook_relay.configuration.column_layouts import (
    FORM_RESPONSES_LAYOUT,
    LEADS_LAYOUT,
    column_layout,
)
from sheet_webhook_relay.lead_normalization.row_normalizer import normalize
from sheet_webhook_relay.row_ingestion.cell_values import to_raw_row

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


def _leads_row(**overrides: Any) -> list[object]:
    values: dict[str, object] = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+968 9000 0000",
        "language": "en",
        "status": "new",
        "date_added": "2025-05-30",
        "email_1_date": None,
        "email_2_date": None,
        "email_3_date": None,
        "notes": "internal",
        "response": "",
        "response_date": "",
        "comments": "",
    }
    values.update(overrides)
    return list(values.values())


def test_normalize_maps_leads_layout_columns() -> None:
    record = normalize(
        to_raw_row(_leads_row(response="Yes, I'll attend", comments="See you")),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.name == "Jane Doe"
    assert record.email == "jane@example.com"
    assert record.phone == "+968 9000 0000"
    assert record.language == "en"
    assert record.status == "new"
    assert record.timestamp == "2025-05-30"
    assert record.response == "Yes, I'll attend"
    assert record.attendance == "Yes, I'll attend"
    assert record.comments == "See you"


def test_normalize_respects_form_responses_offset() -> None:
    row = [datetime(2025, 6, 1, 10, 0), *_leads_row(name="Offset Person")]

    record = normalize(to_raw_row(row), column_layout(FORM_RESPONSES_LAYOUT), now=FIXED_NOW)

    assert record.name == "Offset Person"
    assert record.email == "jane@example.com"
    assert record.timestamp == "2025-05-30"


def test_normalize_trims_and_lowercases_email() -> None:
    record = normalize(
        to_raw_row(_leads_row(email="  Test@Example.COM ")),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.email == "test@example.com"


@pytest.mark.parametrize("email", [None, "", "   "])
def test_normalize_leaves_blank_email_empty(email: object) -> None:
    record = normalize(
        to_raw_row(_leads_row(email=email)), column_layout(LEADS_LAYOUT), now=FIXED_NOW
    )

    assert record.email == ""
    assert record.has_email is False
    assert record.missing_required_fields() == ("email",)


def test_normalize_formats_date_cells_as_iso_8601() -> None:
    record = normalize(
        to_raw_row(_leads_row(date_added=datetime(2025, 5, 30, 14, 15, 0))),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.timestamp == "2025-05-30T14:15:00+00:00"


def test_normalize_promotes_plain_dates_to_midnight_utc() -> None:
    record = normalize(
        to_raw_row(_leads_row(date_added=date(2025, 5, 30))),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.timestamp == "2025-05-30T00:00:00+00:00"


def test_normalize_converts_sheet_local_times_to_utc() -> None:
    record = normalize(
        to_raw_row(
            _leads_row(
                date_added=datetime(2025, 5, 30, 9, 0),
                response_date=datetime(2025, 6, 2, 18, 30),
            )
        ),
        column_layout(LEADS_LAYOUT),
        sheet_timezone=ZoneInfo("Asia/Muscat"),
        now=FIXED_NOW,
    )

    assert record.timestamp == "2025-05-30T05:00:00+00:00"
    assert record.response_date == "2025-06-02T14:30:00+00:00"


def test_normalize_passes_text_timestamps_through_unchanged() -> None:
    record = normalize(
        to_raw_row(_leads_row(date_added="30/05/2025 2:15 PM")),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.timestamp == "30/05/2025 2:15 PM"


@pytest.mark.parametrize("date_added", [None, "", "  ", 45812])
def test_normalize_falls_back_to_processing_time(date_added: object) -> None:
    record = normalize(
        to_raw_row(_leads_row(date_added=date_added)),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.timestamp == FIXED_NOW.isoformat()


def test_normalize_uses_wall_clock_when_no_clock_is_given() -> None:
    before = datetime.now(UTC)
    record = normalize(to_raw_row(_leads_row(date_added=None)), column_layout(LEADS_LAYOUT))
    after = datetime.now(UTC)

    stamped = datetime.fromisoformat(record.timestamp)
    assert before - timedelta(seconds=1) <= stamped <= after + timedelta(seconds=1)


def test_normalize_defaults_language_to_en() -> None:
    record = normalize(
        to_raw_row(_leads_row(language="  ")), column_layout(LEADS_LAYOUT), now=FIXED_NOW
    )

    assert record.language == "en"


def test_normalize_keeps_language_case_unless_configured() -> None:
    row = to_raw_row(_leads_row(language=" AR "))

    kept = normalize(row, column_layout(LEADS_LAYOUT), now=FIXED_NOW)
    lowered = normalize(row, column_layout(LEADS_LAYOUT), lowercase_language=True, now=FIXED_NOW)

    assert kept.language == "AR"
    assert lowered.language == "ar"


def test_normalize_degrades_short_rows_to_defaults() -> None:
    record = normalize(to_raw_row(["Only Name"]), column_layout(LEADS_LAYOUT), now=FIXED_NOW)

    assert record.name == "Only Name"
    assert record.email == ""
    assert record.phone == ""
    assert record.language == "en"
    assert record.response == ""
    assert record.attendance == ""
    assert record.timestamp == FIXED_NOW.isoformat()


def test_normalize_renders_numeric_cells_as_text() -> None:
    record = normalize(
        to_raw_row(_leads_row(phone=96890000000.0, status=3)),
        column_layout(LEADS_LAYOUT),
        now=FIXED_NOW,
    )

    assert record.phone == "96890000000"
    assert record.status == "3"
