"""Fixed lead used to check webhook connectivity without a sheet row."""

from __future__ import annotations

from datetime import UTC, datetime

from .lead_models import LeadRecord


def build_sample_lead(now: datetime | None = None) -> LeadRecord:
    """Return the fixed lead sent by `send-test`, stamped with `now` or the current UTC time."""
    return LeadRecord(
        timestamp=(now or datetime.now(UTC)).isoformat(),
        name="Test User",
        email="test@example.com",
        phone="+968 1234 5678",
        language="en",
        status="",
        response="Yes, I'll attend",
        response_date="",
        comments="This is a test submission",
    )
