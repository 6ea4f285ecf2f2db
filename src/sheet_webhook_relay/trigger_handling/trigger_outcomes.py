"""Trigger handling entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sheet_webhook_relay.lead_normalization.lead_models import LeadRecord
from sheet_webhook_relay.row_ingestion.row_sources import RowSource
from sheet_webhook_relay.webhook_delivery.delivery_outcomes import DeliveryResult


class TriggerStatus(str, Enum):
    """Terminal state of one row-append trigger invocation."""

    DELIVERED = "delivered"
    DELIVERY_FAILED = "delivery_failed"
    NO_TRIGGER_CONTEXT = "no_trigger_context"
    NO_ROW = "no_row"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    FAULT = "fault"


@dataclass(frozen=True)
class RowAppendEvent:
    """Event context supplied by the host when a row is appended."""

    source: RowSource | None


@dataclass(frozen=True)
class TriggerOutcome:
    """What happened to one appended row."""

    status: TriggerStatus
    record: LeadRecord | None = None
    delivery: DeliveryResult | None = None
    detail: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status == TriggerStatus.DELIVERED
