"""Row-append trigger use-case service."""

from __future__ import annotations

import logging
from datetime import datetime

from sheet_webhook_relay.configuration.runtime_settings import RelayConfiguration
from sheet_webhook_relay.lead_normalization.lead_models import LeadRecord
from sheet_webhook_relay.lead_normalization.row_normalizer import normalize
from sheet_webhook_relay.webhook_delivery.webhook_dispatch import (
    LeadDispatcher,
    WebhookDispatcher,
)

from .trigger_outcomes import RowAppendEvent, TriggerOutcome, TriggerStatus

logger = logging.getLogger(__name__)


def handle_row_append(
    event: RowAppendEvent | None,
    configuration: RelayConfiguration,
    *,
    dispatcher: LeadDispatcher | None = None,
    now: datetime | None = None,
) -> TriggerOutcome:
    """Normalize the appended row and post it to the webhook.

    Every failure ends here: the outcome is logged and returned, never raised.
    """
    try:
        return _handle(event, configuration, dispatcher=dispatcher, now=now)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Unexpected error while handling appended row: %s", exc)
        return TriggerOutcome(status=TriggerStatus.FAULT, detail=str(exc) or type(exc).__name__)


def deliver_record(
    record: LeadRecord,
    configuration: RelayConfiguration,
    *,
    dispatcher: LeadDispatcher | None = None,
) -> TriggerOutcome:
    """Post an already normalized lead and log the delivery outcome."""
    if not record.has_email:
        logger.error("Email is required but was empty; webhook not called.")
        return TriggerOutcome(
            status=TriggerStatus.MISSING_REQUIRED_FIELD,
            record=record,
            detail="email",
        )

    resolved_dispatcher = dispatcher or WebhookDispatcher(configuration.webhook)
    logger.info("Sending lead %s to webhook.", record.email)
    delivery = resolved_dispatcher.dispatch(record)
    if delivery.success:
        logger.info(
            "Successfully sent lead %s to webhook (status %s).",
            record.email,
            delivery.status_code,
        )
        return TriggerOutcome(status=TriggerStatus.DELIVERED, record=record, delivery=delivery)

    logger.error("Failed to send lead %s to webhook: %s", record.email, delivery.describe())
    return TriggerOutcome(
        status=TriggerStatus.DELIVERY_FAILED,
        record=record,
        delivery=delivery,
        detail=delivery.error,
    )


def _handle(
    event: RowAppendEvent | None,
    configuration: RelayConfiguration,
    *,
    dispatcher: LeadDispatcher | None,
    now: datetime | None,
) -> TriggerOutcome:
    if event is None or event.source is None:
        logger.error("No trigger context: this handler must be called with a row-append event.")
        return TriggerOutcome(status=TriggerStatus.NO_TRIGGER_CONTEXT)

    raw_row = event.source.last_appended_row()
    if raw_row is None:
        logger.error("No appended row available from %s.", event.source.describe())
        return TriggerOutcome(status=TriggerStatus.NO_ROW, detail=event.source.describe())

    record = normalize(
        raw_row,
        configuration.columns,
        lowercase_language=configuration.normalization.lowercase_language,
        sheet_timezone=configuration.sheet.timezone,
        now=now,
    )
    _log_extracted(record)
    return deliver_record(record, configuration, dispatcher=dispatcher)


def _log_extracted(record: LeadRecord) -> None:
    logger.info(
        "Extracted lead: name=%r email=%r phone=%r language=%r status=%r "
        "response=%r comments=%r",
        record.name,
        record.email,
        record.phone,
        record.language,
        record.status,
        record.response,
        record.comments,
    )
