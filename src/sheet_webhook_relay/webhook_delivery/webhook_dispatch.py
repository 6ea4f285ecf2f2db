"""JSON webhook delivery service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from sheet_webhook_relay.configuration.runtime_settings import WebhookSettings
from sheet_webhook_relay.lead_normalization.lead_models import LeadRecord

from .delivery_outcomes import DeliveryResult

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
DEFAULT_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class TransportResponse:
    """Status code and body text returned by the endpoint."""

    status_code: int
    text: str


class HTTPTransport(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for HTTP clients used by the dispatcher."""

    def post_json(
        self,
        url: str,
        body: bytes,
        *,
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> TransportResponse: ...


class LeadDispatcher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for services that deliver one lead and report the outcome."""

    def dispatch(self, record: LeadRecord) -> DeliveryResult: ...


class HttpxTransport:  # pylint: disable=too-few-public-methods
    """Real HTTP transport implementation using httpx."""

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def post_json(
        self,
        url: str,
        body: bytes,
        *,
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> TransportResponse:
        with httpx.Client(timeout=timeout_seconds, transport=self._transport) as client:
            response = client.post(url, content=body, headers=dict(headers))
        return TransportResponse(status_code=response.status_code, text=response.text)


def encode_payload(record: LeadRecord) -> bytes:
    """Serialize the lead to the JSON body posted to the webhook."""
    return json.dumps(record.to_payload(), ensure_ascii=False).encode("utf-8")


def dispatch(
    record: LeadRecord,
    endpoint: str,
    *,
    transport: HTTPTransport | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> DeliveryResult:
    """POST the lead once and translate the outcome; never raises for transport faults."""
    client = transport or HttpxTransport()
    try:
        response = client.post_json(
            endpoint,
            encode_payload(record),
            headers=JSON_HEADERS,
            timeout_seconds=timeout_seconds,
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.debug("Webhook POST to %s raised %r", endpoint, exc)
        return DeliveryResult.unreachable(str(exc) or type(exc).__name__)

    if 200 <= response.status_code < 300:
        return DeliveryResult.delivered(response.status_code, response.text)
    return DeliveryResult.rejected(response.status_code, response.text)


class WebhookDispatcher:  # pylint: disable=too-few-public-methods
    """Service posting normalized leads to the configured webhook."""

    def __init__(self, settings: WebhookSettings, transport: HTTPTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport or HttpxTransport()

    def dispatch(self, record: LeadRecord) -> DeliveryResult:
        return dispatch(
            record,
            self._settings.url,
            transport=self._transport,
            timeout_seconds=self._settings.timeout_seconds,
        )
