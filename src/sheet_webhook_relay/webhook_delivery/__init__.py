"""Webhook delivery exports."""

from .delivery_outcomes import DeliveryResult
from .webhook_dispatch import (
    HTTPTransport,
    HttpxTransport,
    LeadDispatcher,
    TransportResponse,
    WebhookDispatcher,
    dispatch,
    encode_payload,
)

__all__ = [
    "DeliveryResult",
    "HTTPTransport",
    "HttpxTransport",
    "LeadDispatcher",
    "TransportResponse",
    "WebhookDispatcher",
    "dispatch",
    "encode_payload",
]
