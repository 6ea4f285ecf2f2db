"""Webhook dispatch tests."""

from __future__ import annotations

import json
from collections.abc import Mapping

import httpx
from sheet_webhook_relay.configuration.runtime_settings import WebhookSettings
from sheet_webhook_relay.lead_normalization.lead_models import PAYLOAD_KEYS, LeadRecord
from sheet_webhook_relay.webhook_delivery.delivery_outcomes import DeliveryResult
from sheet_webhook_relay.webhook_delivery.webhook_dispatch import (
    HttpxTransport,
    TransportResponse,
    WebhookDispatcher,
    dispatch,
)

ENDPOINT = "https://hook.example.com/lead"


def _record(**overrides) -> LeadRecord:
    defaults = {
        "timestamp": "2025-06-01T12:00:00+00:00",
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+968 9000 0000",
        "language": "en",
        "status": "",
        "response": "Yes, I'll attend",
        "response_date": "",
        "comments": "",
    }
    defaults.update(overrides)
    return LeadRecord(**defaults)


class FakeTransport:
    def __init__(
        self, response: TransportResponse | None = None, error: Exception | None = None
    ) -> None:
        self.response = response or TransportResponse(status_code=200, text="OK")
        self.error = error
        self.calls: list[dict[str, object]] = []

    def post_json(
        self,
        url: str,
        body: bytes,
        *,
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> TransportResponse:
        self.calls.append(
            {"url": url, "body": body, "headers": dict(headers), "timeout": timeout_seconds}
        )
        if self.error is not None:
            raise self.error
        return self.response


def test_dispatch_success_captures_status_and_body() -> None:
    transport = FakeTransport(TransportResponse(status_code=200, text="OK"))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result == DeliveryResult(success=True, status_code=200, response="OK", error=None)


def test_dispatch_posts_json_body_once() -> None:
    transport = FakeTransport()

    dispatch(_record(), ENDPOINT, transport=transport, timeout_seconds=7)

    assert len(transport.calls) == 1
    call = transport.calls[0]
    assert call["url"] == ENDPOINT
    assert call["headers"] == {"Content-Type": "application/json"}
    assert call["timeout"] == 7
    body = json.loads(call["body"])  # type: ignore[arg-type]
    assert set(body) == set(PAYLOAD_KEYS)
    assert body["attendance"] == body["response"] == "Yes, I'll attend"


def test_dispatch_non_2xx_is_a_failure_with_body_as_error() -> None:
    transport = FakeTransport(TransportResponse(status_code=500, text="Internal Error"))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result == DeliveryResult(
        success=False, status_code=500, response=None, error="Internal Error"
    )


def test_dispatch_treats_redirect_status_as_failure() -> None:
    transport = FakeTransport(TransportResponse(status_code=302, text="moved"))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result.success is False
    assert result.status_code == 302


def test_dispatch_accepts_any_2xx_status() -> None:
    transport = FakeTransport(TransportResponse(status_code=204, text=""))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result.success is True
    assert result.status_code == 204


def test_dispatch_transport_error_never_raises() -> None:
    transport = FakeTransport(error=httpx.ConnectError("Name or service not known"))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result.success is False
    assert result.status_code is None
    assert result.error == "Name or service not known"


def test_dispatch_uses_exception_name_for_blank_errors() -> None:
    transport = FakeTransport(error=TimeoutError())

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result.success is False
    assert result.error == "TimeoutError"


def test_httpx_transport_posts_through_httpx_client() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="Accepted")

    transport = HttpxTransport(transport=httpx.MockTransport(handler))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result == DeliveryResult.delivered(200, "Accepted")
    assert seen[0].method == "POST"
    assert seen[0].headers["content-type"] == "application/json"
    assert json.loads(seen[0].content)["email"] == "jane@example.com"


def test_httpx_transport_connection_failure_resolves_to_result() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))

    result = dispatch(_record(), ENDPOINT, transport=transport)

    assert result.success is False
    assert result.status_code is None
    assert "connection refused" in (result.error or "")


def test_webhook_dispatcher_uses_configured_url_and_timeout() -> None:
    transport = FakeTransport()
    dispatcher = WebhookDispatcher(
        WebhookSettings(url="https://hook.example.com/x", timeout_seconds=12), transport
    )

    result = dispatcher.dispatch(_record())

    assert result.success is True
    assert transport.calls[0]["url"] == "https://hook.example.com/x"
    assert transport.calls[0]["timeout"] == 12


def test_delivery_result_describe_distinguishes_outcomes() -> None:
    assert DeliveryResult.delivered(200, "OK").describe() == "delivered (status 200)"
    assert DeliveryResult.rejected(404, "nope").describe() == "failed (status 404): nope"
    assert DeliveryResult.unreachable("dns").describe() == "failed (status n/a): dns"
