"""Webhook delivery domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of one webhook POST."""

    success: bool
    status_code: int | None
    response: str | None
    error: str | None

    @staticmethod
    def delivered(status_code: int, body: str) -> DeliveryResult:
        return DeliveryResult(success=True, status_code=status_code, response=body, error=None)

    @staticmethod
    def rejected(status_code: int, body: str) -> DeliveryResult:
        return DeliveryResult(success=False, status_code=status_code, response=None, error=body)

    @staticmethod
    def unreachable(description: str) -> DeliveryResult:
        return DeliveryResult(success=False, status_code=None, response=None, error=description)

    def describe(self) -> str:
        if self.success:
            return f"delivered (status {self.status_code})"
        status = self.status_code if self.status_code is not None else "n/a"
        return f"failed (status {status}): {self.error or 'Unknown error'}"
