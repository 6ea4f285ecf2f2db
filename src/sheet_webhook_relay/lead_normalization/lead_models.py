"""Lead domain entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LANGUAGE = "en"

PAYLOAD_KEYS = (
    "timestamp",
    "name",
    "email",
    "phone",
    "language",
    "status",
    "attendance",
    "response",
    "responseDate",
    "comments",
)


@dataclass(frozen=True)
class LeadRecord:  # pylint: disable=too-many-instance-attributes
    """Canonical lead built from one appended sheet row."""

    timestamp: str
    name: str = ""
    email: str = ""
    phone: str = ""
    language: str = DEFAULT_LANGUAGE
    status: str = ""
    response: str = ""
    response_date: str = ""
    comments: str = ""

    @property
    def attendance(self) -> str:
        """Alias of ``response`` kept for consumers expecting an attendance key."""
        return self.response

    @property
    def has_email(self) -> bool:
        return bool(self.email)

    def missing_required_fields(self) -> tuple[str, ...]:
        return () if self.has_email else ("email",)

    def to_payload(self) -> dict[str, str]:
        """Build the JSON object posted to the webhook."""
        return {
            "timestamp": self.timestamp or "",
            "name": self.name or "",
            "email": self.email or "",
            "phone": self.phone or "",
            "language": self.language or DEFAULT_LANGUAGE,
            "status": self.status or "",
            "attendance": self.attendance or "",
            "response": self.response or "",
            "responseDate": self.response_date or "",
            "comments": self.comments or "",
        }
