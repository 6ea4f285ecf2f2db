"""Trigger handling exports."""

from .row_append_handler import deliver_record, handle_row_append
from .trigger_outcomes import RowAppendEvent, TriggerOutcome, TriggerStatus

__all__ = [
    "RowAppendEvent",
    "TriggerOutcome",
    "TriggerStatus",
    "deliver_record",
    "handle_row_append",
]
