"""Lead normalization exports."""

from .lead_models import DEFAULT_LANGUAGE, PAYLOAD_KEYS, LeadRecord
from .row_normalizer import normalize, resolve_timestamp
from .sample_lead import build_sample_lead

__all__ = [
    "DEFAULT_LANGUAGE",
    "PAYLOAD_KEYS",
    "LeadRecord",
    "normalize",
    "resolve_timestamp",
    "build_sample_lead",
]
