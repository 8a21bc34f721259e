"""Shared constants for the XARF tools.

For environment-based configuration (schema version, ARF headers, etc.), use the env module:
    from common.env import env
    version = env.schema_version()
"""

from types import MappingProxyType

# Column order of the CSV exchange format (header row and data row)
CSV_COLUMNS: tuple[str, ...] = (
    "report_id",
    "timestamp",
    "category",
    "type",
    "source_identifier",
    "source_port",
    "destination_identifier",
    "destination_port",
    "severity",
    "reporter_org",
    "reporter_contact",
    "description",
)

# Alternative CSV header names accepted on input
CSV_HEADER_ALIASES = MappingProxyType(
    {
        "source_ip": "source_identifier",
        "destination_ip": "destination_identifier",
    }
)

# Report categories accepted by the validator
XARF_CATEGORIES: tuple[str, ...] = (
    "abuse",
    "vulnerability",
    "connection",
    "content",
    "copyright",
    "messaging",
    "reputation",
    "infrastructure",
)

SEVERITY_LEVELS: tuple[str, ...] = ("low", "medium", "high", "critical")

# ARF Feedback-Type -> XARF category
ARF_TO_XARF_CATEGORY = MappingProxyType(
    {
        "abuse": "abuse",
        "fraud": "fraud",
        "virus": "malware",
        "other": "abuse",
    }
)
ARF_DEFAULT_CATEGORY = "abuse"

# XARF category -> ARF Feedback-Type
XARF_TO_ARF_FEEDBACK_TYPE = MappingProxyType(
    {
        "abuse": "abuse",
        "fraud": "fraud",
        "legal": "other",
        "policy": "abuse",
        "malware": "virus",
        "security": "abuse",
    }
)
ARF_DEFAULT_FEEDBACK_TYPE = "other"

# Keys read from the message/feedback-report part of an ARF message
ARF_FEEDBACK_KEYS: frozenset[str] = frozenset(
    {
        "Feedback-Type",
        "Incident-ID",
        "Arrival-Date",
        "Source-IP",
        "Source-Port",
        "Destination-IP",
        "Destination-Port",
        "Reported-From",
    }
)

# File extension used when writing a converted report to a directory
FILE_EXTENSIONS = MappingProxyType(
    {
        "xarf": "json",
        "csv": "csv",
        "arf": "eml",
        "iodef": "xml",
    }
)
