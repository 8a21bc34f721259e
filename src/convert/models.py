"""Data models for normalized abuse reports."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from common.errors import InvalidRequest


class ReportFormat(str, Enum):
    """Supported abuse reporting formats."""

    XARF = "xarf"
    ARF = "arf"
    CSV = "csv"
    IODEF = "iodef"

    @classmethod
    def parse(cls, label: "ReportFormat | str") -> "ReportFormat":
        """Resolve a format label to a ReportFormat member.

        Raises:
            InvalidRequest: If the label names no supported format
        """
        if isinstance(label, cls):
            return label
        try:
            return cls(str(label).strip().lower())
        except ValueError as e:
            raise InvalidRequest(
                f"Unsupported format: {label}. "
                f"Must be one of: {', '.join(f.value for f in cls)}"
            ) from e


@dataclass(frozen=True)
class Reporter:
    """Organization and contact address of the reporting party."""

    org: str | None = None
    contact: str | None = None


@dataclass(frozen=True)
class Evidence:
    """A single piece of evidence attached to a report."""

    type: str
    description: str | None = None
    hash: str | None = None
    hash_algorithm: str | None = None
    data: str | None = None
    filename: str | None = None
    size: int | None = None
    content_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Evidence":
        """Build evidence from a XARF evidence object, ignoring unknown keys."""

        def text(key: str) -> str | None:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            type=str(data.get("type") or ""),
            description=text("description"),
            hash=text("hash"),
            hash_algorithm=text("hash_algorithm"),
            data=text("data"),
            filename=text("filename"),
            size=coerce_int(data.get("size")),
            content_type=text("content_type"),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the XARF evidence object, omitting absent keys."""
        result: dict[str, Any] = {"type": self.type}
        for key in (
            "description",
            "hash",
            "hash_algorithm",
            "data",
            "filename",
            "size",
            "content_type",
        ):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass(frozen=True)
class NormalizedReport:
    """Canonical in-memory report shape all formats convert through.

    The five core fields are always strings (empty when unknown) and
    reporter is always present.
    """

    report_id: str = ""
    timestamp: str = ""
    category: str = ""
    type: str = ""
    source_identifier: str = ""
    source_port: int | None = None
    destination_identifier: str | None = None
    destination_port: int | None = None
    severity: str | None = None
    description: str | None = None
    reporter: Reporter = field(default_factory=Reporter)
    evidence: tuple[Evidence, ...] = ()
    confidence: float | None = None
    tags: tuple[str, ...] = ()
    schema_version: str = ""


def coerce_int(value: Any) -> int | None:
    """Convert a port or size value to int.

    Returns:
        Integer value, or None if the value is missing or not numeric

    Example:
        >>> coerce_int("8080")
        8080
        >>> coerce_int("n/a") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
