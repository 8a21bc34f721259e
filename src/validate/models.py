"""Data models for validation options and results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IssueSeverity(Enum):
    """Severity levels for validation issues."""

    ERROR = "error"  # Report is invalid
    WARNING = "warning"  # Recommended content missing or out of range


@dataclass(frozen=True)
class Issue:
    """A single validation issue."""

    field: str  # e.g., "reporter.contact"
    severity: IssueSeverity
    rule_id: str  # e.g., "FORMAT_002"
    message: str


@dataclass(frozen=True)
class ValidationOptions:
    """Validator configuration."""

    strict: bool = False  # Reserved; accepted but not used for branching
    include_warnings: bool = True


@dataclass
class ValidationResult:
    """Result of validating a single report."""

    issues: list[Issue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Error messages in the order they were found."""
        return [i.message for i in self.issues if i.severity == IssueSeverity.ERROR]

    @property
    def warnings(self) -> list[str]:
        """Warning messages in the order they were found."""
        return [i.message for i in self.issues if i.severity == IssueSeverity.WARNING]

    @property
    def valid(self) -> bool:
        """A report is valid when it has no errors; warnings do not count."""
        return not any(i.severity == IssueSeverity.ERROR for i in self.issues)

    def as_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def is_missing(value: Any) -> bool:
    """Check whether a report value counts as absent.

    None, empty strings, False and numeric zero are absent; empty objects and
    lists are present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


VERSION_FIELDS: tuple[str, ...] = ("xarf_version", "schema_version")


def report_version(report: dict[str, Any]) -> tuple[str, Any]:
    """Find the schema version of a report.

    XARF reports carry it as xarf_version; reports emitted by the converter
    use schema_version. The first key present wins.

    Returns:
        Tuple of (field name, value); the value is None when neither key exists
    """
    for name in VERSION_FIELDS:
        if name in report:
            return name, report[name]
    return VERSION_FIELDS[0], None
