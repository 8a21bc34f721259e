"""Field format rules."""

import re
from datetime import datetime
from typing import Any

from common.constants import XARF_CATEGORIES

from ..models import Issue, IssueSeverity, is_missing, report_version


class FormatValidator:
    """Validates the format of fields that are present.

    Each check is independent; a missing field is left to the mandatory
    field rules.
    """

    RULE_PREFIX = "FORMAT"
    VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
    UUID_V4_PATTERN = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        re.IGNORECASE,
    )

    def validate(self, report: dict[str, Any]) -> list[Issue]:
        """Run the format checks on a decoded XARF report.

        Args:
            report: Decoded XARF report

        Returns:
            List of validation issues found
        """
        issues = []

        version_field, version = report_version(report)
        if not is_missing(version) and not self._matches(self.VERSION_PATTERN, version):
            issues.append(
                self._error(
                    version_field,
                    "001",
                    f'Invalid {version_field} format. Expected: "X.Y.Z" (e.g., "4.0.0")',
                )
            )

        report_id = report.get("report_id")
        if not is_missing(report_id) and not self._matches(self.UUID_V4_PATTERN, report_id):
            issues.append(
                self._error("report_id", "002", "Invalid report_id format. Expected: UUID v4")
            )

        timestamp = report.get("timestamp")
        if not is_missing(timestamp) and not self._is_iso_timestamp(timestamp):
            issues.append(
                self._error(
                    "timestamp",
                    "003",
                    'Invalid timestamp format. Expected: ISO 8601 (e.g., "2024-01-15T10:00:00Z")',
                )
            )

        reporter = report.get("reporter")
        if not is_missing(reporter):
            if not isinstance(reporter, dict):
                issues.append(
                    self._error("reporter", "004", 'Field "reporter" must be an object')
                )
            elif is_missing(reporter.get("contact")):
                issues.append(
                    self._error(
                        "reporter.contact", "005", 'Missing mandatory field: "reporter.contact"'
                    )
                )

        category = report.get("category")
        if not is_missing(category) and category not in XARF_CATEGORIES:
            issues.append(
                self._error(
                    "category",
                    "006",
                    f'Invalid category "{category}". Must be one of: {", ".join(XARF_CATEGORIES)}',
                )
            )

        return issues

    def _error(self, field: str, number: str, message: str) -> Issue:
        return Issue(
            field=field,
            severity=IssueSeverity.ERROR,
            rule_id=f"{self.RULE_PREFIX}_{number}",
            message=message,
        )

    @staticmethod
    def _matches(pattern: re.Pattern[str], value: Any) -> bool:
        return isinstance(value, str) and pattern.match(value) is not None

    @staticmethod
    def _is_iso_timestamp(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        # fromisoformat only accepts a trailing Z from Python 3.11 on
        candidate = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            datetime.fromisoformat(candidate)
        except ValueError:
            return False
        return True
