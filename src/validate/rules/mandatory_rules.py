"""Mandatory field rules."""

from typing import Any

from ..models import Issue, IssueSeverity, is_missing, report_version

MANDATORY_FIELDS: tuple[str, ...] = (
    "report_id",
    "timestamp",
    "reporter",
    "source_identifier",
    "category",
    "type",
)


class MandatoryFieldValidator:
    """Checks that every mandatory XARF field is present and non-empty."""

    RULE_PREFIX = "MANDATORY"

    def validate(self, report: dict[str, Any]) -> list[Issue]:
        """Report one error per missing mandatory field.

        Args:
            report: Decoded XARF report

        Returns:
            List of validation issues found, in field order
        """
        version_field, version = report_version(report)
        checks = [(version_field, version)]
        checks += [(name, report.get(name)) for name in MANDATORY_FIELDS]

        return [
            Issue(
                field=name,
                severity=IssueSeverity.ERROR,
                rule_id=f"{self.RULE_PREFIX}_001",
                message=f'Missing mandatory field: "{name}"',
            )
            for name, value in checks
            if is_missing(value)
        ]
