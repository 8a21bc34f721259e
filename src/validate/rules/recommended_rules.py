"""Recommended field rules, reported as warnings."""

from typing import Any

from ..models import Issue, IssueSeverity, is_missing

RECOMMENDED_FIELDS: tuple[str, ...] = ("description", "evidence")


class RecommendedFieldValidator:
    """Flags missing recommended fields and an out-of-range confidence score."""

    RULE_PREFIX = "RECOMMENDED"

    def validate(self, report: dict[str, Any]) -> list[Issue]:
        issues = [
            Issue(
                field=name,
                severity=IssueSeverity.WARNING,
                rule_id=f"{self.RULE_PREFIX}_001",
                message=f'Missing recommended field: "{name}"',
            )
            for name in RECOMMENDED_FIELDS
            if is_missing(report.get(name))
        ]

        if "confidence" in report and not self._is_confidence(report["confidence"]):
            issues.append(
                Issue(
                    field="confidence",
                    severity=IssueSeverity.WARNING,
                    rule_id=f"{self.RULE_PREFIX}_002",
                    message='Field "confidence" should be a number between 0 and 1',
                )
            )

        return issues

    @staticmethod
    def _is_confidence(value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return 0 <= value <= 1
