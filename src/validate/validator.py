"""Main validator orchestrating all validation rules."""

import json
from typing import Any

from common.errors import ValidationInputError
from common.logger import get_logger
from convert.models import NormalizedReport
from convert.writers import XARFWriter

from .models import Issue, ValidationOptions, ValidationResult
from .rules.format_rules import FormatValidator
from .rules.mandatory_rules import MandatoryFieldValidator
from .rules.recommended_rules import RecommendedFieldValidator

logger = get_logger(__name__)


class XARFValidator:
    """Main validator orchestrating all validation rules."""

    def __init__(self, options: ValidationOptions | None = None):
        """Initialize the validator.

        Args:
            options: Validation options; defaults include warnings
        """
        self.options = options or ValidationOptions()

        # Rule-based validators, run in order
        self.validators = [
            MandatoryFieldValidator(),
            FormatValidator(),
        ]

        # Recommended-field checks only produce warnings
        if self.options.include_warnings:
            self.validators.append(RecommendedFieldValidator())

    def validate(self, report: Any) -> ValidationResult:
        """Validate a single XARF report.

        Args:
            report: Decoded report mapping, JSON text, or a NormalizedReport

        Returns:
            ValidationResult with errors and warnings in rule order

        Raises:
            ValidationInputError: If the input is not a report record
        """
        data = self._load(report)

        all_issues: list[Issue] = []
        for validator in self.validators:
            all_issues.extend(validator.validate(data))

        result = ValidationResult(issues=all_issues)
        logger.debug(
            f"Validated report {data.get('report_id')!r}: "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    @staticmethod
    def _load(report: Any) -> dict[str, Any]:
        if isinstance(report, NormalizedReport):
            return XARFWriter().to_dict(report)

        if isinstance(report, (str, bytes)):
            try:
                report = json.loads(report)
            except ValueError as e:
                raise ValidationInputError(f"Invalid JSON: {e}") from e

        if not isinstance(report, dict):
            raise ValidationInputError(
                f"Report must be a JSON object, got {type(report).__name__}"
            )
        return report


def validate(report: Any, options: ValidationOptions | None = None) -> ValidationResult:
    """Validate a XARF report with the given options.

    Convenience wrapper around XARFValidator for one-off calls.
    """
    return XARFValidator(options).validate(report)
