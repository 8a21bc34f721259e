"""Validation result reporters."""

import json

from common.logger import get_logger

from .models import IssueSeverity, ValidationResult

logger = get_logger(__name__)


class ValidationReporter:
    """Format and display validation results."""

    def __init__(self, show_warnings: bool = True):
        """Initialize the reporter.

        Args:
            show_warnings: Whether to show warning-level messages
        """
        self.show_warnings = show_warnings

    def report_console(self, result: ValidationResult, source: str | None = None) -> int:
        """Print a validation result to the console.

        Args:
            result: Validation result to report
            source: Optional name of the validated input, shown as a heading

        Returns:
            Exit code (0 for a valid report, 1 if errors found)
        """
        if source:
            logger.info(f"\n{source}:")

        total_errors = 0
        total_warnings = 0

        for issue in result.issues:
            if issue.severity == IssueSeverity.ERROR:
                total_errors += 1
                icon = "[red]✗[/red]"
            else:
                total_warnings += 1
                icon = "[yellow]⚠[/yellow]"
                if not self.show_warnings:
                    continue

            logger.info(f"  {icon} [bold]{issue.field}[/bold]: {issue.message}")

        if result.valid and total_warnings == 0:
            logger.info("[green]✓[/green] Valid report")
        elif result.valid:
            logger.info("[yellow]⚠[/yellow] Valid with warnings")
        else:
            logger.info("[red]✗[/red] Invalid report")

        logger.info("=" * 60)
        logger.info(
            f"Total: [bold]{total_errors}[/bold] errors, [bold]{total_warnings}[/bold] warnings"
        )

        return 0 if result.valid else 1

    def report_json(self, result: ValidationResult) -> str:
        """Format a result as JSON.

        Args:
            result: Validation result to report

        Returns:
            JSON string with valid/errors/warnings and the detailed issues
        """
        issues = [
            i for i in result.issues if self.show_warnings or i.severity == IssueSeverity.ERROR
        ]
        data = result.as_dict()
        if not self.show_warnings:
            data["warnings"] = []
        data["issues"] = [
            {
                "field": i.field,
                "severity": i.severity.value,
                "rule_id": i.rule_id,
                "message": i.message,
            }
            for i in issues
        ]

        return json.dumps(data, indent=2)
