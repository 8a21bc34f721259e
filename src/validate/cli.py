#!/usr/bin/env python3
"""CLI interface for validate module."""

import argparse
import sys
from pathlib import Path

from common.errors import ReportError
from common.logger import error, setup_logging
from convert.converter import read_report
from convert.models import ReportFormat

from .models import ValidationOptions
from .reporters import ValidationReporter
from .validator import XARFValidator


def read_input(path: str) -> str:
    """Read report text from a file, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_validate(args):
    """Validate a single report.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for a valid report, non-zero for errors)
    """
    if args.input != "-" and not Path(args.input).is_file():
        error(f"File '{args.input}' does not exist")
        return 1

    options = ValidationOptions(strict=args.strict, include_warnings=not args.no_warnings)
    validator = XARFValidator(options)
    reporter = ValidationReporter(show_warnings=options.include_warnings)

    try:
        text = read_input(args.input)
        if args.source_format == ReportFormat.XARF.value:
            result = validator.validate(text)
        else:
            result = validator.validate(read_report(text, args.source_format))
    except (ReportError, OSError, ValueError) as e:
        error(str(e))
        return 1

    if args.format == "json":
        output = reporter.report_json(result)
        if args.output:
            Path(args.output).write_text(output, encoding="utf-8")
            print(f"Validation results written to {args.output}")
        else:
            print(output)
        return 0 if result.valid else 1

    return reporter.report_console(result, source=None if args.input == "-" else args.input)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Validate XARF abuse reports")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to the report to validate ('-' reads stdin)",
    )
    parser.add_argument(
        "--from",
        dest="source_format",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.XARF.value,
        help="Format of the input; non-XARF input is normalized before validation",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Enable strict mode (reserved)",
    )
    parser.add_argument(
        "--no-warnings",
        action="store_true",
        help="Skip recommended-field checks",
    )
    parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    parser.add_argument("--output", type=str, help="Write JSON results to file")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.set_defaults(func=cmd_validate)

    args = parser.parse_args()
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
