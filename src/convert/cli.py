#!/usr/bin/env python3
"""CLI interface for convert module."""

import argparse
import sys
from pathlib import Path

from common.constants import FILE_EXTENSIONS
from common.errors import ReportError
from common.logger import error, setup_logging, success, warning

from .converter import convert, supported_conversions
from .examples import example_for
from .models import ReportFormat

FORMAT_CHOICES = [f.value for f in ReportFormat]


def cmd_convert(args):
    """Convert a report between formats.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        if args.input == "-":
            data = sys.stdin.read()
        else:
            data = Path(args.input).read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        error(f"Cannot read input: {e}")
        return 1

    if not data.strip():
        error("Please provide data to convert")
        return 1

    try:
        output = convert(data, args.source_format, args.target_format)
    except ReportError as e:
        error(f"Conversion error: {e}")
        return 1

    if args.validate and args.target_format == ReportFormat.XARF.value:
        from validate.validator import validate

        result = validate(output)
        for message in result.errors:
            warning(f"Output validation: {message}")

    if args.output:
        output_path = Path(args.output)
        if output_path.is_dir():
            output_path = output_path / f"converted-report.{FILE_EXTENSIONS[args.target_format]}"
        output_path.write_text(output, encoding="utf-8")
        success(f"Converted report written to {output_path}")
    else:
        print(output)

    return 0


def cmd_example(args):
    """Print the example input for a format."""
    print(example_for(args.format))
    return 0


def cmd_routes(args):
    """List the supported conversions."""
    for source, target in supported_conversions():
        print(f"{source} -> {target}")
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Convert abuse reports between formats")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a report")
    convert_parser.add_argument(
        "--from",
        dest="source_format",
        choices=FORMAT_CHOICES,
        required=True,
        help="Format of the input report",
    )
    convert_parser.add_argument(
        "--to",
        dest="target_format",
        choices=FORMAT_CHOICES,
        required=True,
        help="Format of the output report",
    )
    convert_parser.add_argument(
        "--input",
        type=str,
        default="-",
        help="Path to the input report ('-' reads stdin)",
    )
    convert_parser.add_argument(
        "--output",
        type=str,
        help="Write the converted report to this file or directory",
    )
    convert_parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate XARF output and warn about any errors",
    )
    convert_parser.set_defaults(func=cmd_convert)

    # Example command
    example_parser = subparsers.add_parser("example", help="Print an example report")
    example_parser.add_argument("format", choices=FORMAT_CHOICES)
    example_parser.set_defaults(func=cmd_example)

    # Routes command
    routes_parser = subparsers.add_parser("routes", help="List supported conversions")
    routes_parser.set_defaults(func=cmd_routes)

    args = parser.parse_args()
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
