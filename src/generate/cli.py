#!/usr/bin/env python3
"""CLI interface for generate module."""

import argparse
import json
import mimetypes
import random
import sys
from pathlib import Path

from common.logger import error, setup_logging, success

from .catalog import EVENT_TYPES
from .evidence import build_evidence, decode_base64, hash_bytes
from .generator import GeneratorOptions, generate_report, randomize_options


def cmd_report(args):
    """Generate a sample XARF report.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    rng = random.Random(args.seed)

    if args.random:
        options = randomize_options(rng)
    else:
        if args.type not in EVENT_TYPES[args.category]:
            error(
                f"Type '{args.type}' is not defined for category '{args.category}'. "
                f"Choose one of: {', '.join(EVENT_TYPES[args.category])}"
            )
            return 1
        on_behalf_of = None
        if args.on_behalf_org:
            on_behalf_of = {"org": args.on_behalf_org}
            if args.on_behalf_contact:
                on_behalf_of["contact"] = args.on_behalf_contact
        options = GeneratorOptions(
            category=args.category,
            type=args.type,
            source_identifier=args.source or "",
            reporter_org=args.org,
            reporter_contact=args.contact or "",
            on_behalf_of=on_behalf_of,
            include_evidence=args.evidence,
            include_optional=args.optional,
        )

    try:
        report = generate_report(options, rng)
    except ValueError as e:
        error(f"Generation error: {e}")
        return 1

    output = json.dumps(report, indent=2)
    if args.output:
        output_path = Path(args.output)
        if output_path.is_dir():
            output_path = output_path / f"xarf-report-{report['report_id']}.json"
        output_path.write_text(output, encoding="utf-8")
        success(f"Report written to {output_path}")
    else:
        print(output)
    return 0


def cmd_evidence(args):
    """Hash evidence and print the XARF evidence entry.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    filename = None
    content_type = None

    try:
        if args.file:
            path = Path(args.file)
            data = path.read_bytes()
            method = "file"
            filename = path.name
            content_type = mimetypes.guess_type(path.name)[0]
        elif args.text is not None:
            if not args.text.strip():
                error("Please provide input data")
                return 1
            data = args.text.encode("utf-8")
            method = "text"
        else:
            data = decode_base64(args.base64)
            method = "base64"
    except (OSError, ValueError) as e:
        error(str(e))
        return 1

    algorithms = tuple(name for name, flag in (("sha1", args.sha1), ("md5", args.md5)) if flag)
    for algorithm, digest in hash_bytes(data, algorithms).items():
        print(f"{algorithm.upper()}: {digest}")

    evidence = build_evidence(data, method, filename=filename, content_type=content_type)
    print(json.dumps(evidence.as_dict(), indent=2))
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Generate sample XARF reports and evidence")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Report command
    report_parser = subparsers.add_parser("report", help="Generate a sample report")
    report_parser.add_argument("--category", choices=list(EVENT_TYPES), default="abuse")
    report_parser.add_argument("--type", default="ddos", help="Event type within the category")
    report_parser.add_argument("--source", type=str, help="Source IP or identifier")
    report_parser.add_argument("--org", type=str, help="Reporter organization")
    report_parser.add_argument("--contact", type=str, help="Reporter contact email")
    report_parser.add_argument("--on-behalf-org", type=str, help="Organization reported for")
    report_parser.add_argument("--on-behalf-contact", type=str, help="Contact of that organization")
    report_parser.add_argument("--evidence", action="store_true", help="Include sample evidence")
    report_parser.add_argument(
        "--optional",
        action="store_true",
        help="Include severity, confidence, tags, target and occurrence",
    )
    report_parser.add_argument(
        "--random",
        action="store_true",
        help="Ignore field options and draw random values",
    )
    report_parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    report_parser.add_argument("--output", type=str, help="Write the report to file or directory")
    report_parser.set_defaults(func=cmd_report)

    # Evidence command
    evidence_parser = subparsers.add_parser("evidence", help="Hash evidence data")
    source = evidence_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=str, help="Path to an evidence file")
    source.add_argument("--text", type=str, help="Evidence text")
    source.add_argument("--base64", type=str, help="Base64-encoded evidence")
    evidence_parser.add_argument("--sha1", action="store_true", help="Also compute SHA-1")
    evidence_parser.add_argument("--md5", action="store_true", help="Also compute MD5")
    evidence_parser.set_defaults(func=cmd_evidence)

    args = parser.parse_args()
    setup_logging(level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
