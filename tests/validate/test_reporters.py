"""Tests for validation reporters."""

import json
import logging

from validate import validate
from validate.reporters import ValidationReporter

REPORT = {
    "xarf_version": "4.0.0",
    "report_id": "550e8400-e29b-41d4-a716-446655440000",
    "timestamp": "2024-01-15T10:00:00Z",
    "reporter": {"contact": "a@b.com"},
    "source_identifier": "192.0.2.1",
    "category": "bogus",
    "type": "ddos",
}


def test_console_exit_code_reflects_errors(caplog):
    """Test that invalid reports return exit code 1."""
    result = validate(REPORT)

    with caplog.at_level(logging.INFO):
        exit_code = ValidationReporter().report_console(result, source="report.json")

    assert exit_code == 1
    assert "Invalid category" in caplog.text
    assert "report.json" in caplog.text


def test_console_valid_report_returns_zero(caplog):
    """Test that valid reports return exit code 0."""
    result = validate(dict(REPORT, category="abuse"))

    with caplog.at_level(logging.INFO):
        exit_code = ValidationReporter().report_console(result)

    assert exit_code == 0
    assert "Valid with warnings" in caplog.text


def test_console_hides_warnings_when_disabled(caplog):
    """Test that warnings are suppressed when show_warnings is False."""
    result = validate(dict(REPORT, category="abuse"))

    with caplog.at_level(logging.INFO):
        ValidationReporter(show_warnings=False).report_console(result)

    assert "Missing recommended field" not in caplog.text


def test_json_report():
    """Test the JSON rendering of a result."""
    data = json.loads(ValidationReporter().report_json(validate(REPORT)))

    assert data["valid"] is False
    assert len(data["errors"]) == 1
    assert data["warnings"] == [
        'Missing recommended field: "description"',
        'Missing recommended field: "evidence"',
    ]
    assert data["issues"][0]["rule_id"] == "FORMAT_006"
    assert data["issues"][0]["severity"] == "error"
