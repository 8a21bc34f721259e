"""Tests for the XARF validator."""

import json

import pytest

from common.errors import ValidationInputError
from convert.models import NormalizedReport, Reporter
from validate import ValidationOptions, XARFValidator, validate

VALID_REPORT = {
    "xarf_version": "4.0.0",
    "report_id": "550e8400-e29b-41d4-a716-446655440000",
    "timestamp": "2024-01-15T10:00:00Z",
    "reporter": {"contact": "a@b.com"},
    "source_identifier": "192.0.2.1",
    "category": "abuse",
    "type": "ddos",
}


def test_minimal_report_is_valid_with_two_warnings():
    """Test that only description and evidence are flagged as recommended."""
    result = validate(VALID_REPORT, ValidationOptions(include_warnings=True))

    assert result.valid is True
    assert result.errors == []
    assert result.warnings == [
        'Missing recommended field: "description"',
        'Missing recommended field: "evidence"',
    ]


def test_missing_category_is_an_error():
    """Test that omitting category invalidates the report."""
    report = {k: v for k, v in VALID_REPORT.items() if k != "category"}

    result = validate(report)

    assert result.valid is False
    assert result.errors == ['Missing mandatory field: "category"']


def test_unknown_category_lists_allowed_values():
    """Test that an unknown category names all eight categories."""
    result = validate(dict(VALID_REPORT, category="bogus"))

    assert result.valid is False
    assert len(result.errors) == 1
    assert result.errors[0] == (
        'Invalid category "bogus". Must be one of: abuse, vulnerability, connection, '
        "content, copyright, messaging, reputation, infrastructure"
    )


def test_empty_report_lists_every_mandatory_field():
    """Test that each missing mandatory field produces one error, in order."""
    result = validate({}, ValidationOptions(include_warnings=False))

    assert result.errors == [
        'Missing mandatory field: "xarf_version"',
        'Missing mandatory field: "report_id"',
        'Missing mandatory field: "timestamp"',
        'Missing mandatory field: "reporter"',
        'Missing mandatory field: "source_identifier"',
        'Missing mandatory field: "category"',
        'Missing mandatory field: "type"',
    ]
    assert result.warnings == []


def test_schema_version_is_accepted_for_converter_output():
    """Test that schema_version satisfies the version requirement."""
    report = {k: v for k, v in VALID_REPORT.items() if k != "xarf_version"}
    report["schema_version"] = "4.0.0"

    assert validate(report).valid is True


def test_warnings_can_be_disabled():
    """Test that include_warnings=False skips recommended checks."""
    result = validate(dict(VALID_REPORT, confidence=7), ValidationOptions(include_warnings=False))
    assert result.warnings == []


def test_strict_mode_does_not_change_result():
    """Test that strict is accepted but reserved."""
    strict = validate(VALID_REPORT, ValidationOptions(strict=True))
    lenient = validate(VALID_REPORT, ValidationOptions(strict=False))

    assert strict.as_dict() == lenient.as_dict()


def test_accepts_json_text():
    """Test that JSON text is decoded before validation."""
    assert validate(json.dumps(VALID_REPORT)).valid is True


def test_accepts_normalized_report():
    """Test that normalized records are validated through their XARF form."""
    report = NormalizedReport(
        report_id=VALID_REPORT["report_id"],
        timestamp=VALID_REPORT["timestamp"],
        category="abuse",
        type="ddos",
        source_identifier="192.0.2.1",
        reporter=Reporter(contact="a@b.com"),
    )

    assert validate(report).valid is True


def test_unparsable_json_raises():
    """Test that text that is not JSON is an input error."""
    with pytest.raises(ValidationInputError, match="Invalid JSON"):
        validate("{oops")


def test_non_object_raises():
    """Test that JSON values other than objects are input errors."""
    with pytest.raises(ValidationInputError, match="JSON object"):
        validate("[]")


def test_does_not_mutate_input():
    """Test that validation leaves the report untouched."""
    report = json.loads(json.dumps(VALID_REPORT))

    XARFValidator().validate(report)

    assert report == VALID_REPORT


def test_as_dict_shape():
    """Test the plain-data form of a result."""
    result = validate(dict(VALID_REPORT, description="x", evidence=[{"type": "log"}]))
    assert result.as_dict() == {"valid": True, "errors": [], "warnings": []}
