"""Tests for the conversion dispatcher."""

import json

import pytest

from common.errors import InvalidRequest, ParseError, UnsupportedConversion
from convert import convert, example_for, supported_conversions
from convert.converter import resolve_route
from convert.models import ReportFormat

MINIMAL_XARF = {
    "report_id": "550e8400-e29b-41d4-a716-446655440000",
    "timestamp": "2024-01-15T10:00:00Z",
    "category": "abuse",
    "type": "ddos",
    "source_identifier": "192.0.2.100",
    "reporter": {"contact": "abuse@reporter.example"},
}

WIRED_ROUTES = [
    ("xarf", "csv"),
    ("xarf", "arf"),
    ("xarf", "iodef"),
    ("csv", "xarf"),
    ("arf", "xarf"),
    ("iodef", "xarf"),
]


def assert_target_shape(output: str, target: str) -> None:
    assert output
    if target == "xarf":
        assert isinstance(json.loads(output), dict)
    elif target == "csv":
        assert len(output.split("\n")) == 2
    elif target == "arf":
        boundary = output.split('boundary="', 1)[1].split('"', 1)[0]
        assert output.count(f"--{boundary}") == 3
    elif target == "iodef":
        assert "<IODEF-Document" in output


@pytest.mark.parametrize("source,target", WIRED_ROUTES)
def test_wired_routes_convert_examples(source, target):
    """Test that every wired route converts its example input."""
    output = convert(example_for(source), source, target)
    assert_target_shape(output, target)


def test_xarf_object_input_is_accepted():
    """Test that XARF input may be passed as a dict."""
    output = convert(MINIMAL_XARF, "xarf", "csv")
    assert "550e8400-e29b-41d4-a716-446655440000" in output


def test_xarf_csv_round_trip_preserves_core_fields():
    """Test that converting to CSV and back keeps the core fields."""
    report = dict(MINIMAL_XARF, description='Flood, "large"\nsecond line')

    data = json.loads(convert(convert(report, "xarf", "csv"), "csv", "xarf"))

    for key in ("report_id", "timestamp", "category", "type", "source_identifier", "description"):
        assert data[key] == report[key]
    assert data["reporter"]["contact"] == "abuse@reporter.example"


@pytest.mark.parametrize("label", ["xarf", "csv", "arf", "iodef"])
def test_same_format_is_invalid_request(label):
    """Test that identical source and target formats are rejected."""
    with pytest.raises(InvalidRequest, match="must be different"):
        convert("anything", label, label)


def test_same_format_rejected_before_parsing():
    """Test that the format check happens before input is parsed."""
    with pytest.raises(InvalidRequest):
        convert("{not json", "xarf", "xarf")


def test_spoke_to_spoke_is_unsupported():
    """Test that conversions not involving XARF are rejected."""
    with pytest.raises(UnsupportedConversion) as exc_info:
        convert(example_for("csv"), "csv", "arf")

    assert exc_info.value.source == "csv"
    assert exc_info.value.target == "arf"
    assert "csv to arf" in str(exc_info.value)


def test_unknown_format_is_invalid_request():
    """Test that unknown labels are rejected."""
    with pytest.raises(InvalidRequest, match="Unsupported format"):
        convert("{}", "stix", "xarf")


def test_parse_errors_propagate():
    """Test that reader errors reach the caller unchanged."""
    with pytest.raises(ParseError):
        convert("report_id\n", "csv", "xarf")


def test_infinite_port_converts_without_port():
    """Test that an overflowing JSON port is dropped instead of raising."""
    text = '{"report_id": "x", "source_identifier": "192.0.2.1", "source_port": 1e999}'

    header, row = convert(text, "xarf", "csv").split("\n")

    values = dict(zip(header.split(","), row.split(",")))
    assert values["source_identifier"] == "192.0.2.1"
    assert values["source_port"] == ""


def test_resolve_route_returns_matching_pair():
    """Test that the route table pairs the right reader and writer."""
    reader, writer = resolve_route("arf", ReportFormat.XARF)

    assert reader.format == ReportFormat.ARF
    assert writer.format == ReportFormat.XARF


def test_supported_conversions_lists_hub_routes():
    """Test that exactly the six hub routes are listed."""
    assert supported_conversions() == sorted(WIRED_ROUTES)


def test_example_table_covers_every_format():
    """Test that every format has example input."""
    for report_format in ReportFormat:
        assert example_for(report_format)
