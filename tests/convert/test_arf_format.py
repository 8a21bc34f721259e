"""Tests for the ARF reader and writer."""

import re

from convert.models import NormalizedReport, Reporter
from convert.readers import ARFReader
from convert.readers.arf_reader import map_feedback_type
from convert.writers import ARFWriter
from convert.writers.arf_writer import map_category

ARF_MESSAGE = """MIME-Version: 1.0
From: abuse@reporter.example
To: abuse@target.example
Content-Type: multipart/report; report-type=feedback-report;
    boundary="----=_Part_123"

------=_Part_123
Content-Type: text/plain

Source-IP: 198.51.100.1

------=_Part_123
Content-Type: message/feedback-report

Feedback-Type: virus
Incident-ID: 550e8400-e29b-41d4-a716-446655440000
Arrival-Date: 2024-01-15T10:00:00Z
Source-IP: 192.0.2.100
Source-Port: 25
Destination-IP: 203.0.113.9
Destination-Port: 587

------=_Part_123--"""


class TestARFReader:
    """Tests for ARFReader."""

    def test_reads_feedback_report_part(self):
        """Test that feedback fields map to report fields."""
        report = ARFReader().parse(ARF_MESSAGE)

        assert report.report_id == "550e8400-e29b-41d4-a716-446655440000"
        assert report.timestamp == "2024-01-15T10:00:00Z"
        assert report.category == "malware"
        assert report.type == "unknown"
        assert report.source_port == 25
        assert report.destination_identifier == "203.0.113.9"
        assert report.destination_port == 587
        assert report.reporter.contact == "abuse@reporter.example"

    def test_ignores_fields_before_feedback_part(self):
        """Test that Source-IP in the text part is not used."""
        report = ARFReader().parse(ARF_MESSAGE)
        assert report.source_identifier == "192.0.2.100"

    def test_later_from_header_overwrites_reported_from(self):
        """Test that the last From:/Reported-From line wins."""
        text = (
            "Content-Type: message/feedback-report\n"
            "Reported-From: first@reporter.example\n"
            "From: second@reporter.example\n"
        )
        assert ARFReader().parse(text).reporter.contact == "second@reporter.example"

    def test_reported_from_after_from_wins(self):
        """Test that Reported-From overrides an earlier From header."""
        text = (
            "From: header@reporter.example\n"
            "Content-Type: message/feedback-report\n"
            "Reported-From: part@reporter.example\n"
        )
        assert ARFReader().parse(text).reporter.contact == "part@reporter.example"

    def test_feedback_flag_is_never_reset(self):
        """Test that fields after a later boundary are still read."""
        text = (
            "--b\n"
            "Content-Type: message/feedback-report\n"
            "--b\n"
            "Content-Type: text/plain\n"
            "Incident-ID: late\n"
        )
        assert ARFReader().parse(text).report_id == "late"

    def test_empty_input_yields_defaults(self):
        """Test that empty input produces a mostly-empty report."""
        report = ARFReader().parse("")

        assert report.report_id == ""
        assert report.category == "abuse"
        assert report.source_identifier == ""
        assert report.reporter == Reporter()
        assert report.timestamp.endswith("Z")

    def test_empty_destination_ip_is_absent(self):
        """Test that a blank Destination-IP line leaves the destination unset."""
        text = "Content-Type: message/feedback-report\nSource-IP: 192.0.2.1\nDestination-IP:\n"

        report = ARFReader().parse(text)

        assert report.source_identifier == "192.0.2.1"
        assert report.destination_identifier is None

    def test_feedback_type_mapping(self):
        """Test the ARF to XARF category table."""
        assert map_feedback_type("abuse") == "abuse"
        assert map_feedback_type("fraud") == "fraud"
        assert map_feedback_type("virus") == "malware"
        assert map_feedback_type("other") == "abuse"
        assert map_feedback_type("auth-failure") == "abuse"


class TestARFWriter:
    """Tests for ARFWriter."""

    REPORT = NormalizedReport(
        report_id="550e8400-e29b-41d4-a716-446655440000",
        timestamp="2024-01-15T10:00:00Z",
        category="abuse",
        type="ddos",
        source_identifier="192.0.2.100",
        source_port=52311,
        description="DDoS attack targeting example.com",
        reporter=Reporter(org="Security Operations", contact="abuse@reporter.example"),
    )

    def test_boundary_used_consistently(self):
        """Test that the declared boundary delimits both parts and the end."""
        output = ARFWriter().serialize(self.REPORT)
        boundary = re.search(r'boundary="([^"]+)"', output).group(1)

        assert boundary.startswith("----=_Part_")
        assert output.count(f"--{boundary}") == 3
        assert output.endswith(f"--{boundary}--")

    def test_boundaries_are_fresh(self):
        """Test that each message gets its own boundary."""
        first = ARFWriter().serialize(self.REPORT)
        second = ARFWriter().serialize(self.REPORT)

        assert re.search(r'boundary="([^"]+)"', first).group(1) != re.search(
            r'boundary="([^"]+)"', second
        ).group(1)

    def test_feedback_part_fields(self):
        """Test the feedback-report part content."""
        output = ARFWriter().serialize(self.REPORT)

        assert "Content-Type: message/feedback-report" in output
        assert "Feedback-Type: abuse" in output
        assert "Incident-ID: 550e8400-e29b-41d4-a716-446655440000" in output
        assert "Source-Port: 52311" in output
        assert "Reported-From: abuse@reporter.example" in output
        assert "Destination-IP" not in output

    def test_summary_part(self):
        """Test the human-readable part content."""
        output = ARFWriter().serialize(self.REPORT)

        assert "Classification: abuse" in output
        assert "Description: DDoS attack targeting example.com" in output
        assert "Reporter: Security Operations" in output

    def test_uses_configured_recipient(self, monkeypatch):
        """Test that the To: header comes from configuration."""
        monkeypatch.setenv("ARF_RECIPIENT", "abuse@isp.example")
        assert "To: abuse@isp.example" in ARFWriter().serialize(self.REPORT)

    def test_category_mapping(self):
        """Test the XARF to ARF feedback type table."""
        assert map_category("malware") == "virus"
        assert map_category("legal") == "other"
        assert map_category("policy") == "abuse"
        assert map_category("security") == "abuse"
        assert map_category("vulnerability") == "other"

    def test_written_message_reads_back(self):
        """Test that the reader recovers the writer's feedback fields."""
        report = ARFReader().parse(ARFWriter().serialize(self.REPORT))

        assert report.report_id == self.REPORT.report_id
        assert report.timestamp == self.REPORT.timestamp
        assert report.source_identifier == "192.0.2.100"
        assert report.source_port == 52311
        assert report.reporter.contact == "abuse@reporter.example"
