"""Example input for each supported format."""

import json
from types import MappingProxyType

from .models import ReportFormat

_XARF_EXAMPLE = {
    "report_id": "550e8400-e29b-41d4-a716-446655440000",
    "timestamp": "2024-01-15T10:00:00Z",
    "category": "abuse",
    "type": "ddos",
    "source_identifier": "192.0.2.100",
    "source_port": 52311,
    "description": "DDoS attack targeting example.com",
    "reporter": {
        "org": "Security Operations",
        "contact": "abuse@reporter.example",
    },
    "severity": "high",
    "evidence": {
        "type": "pcap",
        "hash": "sha256:abc123...",
        "url": "https://evidence.example/report.pcap",
    },
}

_ARF_EXAMPLE = """MIME-Version: 1.0
From: abuse@reporter.example
To: abuse@target.example
Subject: Abuse Report
Content-Type: multipart/report; report-type=feedback-report;
    boundary="----=_Part_123"

------=_Part_123
Content-Type: text/plain

This is an abuse report for DDoS activity from 192.0.2.100

------=_Part_123
Content-Type: message/feedback-report

Feedback-Type: abuse
User-Agent: XARF-Converter/1.0
Version: 1.0
Source-IP: 192.0.2.100
Incident-ID: 550e8400-e29b-41d4-a716-446655440000
Arrival-Date: 2024-01-15T10:00:00Z

------=_Part_123--"""

_CSV_EXAMPLE = (
    "report_id,timestamp,category,type,source_identifier,source_port,severity,"
    "reporter_org,reporter_contact,description\n"
    "550e8400-e29b-41d4-a716-446655440000,2024-01-15T10:00:00Z,abuse,ddos,"
    '192.0.2.100,52311,high,Security Operations,abuse@reporter.example,'
    '"DDoS attack targeting example.com"'
)

_IODEF_EXAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<IODEF-Document version="2.0">
  <Incident purpose="reporting">
    <IncidentID name="reporter.example">550e8400-e29b-41d4-a716-446655440000</IncidentID>
    <StartTime>2024-01-15T10:00:00Z</StartTime>
    <Assessment>
      <Impact type="ddos" severity="high"/>
    </Assessment>
  </Incident>
</IODEF-Document>"""

EXAMPLES = MappingProxyType(
    {
        ReportFormat.XARF: json.dumps(_XARF_EXAMPLE, indent=2),
        ReportFormat.ARF: _ARF_EXAMPLE,
        ReportFormat.CSV: _CSV_EXAMPLE,
        ReportFormat.IODEF: _IODEF_EXAMPLE,
    }
)


def example_for(report_format: ReportFormat | str) -> str:
    """Return the example input text for a format."""
    return EXAMPLES[ReportFormat.parse(report_format)]
