"""Writer emitting single-report CSV."""

from typing import Any

from common.constants import CSV_COLUMNS

from ..models import NormalizedReport, ReportFormat
from .base import ReportWriter


def escape_csv_value(value: Any) -> str:
    """Quote a CSV value if it contains a comma, a double quote or a line break.

    Example:
        >>> escape_csv_value('say "hi", then leave')
        '"say ""hi"", then leave"'
        >>> escape_csv_value(None)
        ''
    """
    text = "" if value is None else str(value)
    if any(char in text for char in (",", '"', "\n", "\r")):
        return '"' + text.replace('"', '""') + '"'
    return text


class CSVWriter(ReportWriter):
    """Emits the fixed 12-column header followed by one data row."""

    format = ReportFormat.CSV

    def serialize(self, report: NormalizedReport) -> str:
        row = {
            "report_id": report.report_id,
            "timestamp": report.timestamp,
            "category": report.category,
            "type": report.type,
            "source_identifier": report.source_identifier,
            "source_port": report.source_port,
            "destination_identifier": report.destination_identifier,
            "destination_port": report.destination_port,
            "severity": report.severity,
            "reporter_org": report.reporter.org,
            "reporter_contact": report.reporter.contact,
            "description": report.description,
        }

        header = ",".join(CSV_COLUMNS)
        values = ",".join(escape_csv_value(row[column]) for column in CSV_COLUMNS)
        return header + "\n" + values
