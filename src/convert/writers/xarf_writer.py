"""Writer emitting XARF JSON."""

import json
from typing import Any

from common.env import env

from ..models import NormalizedReport, ReportFormat
from .base import ReportWriter


class XARFWriter(ReportWriter):
    """Emits pretty-printed XARF JSON in a fixed field order."""

    format = ReportFormat.XARF

    def serialize(self, report: NormalizedReport) -> str:
        return json.dumps(self.to_dict(report), indent=2, ensure_ascii=False)

    def to_dict(self, report: NormalizedReport) -> dict[str, Any]:
        """Build the XARF object for a report.

        Core fields and reporter are always present; optional fields are
        omitted when absent.
        """
        reporter: dict[str, Any] = {}
        if report.reporter.org is not None:
            reporter["org"] = report.reporter.org
        if report.reporter.contact is not None:
            reporter["contact"] = report.reporter.contact

        data: dict[str, Any] = {
            "schema_version": report.schema_version or env.schema_version(),
            "report_id": report.report_id,
            "timestamp": report.timestamp,
            "category": report.category,
            "type": report.type,
            "source_identifier": report.source_identifier,
            "reporter": reporter,
        }

        optional = {
            "source_port": report.source_port,
            "destination_identifier": report.destination_identifier,
            "destination_port": report.destination_port,
            "severity": report.severity,
            "description": report.description,
            "evidence": [item.as_dict() for item in report.evidence] or None,
            "confidence": report.confidence,
            "tags": list(report.tags) or None,
        }
        data.update({key: value for key, value in optional.items() if value is not None})

        return data
