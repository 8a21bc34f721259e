"""Writer emitting ARF (Abuse Reporting Format) MIME messages."""

import secrets
import string
from email.utils import formatdate

from common.constants import ARF_DEFAULT_FEEDBACK_TYPE, XARF_TO_ARF_FEEDBACK_TYPE
from common.env import env

from ..models import NormalizedReport, ReportFormat, utc_now_iso
from .base import ReportWriter

BOUNDARY_PREFIX = "----=_Part_"
_BOUNDARY_ALPHABET = string.ascii_lowercase + string.digits


def make_boundary() -> str:
    """Generate a fresh MIME boundary token."""
    return BOUNDARY_PREFIX + "".join(secrets.choice(_BOUNDARY_ALPHABET) for _ in range(9))


def map_category(category: str) -> str:
    """Translate a XARF category into an ARF Feedback-Type."""
    return XARF_TO_ARF_FEEDBACK_TYPE.get(category, ARF_DEFAULT_FEEDBACK_TYPE)


class ARFWriter(ReportWriter):
    """Emits a multipart/report message with a human-readable part and a
    message/feedback-report part."""

    format = ReportFormat.ARF

    def serialize(self, report: NormalizedReport) -> str:
        boundary = make_boundary()
        contact = report.reporter.contact

        headers = [
            "MIME-Version: 1.0",
            f"From: {contact or 'abuse@reporter.example'}",
            f"To: {env.arf_recipient()}",
            f"Subject: Abuse Report - {report.type or 'incident'}",
            f"Date: {formatdate(usegmt=True)}",
            "Content-Type: multipart/report; report-type=feedback-report;",
            f'    boundary="{boundary}"',
        ]

        summary = [
            'Content-Type: text/plain; charset="UTF-8"',
            "",
            "This is an automated abuse report.",
            "",
            f"Classification: {report.category or 'unknown'}",
            f"Type: {report.type or 'unknown'}",
            f"Source: {report.source_identifier or 'unknown'}",
        ]
        if report.description:
            summary += ["", f"Description: {report.description}"]
        summary += ["", f"Reporter: {report.reporter.org or 'Unknown Organization'}"]

        feedback = [
            "Content-Type: message/feedback-report",
            "",
            f"Feedback-Type: {map_category(report.category)}",
            f"User-Agent: {env.arf_user_agent()}",
            "Version: 1.0",
            f"Incident-ID: {report.report_id or 'unknown'}",
            f"Arrival-Date: {report.timestamp or utc_now_iso()}",
            f"Source-IP: {report.source_identifier or 'unknown'}",
        ]
        if report.source_port:
            feedback.append(f"Source-Port: {report.source_port}")
        if report.destination_identifier:
            feedback.append(f"Destination-IP: {report.destination_identifier}")
        if report.destination_port:
            feedback.append(f"Destination-Port: {report.destination_port}")
        feedback.append(f"Reported-From: {contact or 'unknown'}")

        lines = headers + [""]
        lines += [f"--{boundary}"] + summary + [""]
        lines += [f"--{boundary}"] + feedback + [""]
        lines.append(f"--{boundary}--")
        return "\n".join(lines)
