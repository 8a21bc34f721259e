"""Writer emitting minimal IODEF XML documents."""

from xml.sax.saxutils import escape

from ..models import NormalizedReport, ReportFormat, utc_now_iso
from .base import ReportWriter

IODEF_NAMESPACE = "urn:ietf:params:xml:ns:iodef-2.0"


def _attr(value: str) -> str:
    """Double-quoted, escaped XML attribute value."""
    return '"' + escape(value, {'"': "&quot;"}) + '"'


def _system_block(category: str, address: str, port: int | None) -> list[str]:
    lines = [
        f'        <System category="{category}">',
        "          <Node>",
        f'            <Address category="ipv4-addr">{escape(address)}</Address>',
    ]
    if port:
        lines.append(f"            <Service><Port>{port}</Port></Service>")
    lines += ["          </Node>", "        </System>"]
    return lines


class IODEFWriter(ReportWriter):
    """Emits an IODEF-Document skeleton populated from the report.

    The target System block is only written when the report has a
    destination identifier.
    """

    format = ReportFormat.IODEF

    def serialize(self, report: NormalizedReport) -> str:
        org = report.reporter.org
        description = report.description or "No description provided"

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<IODEF-Document version="2.0" xmlns="{IODEF_NAMESPACE}">',
            '  <Incident purpose="reporting">',
            f"    <IncidentID name={_attr(org or 'reporter.example')}>"
            f"{escape(report.report_id or 'unknown')}</IncidentID>",
            f"    <StartTime>{escape(report.timestamp or utc_now_iso())}</StartTime>",
            f"    <Description>XARF Report: {escape(description)}</Description>",
            "    <Assessment>",
            f"      <Impact type={_attr(report.type or 'unknown')} "
            f"severity={_attr(report.severity or 'medium')}/>",
            "    </Assessment>",
            '    <Contact type="reporter">',
            f"      <ContactName>{escape(org or 'Unknown Organization')}</ContactName>",
            f"      <Email>{escape(report.reporter.contact or 'unknown@example.com')}</Email>",
            "    </Contact>",
            "    <EventData>",
            "      <Flow>",
        ]
        lines += _system_block(
            "source", report.source_identifier or "unknown", report.source_port
        )
        if report.destination_identifier:
            lines += _system_block(
                "target", report.destination_identifier, report.destination_port
            )
        lines += [
            "      </Flow>",
            "    </EventData>",
            "  </Incident>",
            "</IODEF-Document>",
        ]
        return "\n".join(lines)
