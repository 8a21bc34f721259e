"""Reader for basic IODEF incident documents."""

import re
from typing import Any
from xml.sax.saxutils import unescape

from common.logger import get_logger

from ..models import NormalizedReport, Reporter, ReportFormat, utc_now_iso
from .base import ReportReader

logger = get_logger(__name__)

INCIDENT_ID_PATTERN = re.compile(r"<IncidentID[^>]*>([^<]+)</IncidentID>")
START_TIME_PATTERN = re.compile(r"<StartTime>([^<]+)</StartTime>")
IMPACT_PATTERN = re.compile(r'<Impact type="([^"]+)" severity="([^"]+)"')
ADDRESS_PATTERN = re.compile(r"<Address[^>]*>([^<]+)</Address>")
CONTACT_NAME_PATTERN = re.compile(r"<ContactName>([^<]+)</ContactName>")
EMAIL_PATTERN = re.compile(r"<Email>([^<]+)</Email>")

_ATTRIBUTE_ENTITIES = {"&quot;": '"', "&apos;": "'"}


class IODEFReader(ReportReader):
    """Extracts a handful of IODEF elements by pattern.

    This is not an XML parser: elements that do not match the expected
    layout are ignored and the corresponding field keeps its default.
    """

    format = ReportFormat.IODEF

    def parse(self, raw: Any) -> NormalizedReport:
        xml = self._require_text(raw)

        report_id = self._first(INCIDENT_ID_PATTERN, xml) or ""
        timestamp = self._first(START_TIME_PATTERN, xml) or utc_now_iso()
        source_identifier = self._first(ADDRESS_PATTERN, xml) or ""

        event_type = "unknown"
        severity = None
        impact = IMPACT_PATTERN.search(xml)
        if impact:
            event_type = self._unescape(impact.group(1))
            severity = self._unescape(impact.group(2))

        if not report_id:
            logger.debug("No IncidentID element found in IODEF input")

        return NormalizedReport(
            report_id=report_id,
            timestamp=timestamp,
            category="incident",
            type=event_type,
            source_identifier=source_identifier,
            severity=severity,
            reporter=Reporter(
                org=self._first(CONTACT_NAME_PATTERN, xml),
                contact=self._first(EMAIL_PATTERN, xml),
            ),
        )

    def _first(self, pattern: re.Pattern[str], xml: str) -> str | None:
        match = pattern.search(xml)
        return self._unescape(match.group(1)) if match else None

    @staticmethod
    def _unescape(value: str) -> str:
        return unescape(value, _ATTRIBUTE_ENTITIES)
