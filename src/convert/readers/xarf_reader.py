"""Reader for XARF JSON reports."""

import json
from typing import Any

from common.errors import ParseError
from common.logger import get_logger

from ..models import Evidence, NormalizedReport, Reporter, ReportFormat, coerce_int
from .base import ReportReader

logger = get_logger(__name__)


class XARFReader(ReportReader):
    """Reads XARF reports given as a JSON object or JSON text.

    Recognized top-level fields are copied; anything else is dropped.
    """

    format = ReportFormat.XARF

    def parse(self, raw: Any) -> NormalizedReport:
        data = self._load(raw)

        reporter = data.get("reporter")
        if not isinstance(reporter, dict):
            reporter = {}

        destination_identifier = self._optional_text(data.get("destination_identifier"))
        destination_port = coerce_int(data.get("destination_port"))
        # Reports built by the sample generator describe the destination as target {ip, port}
        target = data.get("target")
        if isinstance(target, dict):
            if destination_identifier is None:
                destination_identifier = self._optional_text(target.get("ip"))
            if destination_port is None:
                destination_port = coerce_int(target.get("port"))

        return NormalizedReport(
            report_id=self._text(data.get("report_id")),
            timestamp=self._text(data.get("timestamp")),
            category=self._text(data.get("category")),
            type=self._text(data.get("type")),
            source_identifier=self._text(data.get("source_identifier")),
            source_port=coerce_int(data.get("source_port")),
            destination_identifier=destination_identifier,
            destination_port=destination_port,
            severity=self._optional_text(data.get("severity")),
            description=self._optional_text(data.get("description")),
            reporter=Reporter(
                org=self._optional_text(reporter.get("org")),
                contact=self._optional_text(reporter.get("contact")),
            ),
            evidence=self._evidence(data.get("evidence")),
            confidence=self._confidence(data.get("confidence")),
            tags=self._tags(data.get("tags")),
            schema_version=self._text(data.get("schema_version") or data.get("xarf_version")),
        )

    def _load(self, raw: Any) -> dict[str, Any]:
        if isinstance(raw, (str, bytes)):
            try:
                raw = json.loads(raw)
            except ValueError as e:
                raise ParseError(f"Invalid XARF JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ParseError(f"XARF report must be a JSON object, got {type(raw).__name__}")
        return raw

    @staticmethod
    def _text(value: Any) -> str:
        return "" if value is None else str(value)

    @staticmethod
    def _optional_text(value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @staticmethod
    def _evidence(value: Any) -> tuple[Evidence, ...]:
        # A single evidence object is accepted as a one-element list
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, list):
            return ()
        items = [Evidence.from_dict(item) for item in value if isinstance(item, dict)]
        if len(items) != len(value):
            logger.debug(f"Dropped {len(value) - len(items)} non-object evidence entries")
        return tuple(items)

    @staticmethod
    def _confidence(value: Any) -> float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)

    @staticmethod
    def _tags(value: Any) -> tuple[str, ...]:
        if not isinstance(value, list):
            return ()
        return tuple(str(tag) for tag in value)
