"""Reader for ARF (Abuse Reporting Format) MIME messages."""

from typing import Any

from common.constants import ARF_DEFAULT_CATEGORY, ARF_FEEDBACK_KEYS, ARF_TO_XARF_CATEGORY
from common.logger import get_logger

from ..models import NormalizedReport, Reporter, ReportFormat, coerce_int, utc_now_iso
from .base import ReportReader

logger = get_logger(__name__)

FEEDBACK_PART_MARKER = "Content-Type: message/feedback-report"


def map_feedback_type(feedback_type: str) -> str:
    """Translate an ARF Feedback-Type into a XARF category."""
    return ARF_TO_XARF_CATEGORY.get(feedback_type, ARF_DEFAULT_CATEGORY)


class ARFReader(ReportReader):
    """Line-based reader for multipart/report feedback messages.

    Only the message/feedback-report part is interpreted. Once that part's
    Content-Type line is seen, every following "Key: value" line is treated as
    a feedback field; later boundaries do not end the part. A From: header
    sets the reporter contact wherever it appears, so the last of From: and
    Reported-From in the text wins.
    """

    format = ReportFormat.ARF

    def parse(self, raw: Any) -> NormalizedReport:
        text = self._require_text(raw)

        fields: dict[str, Any] = {
            "report_id": "",
            "timestamp": utc_now_iso(),
            "category": ARF_DEFAULT_CATEGORY,
            "type": "unknown",
            "source_identifier": "",
        }
        contact: str | None = None
        in_feedback_report = False

        for line in text.split("\n"):
            stripped = line.strip()

            if FEEDBACK_PART_MARKER in stripped:
                in_feedback_report = True
                continue

            # MIME boundary markers
            if stripped.startswith("--"):
                continue

            if in_feedback_report and ":" in stripped:
                key, _, value = stripped.partition(":")
                key, value = key.strip(), value.strip()
                if key in ARF_FEEDBACK_KEYS:
                    if key == "Reported-From":
                        contact = value
                    else:
                        self._apply_feedback_field(fields, key, value)

            if stripped.startswith("From:"):
                contact = stripped[len("From:") :].strip()

        if not in_feedback_report:
            logger.debug("No message/feedback-report part found in ARF input")

        return NormalizedReport(
            report_id=fields["report_id"],
            timestamp=fields["timestamp"],
            category=fields["category"],
            type=fields["type"],
            source_identifier=fields["source_identifier"],
            source_port=fields.get("source_port"),
            destination_identifier=fields.get("destination_identifier"),
            destination_port=fields.get("destination_port"),
            reporter=Reporter(contact=contact),
        )

    @staticmethod
    def _apply_feedback_field(fields: dict[str, Any], key: str, value: str) -> None:
        if key == "Feedback-Type":
            fields["category"] = map_feedback_type(value)
        elif key == "Incident-ID":
            fields["report_id"] = value
        elif key == "Arrival-Date":
            fields["timestamp"] = value
        elif key == "Source-IP":
            fields["source_identifier"] = value
        elif key == "Source-Port":
            fields["source_port"] = coerce_int(value)
        elif key == "Destination-IP":
            fields["destination_identifier"] = value or None
        elif key == "Destination-Port":
            fields["destination_port"] = coerce_int(value)
