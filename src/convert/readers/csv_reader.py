"""Reader for single-report CSV exports."""

import csv
import io
from typing import Any

from common.constants import CSV_COLUMNS, CSV_HEADER_ALIASES
from common.errors import ParseError
from common.logger import get_logger

from ..models import NormalizedReport, Reporter, ReportFormat, coerce_int
from .base import ReportReader

logger = get_logger(__name__)


class CSVReader(ReportReader):
    """Reads a header row and one data row.

    Quoted fields may contain commas, newlines and doubled quotes. Header
    names are matched case-insensitively; unknown columns are ignored.
    """

    format = ReportFormat.CSV

    def parse(self, raw: Any) -> NormalizedReport:
        rows = self.split_rows(self._require_text(raw))

        if len(rows) < 2:
            raise ParseError("CSV must contain header and at least one data row")

        headers, values = rows[0], rows[1]
        if len(headers) != len(values):
            raise ParseError(
                f"CSV header and data row have different lengths "
                f"({len(headers)} != {len(values)})"
            )

        columns: dict[str, str] = {}
        for header, value in zip(headers, values):
            name = header.strip().lower()
            name = CSV_HEADER_ALIASES.get(name, name)
            if name in CSV_COLUMNS:
                columns[name] = value
            else:
                logger.debug(f"Ignoring unknown CSV column '{header}'")

        return NormalizedReport(
            report_id=columns.get("report_id", ""),
            timestamp=columns.get("timestamp", ""),
            category=columns.get("category", ""),
            type=columns.get("type", ""),
            source_identifier=columns.get("source_identifier", ""),
            source_port=coerce_int(columns.get("source_port") or None),
            destination_identifier=columns.get("destination_identifier") or None,
            destination_port=coerce_int(columns.get("destination_port") or None),
            severity=columns.get("severity") or None,
            description=columns.get("description") or None,
            reporter=Reporter(
                org=columns.get("reporter_org"),
                contact=columns.get("reporter_contact"),
            ),
        )

    @staticmethod
    def split_rows(text: str) -> list[list[str]]:
        """Split CSV text into rows of fields, honoring quoted newlines.

        Blank lines between records are skipped.

        Example:
            >>> CSVReader.split_rows('a,b\\n"x, y","say ""hi"" now"')
            [['a', 'b'], ['x, y', 'say "hi" now']]
        """
        reader = csv.reader(io.StringIO(text), delimiter=",", quotechar='"', doublequote=True)
        try:
            return [row for row in reader if row]
        except csv.Error as e:
            raise ParseError(f"Malformed CSV: {e}") from e
