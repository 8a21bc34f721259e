"""Abstract base class for format readers."""

from abc import ABC, abstractmethod
from typing import Any

from common.errors import ParseError

from ..models import NormalizedReport, ReportFormat


class ReportReader(ABC):
    """Base class for abuse report readers.

    Readers turn the on-wire text (or, for XARF, a decoded JSON object) of one
    reporting format into a NormalizedReport. They hold no state, so a single
    instance can serve every call.
    """

    format: ReportFormat

    @abstractmethod
    def parse(self, raw: Any) -> NormalizedReport:
        """Convert raw input to a normalized report.

        Args:
            raw: Input in this reader's format

        Returns:
            Normalized report, with missing fields left at their defaults

        Raises:
            ParseError: If the input is malformed for this format
        """
        pass

    def _require_text(self, raw: Any) -> str:
        """Return raw as text, rejecting non-string input."""
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"{self.format.value.upper()} input is not valid UTF-8") from e
        if not isinstance(raw, str):
            raise ParseError(
                f"{self.format.value.upper()} input must be text, got {type(raw).__name__}"
            )
        return raw

    def _safe_get(self, data: dict[str, Any], *keys: str, default: Any = None) -> Any:
        """Safely navigate nested dictionary keys.

        Example:
            >>> self._safe_get({'reporter': {'org': 'SOC'}}, 'reporter', 'org')
            'SOC'
            >>> self._safe_get({'reporter': 'x'}, 'reporter', 'org', default='')
            ''
        """
        current = data
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current
