"""Abstract base class for format writers."""

from abc import ABC, abstractmethod

from ..models import NormalizedReport, ReportFormat


class ReportWriter(ABC):
    """Base class for abuse report writers.

    Writers render a NormalizedReport as the text of one reporting format.
    They never modify the report they are given.
    """

    format: ReportFormat

    @abstractmethod
    def serialize(self, report: NormalizedReport) -> str:
        """Render a normalized report in this writer's format.

        Args:
            report: Report to render

        Returns:
            Complete text of the report in this format
        """
        pass
