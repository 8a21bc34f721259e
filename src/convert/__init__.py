"""Convert abuse reports between XARF, ARF, CSV and IODEF."""

from .converter import convert, read_report, resolve_route, supported_conversions
from .examples import example_for
from .models import Evidence, NormalizedReport, Reporter, ReportFormat

__all__ = [
    "convert",
    "read_report",
    "resolve_route",
    "supported_conversions",
    "example_for",
    "Evidence",
    "NormalizedReport",
    "Reporter",
    "ReportFormat",
]
