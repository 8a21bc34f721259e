"""Format writers rendering NormalizedReport records."""

from .arf_writer import ARFWriter
from .base import ReportWriter
from .csv_writer import CSVWriter
from .iodef_writer import IODEFWriter
from .xarf_writer import XARFWriter

__all__ = [
    "ReportWriter",
    "XARFWriter",
    "CSVWriter",
    "ARFWriter",
    "IODEFWriter",
]
