"""Format readers producing NormalizedReport records."""

from .arf_reader import ARFReader
from .base import ReportReader
from .csv_reader import CSVReader
from .iodef_reader import IODEFReader
from .xarf_reader import XARFReader

__all__ = [
    "ReportReader",
    "XARFReader",
    "CSVReader",
    "ARFReader",
    "IODEFReader",
]
