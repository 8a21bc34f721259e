"""Conversion dispatcher routing reports through XARF."""

from types import MappingProxyType
from typing import Any

from common.errors import InvalidRequest, UnsupportedConversion
from common.logger import get_logger

from .models import NormalizedReport, ReportFormat
from .readers import ARFReader, CSVReader, IODEFReader, ReportReader, XARFReader
from .writers import ARFWriter, CSVWriter, IODEFWriter, ReportWriter, XARFWriter

logger = get_logger(__name__)

READERS: MappingProxyType[ReportFormat, ReportReader] = MappingProxyType(
    {reader.format: reader for reader in (XARFReader(), CSVReader(), ARFReader(), IODEFReader())}
)

WRITERS: MappingProxyType[ReportFormat, ReportWriter] = MappingProxyType(
    {writer.format: writer for writer in (XARFWriter(), CSVWriter(), ARFWriter(), IODEFWriter())}
)

# XARF is the hub: every route either starts or ends there
ROUTES: frozenset[tuple[ReportFormat, ReportFormat]] = frozenset(
    {
        (ReportFormat.XARF, ReportFormat.CSV),
        (ReportFormat.XARF, ReportFormat.ARF),
        (ReportFormat.XARF, ReportFormat.IODEF),
        (ReportFormat.CSV, ReportFormat.XARF),
        (ReportFormat.ARF, ReportFormat.XARF),
        (ReportFormat.IODEF, ReportFormat.XARF),
    }
)


def resolve_route(
    source_format: ReportFormat | str, target_format: ReportFormat | str
) -> tuple[ReportReader, ReportWriter]:
    """Look up the reader and writer for a conversion.

    Args:
        source_format: Format label of the input
        target_format: Format label of the desired output

    Returns:
        Tuple of (reader, writer)

    Raises:
        InvalidRequest: If a label is unknown or both formats are the same
        UnsupportedConversion: If the pair is not one of the wired routes
    """
    source = ReportFormat.parse(source_format)
    target = ReportFormat.parse(target_format)

    if source == target:
        raise InvalidRequest("Source and target formats must be different")

    if (source, target) not in ROUTES:
        raise UnsupportedConversion(source.value, target.value)

    return READERS[source], WRITERS[target]


def read_report(data: Any, source_format: ReportFormat | str) -> NormalizedReport:
    """Parse input of the given format into a normalized report."""
    return READERS[ReportFormat.parse(source_format)].parse(data)


def convert(
    data: Any, source_format: ReportFormat | str, target_format: ReportFormat | str
) -> str:
    """Convert a report from one format to another.

    Args:
        data: Report text, or a decoded JSON object for XARF input
        source_format: One of xarf, arf, csv, iodef
        target_format: One of xarf, arf, csv, iodef, different from source_format

    Returns:
        The report rendered in the target format

    Raises:
        InvalidRequest: If a label is unknown or both formats are the same
        UnsupportedConversion: If neither side of the pair is XARF
        ParseError: If the input is malformed for the source format
    """
    reader, writer = resolve_route(source_format, target_format)
    logger.debug(f"Converting {reader.format.value} -> {writer.format.value}")

    report = reader.parse(data)
    return writer.serialize(report)


def supported_conversions() -> list[tuple[str, str]]:
    """List the wired (source, target) pairs, sorted by label."""
    return sorted((source.value, target.value) for source, target in ROUTES)
