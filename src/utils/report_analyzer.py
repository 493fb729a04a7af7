"""
Layout analysis for App Store financial reports.

An export mixes a few key/value metadata lines, a wide transaction header,
the transaction rows and a trailing per-country summary, with no explicit
section markers. The helpers here infer those regions from the content.
"""
import logging
from typing import List, NamedTuple, Optional

from models.report import ReportMetadata
from utils.parser_config import ParserConfig, get_parser_config
from utils.report_errors import HeaderNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    'TAB',
    'COMMA',
    'ReportRegions',
    'detect_delimiter',
    'split_report_lines',
    'split_row',
    'extract_metadata',
    'find_header_line',
    'find_summary_line',
    'locate_regions',
]

TAB = '\t'
COMMA = ','

HEADER_MARKERS = ('Transaction Date', 'Country of Sale')
SUMMARY_PREFIXES = ('Country Of Sale', 'Country of Sale')

METADATA_KEYS = {
    'Vendor Name': 'vendor_name',
    'Start Date': 'start_date',
    'End Date': 'end_date',
}


class ReportRegions(NamedTuple):
    """Row indexes (into the non-blank line list) bounding the data region."""
    header_index: int
    summary_index: int

    @property
    def data_range(self) -> range:
        return range(self.header_index + 1, self.summary_index)


def detect_delimiter(content: str, config: Optional[ParserConfig] = None) -> str:
    """
    Decide whether the report is tab or comma delimited.

    Counts tabs and commas across the first few physical lines; tabs win only
    with a strict majority, so empty input falls back to a comma.
    """
    config = config or get_parser_config()
    sample = '\n'.join(content.split('\n')[:config.delimiter_sample_lines])
    tab_count = sample.count(TAB)
    comma_count = sample.count(COMMA)
    delimiter = TAB if tab_count > comma_count else COMMA
    logger.debug(f"Delimiter detection: tabs={tab_count} commas={comma_count} -> {delimiter!r}")
    return delimiter


def split_report_lines(content: str) -> List[str]:
    """Split report text into lines, dropping lines that are blank."""
    return [line.rstrip('\r') for line in content.split('\n') if line.strip()]


def split_row(line: str, delimiter: str) -> List[str]:
    return line.split(delimiter)


def extract_metadata(lines: List[str], delimiter: str, config: Optional[ParserConfig] = None) -> ReportMetadata:
    """
    Read the vendor name and reporting period from the first lines.

    Only exact (case-sensitive) keys are recognized. Values keep the report's
    own formatting; missing keys leave an empty string.
    """
    config = config or get_parser_config()
    values = {}
    for line in lines[:config.metadata_scan_lines]:
        parts = split_row(line, delimiter)
        if len(parts) < 2:
            continue
        key = parts[0].strip()
        field_name = METADATA_KEYS.get(key)
        if field_name:
            values[field_name] = parts[1].strip()

    metadata = ReportMetadata(**values)
    logger.debug(f"Extracted metadata: {metadata}")
    return metadata


def find_header_line(lines: List[str], config: Optional[ParserConfig] = None) -> Optional[int]:
    """Find the index of the transaction header line near the top of the file."""
    config = config or get_parser_config()
    for i, line in enumerate(lines[:config.header_scan_window]):
        if all(marker in line for marker in HEADER_MARKERS):
            return i
    return None


def find_summary_line(lines: List[str], delimiter: str, config: Optional[ParserConfig] = None) -> int:
    """
    Find where the trailing summary section starts.

    Scans backwards so that country-like rows earlier in the file do not end
    the data region early. The summary header is told apart from the wide
    transaction header by its column count. Returns len(lines) when the file
    has no summary section.
    """
    config = config or get_parser_config()
    for i in range(len(lines) - 1, -1, -1):
        line = lines[i].strip()
        if line.startswith(SUMMARY_PREFIXES):
            if len(split_row(line, delimiter)) <= config.summary_max_columns:
                return i
    return len(lines)


def locate_regions(lines: List[str], delimiter: str, config: Optional[ParserConfig] = None) -> ReportRegions:
    """
    Locate the header and summary boundaries of a report.

    Raises:
        HeaderNotFoundError: If no transaction header is within the scan window
    """
    config = config or get_parser_config()
    header_index = find_header_line(lines, config)
    if header_index is None:
        scanned = min(len(lines), config.header_scan_window)
        logger.error(f"Transaction header not found in the first {scanned} lines")
        raise HeaderNotFoundError(scanned)

    summary_index = find_summary_line(lines, delimiter, config)
    regions = ReportRegions(header_index=header_index, summary_index=summary_index)
    logger.info(f"Report regions: header at line {header_index}, summary at line {summary_index}")
    return regions
