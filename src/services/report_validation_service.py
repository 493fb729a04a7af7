"""
Structural pre-check of a report before it is parsed.
"""
import logging
from typing import List, Optional

from models.validation import ValidationResult
from utils.parser_config import ParserConfig, get_parser_config
from utils.report_analyzer import detect_delimiter, extract_metadata, find_header_line, split_report_lines
from utils.report_parser import REQUIRED_COLUMNS, parse_header

logger = logging.getLogger(__name__)

TOO_SHORT_MESSAGE = 'File appears to be empty or too short'
HEADER_NOT_FOUND_MESSAGE = 'Could not find transaction data headers. Is this an Apple App Store financial report?'
MISSING_VENDOR_MESSAGE = 'Vendor name not found in report'
MISSING_PERIOD_MESSAGE = 'Reporting period dates not found'


def validate_report(content: str, delimiter: Optional[str] = None,
                    config: Optional[ParserConfig] = None) -> ValidationResult:
    """
    Check that a report has a usable structure.

    Args:
        content: The complete decoded text of the report
        delimiter: Field delimiter; detected from the content when omitted
        config: Parser configuration; the global one when omitted

    Returns:
        ValidationResult. A file that is too short or has no transaction
        header is reported immediately without further checks.
    """
    config = config or get_parser_config()
    if delimiter is None:
        delimiter = detect_delimiter(content, config)

    errors: List[str] = []
    warnings: List[str] = []
    lines = split_report_lines(content)

    if len(lines) < config.min_report_lines:
        errors.append(TOO_SHORT_MESSAGE)
        logger.info(f"Validation failed: only {len(lines)} non-blank lines")
        return ValidationResult.from_messages(errors, warnings)

    header_index = find_header_line(lines, config)
    if header_index is None:
        errors.append(HEADER_NOT_FOUND_MESSAGE)
        logger.info("Validation failed: transaction header not found")
        return ValidationResult.from_messages(errors, warnings)

    headers = parse_header(lines[header_index], delimiter)
    for required in REQUIRED_COLUMNS:
        if required not in headers:
            errors.append(f"Missing required column: {required}")

    metadata = extract_metadata(lines, delimiter, config)
    if not metadata.vendor_name:
        warnings.append(MISSING_VENDOR_MESSAGE)
    if not metadata.start_date or not metadata.end_date:
        warnings.append(MISSING_PERIOD_MESSAGE)

    result = ValidationResult.from_messages(errors, warnings)
    logger.info(f"Validation result: valid={result.valid}, errors={len(errors)}, warnings={len(warnings)}")
    return result
