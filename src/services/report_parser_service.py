"""
Parse an App Store financial report into a ParsedReport.
"""
import logging
from typing import List, Optional

from models.diagnostics import ParseDiagnostics
from models.report import ParsedReport, ReportMetadata
from models.transaction import Transaction
from services.report_aggregation_service import ReportAggregationService, report_aggregation_service
from utils.parser_config import ParserConfig, get_parser_config
from utils.report_analyzer import (
    ReportRegions,
    detect_delimiter,
    extract_metadata,
    locate_regions,
    split_report_lines,
    split_row,
)
from utils.report_errors import ReportTooShortError
from utils.report_parser import parse_header, parse_transaction_row

logger = logging.getLogger(__name__)


class ReportParserService:
    """
    Runs the parsing pipeline over the full text of one report.

    The delimiter is detected first, then metadata and the data region
    boundaries are read from the same line list. Every data row is decoded,
    only sales are kept, and the aggregations are computed from them.
    """

    def __init__(self, aggregation_service: Optional[ReportAggregationService] = None,
                 config: Optional[ParserConfig] = None):
        self.aggregation_service = aggregation_service or report_aggregation_service
        self._config = config

    @property
    def config(self) -> ParserConfig:
        return self._config or get_parser_config()

    def parse(self, content: str) -> ParsedReport:
        """
        Parse report text.

        Args:
            content: The complete decoded text of the report

        Returns:
            ParsedReport with metadata, sales in file order and the summary

        Raises:
            ReportTooShortError: If the file has too few non-blank lines
            HeaderNotFoundError: If the transaction header cannot be located
        """
        config = self.config
        delimiter = detect_delimiter(content, config)
        lines = split_report_lines(content)

        if len(lines) < config.min_report_lines:
            logger.error(f"Report has {len(lines)} non-blank lines, at least {config.min_report_lines} required")
            raise ReportTooShortError(len(lines), config.min_report_lines)

        metadata = extract_metadata(lines, delimiter, config)
        regions = locate_regions(lines, delimiter, config)

        diagnostics = ParseDiagnostics()
        transactions = self._decode_transactions(lines, delimiter, regions, diagnostics)
        logger.info(
            f"Decoded {diagnostics.data_rows} data rows: {len(transactions)} sales kept, "
            f"{diagnostics.returns_discarded} returns discarded, "
            f"{diagnostics.rows_missing_required_fields} incomplete rows skipped"
        )
        for message in diagnostics.warning_messages():
            logger.warning(message)

        return self.assemble(metadata, transactions, diagnostics)

    def _decode_transactions(self, lines: List[str], delimiter: str, regions: ReportRegions,
                             diagnostics: ParseDiagnostics) -> List[Transaction]:
        headers = parse_header(lines[regions.header_index], delimiter)
        sale_code = self.config.sale_code

        transactions = []
        for i in regions.data_range:
            diagnostics.data_rows += 1
            transaction = parse_transaction_row(split_row(lines[i], delimiter), headers, diagnostics)
            if transaction is None:
                continue
            if not transaction.is_sale(sale_code):
                diagnostics.returns_discarded += 1
                continue
            transactions.append(transaction)
        return transactions

    def assemble(self, metadata: ReportMetadata, transactions: List[Transaction],
                 diagnostics: Optional[ParseDiagnostics] = None) -> ParsedReport:
        """Compose the final report from metadata and the retained sales."""
        return ParsedReport(
            metadata=metadata,
            transactions=list(transactions),
            summary=self.aggregation_service.build_summary(transactions),
            diagnostics=diagnostics or ParseDiagnostics()
        )


report_parser_service = ReportParserService()


def parse_report(content: str) -> ParsedReport:
    """Parse an App Store financial report using the default service."""
    return report_parser_service.parse(content)
