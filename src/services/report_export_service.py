"""
Delimited-text export of a parsed report.

Produces a CSV that opens cleanly in spreadsheet tools: a short header block
followed by the currency, country and product breakdowns and the
transaction details. The report is only read, never modified.
"""
import csv
import io
import logging
from datetime import date
from typing import Optional

from models.report import ParsedReport
from utils.parser_config import get_parser_config
from utils.report_formatting import format_amount, format_date

logger = logging.getLogger(__name__)

REPORT_TITLE = 'App Store Sales Report'


class ReportExportService:
    """Service for rendering a ParsedReport as CSV text"""

    def generate_csv(self, report: ParsedReport, generated_on: Optional[date] = None) -> str:
        """
        Render the report as CSV.

        Args:
            report: The parsed report
            generated_on: Date written on the 'Generated' line; today when omitted

        Returns:
            CSV text with one blank line between sections
        """
        generated_on = generated_on or date.today()
        output = io.StringIO()
        writer = csv.writer(output, lineterminator='\n')

        writer.writerow([REPORT_TITLE])
        writer.writerow(['Vendor', report.metadata.vendor_name])
        writer.writerow(['Period Start', format_date(report.metadata.start_date)])
        writer.writerow(['Period End', format_date(report.metadata.end_date)])
        writer.writerow(['Generated', generated_on.isoformat()])
        writer.writerow([])

        writer.writerow(['SUMMARY BY CURRENCY'])
        writer.writerow(['Currency', 'Units Sold', 'Net Proceeds'])
        for c in report.summary.by_currency:
            writer.writerow([c.currency, c.total_quantity, format_amount(c.total_proceeds)])
        writer.writerow([])

        writer.writerow(['COUNTRY & CURRENCY BREAKDOWN'])
        writer.writerow(['Country', 'Currency', 'Units', 'Net Proceeds'])
        for c in report.summary.by_country:
            writer.writerow([c.country_of_sale, c.currency, c.quantity, format_amount(c.proceeds)])
        writer.writerow([])

        if report.summary.by_product:
            writer.writerow(['PRODUCT BREAKDOWN'])
            writer.writerow(['Product', 'SKU', 'Units', 'Net Proceeds'])
            for p in report.summary.by_product:
                proceeds = ' | '.join(
                    f"{format_amount(amount)} {currency}"
                    for currency, amount in p.proceeds_by_currency.items()
                )
                writer.writerow([p.title, p.sku, p.quantity, proceeds])
            writer.writerow([])

        sale_code = get_parser_config().sale_code
        writer.writerow(['TRANSACTION DETAILS'])
        writer.writerow(['Date', 'Country', 'Product', 'SKU', 'Type', 'Quantity', 'Proceeds', 'Currency'])
        for t in report.transactions:
            writer.writerow([
                format_date(t.transaction_date),
                t.country_of_sale,
                t.title,
                t.sku,
                'Sale' if t.is_sale(sale_code) else 'Return',
                t.quantity,
                format_amount(t.partner_share),
                t.partner_share_currency,
            ])

        logger.info(f"Exported {len(report.transactions)} transactions to CSV")
        return output.getvalue()

    def export_filename(self, report: ParsedReport) -> str:
        """File name for the CSV export, built from the reporting period."""
        period_start = format_date(report.metadata.start_date)
        period_end = format_date(report.metadata.end_date)
        return f"AppStore_Report_{period_start}_{period_end}.csv"


report_export_service = ReportExportService()
