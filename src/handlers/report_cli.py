#!/usr/bin/env python3
"""
App Store Report CLI
Reads an App Store Connect financial report (.txt/.tsv/.csv) and validates,
summarizes or exports it.

Usage:
    appstore-report validate REPORT            # Structural check with errors and warnings
    appstore-report summary REPORT [--json]    # Totals by currency, country and product
    appstore-report export-csv REPORT [-o OUT] # Write the spreadsheet-friendly CSV

Examples:
    # Check a downloaded report before sharing it
    appstore-report validate financial_report.txt

    # Export next to the report using the default file name
    appstore-report export-csv financial_report.txt
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from models.report import ParsedReport
from services.report_export_service import report_export_service
from services.report_parser_service import parse_report
from services.report_validation_service import validate_report
from utils.logging_config import configure_logging
from utils.report_errors import ReportFormatError
from utils.report_formatting import format_currency, format_date

logger = logging.getLogger(__name__)


def read_report(path: str) -> str:
    """Read report text, tolerating a UTF-8 byte order mark."""
    return Path(path).read_text(encoding='utf-8-sig')


def print_summary(report: ParsedReport) -> None:
    metadata = report.metadata
    print(f"Vendor: {metadata.vendor_name or '-'}")
    print(f"Period: {format_date(metadata.start_date)} to {format_date(metadata.end_date)}")
    print(f"Transactions: {report.summary.total_transactions}")

    print("\nBy currency:")
    for c in report.summary.by_currency:
        print(f"  {c.currency}: {c.total_quantity} units, {format_currency(c.total_proceeds, c.currency)}")

    print("\nBy country:")
    for c in report.summary.by_country:
        print(f"  {c.country_of_sale} ({c.currency}): {c.quantity} units, {format_currency(c.proceeds, c.currency)}")

    if report.summary.by_product:
        print("\nBy product:")
        for p in report.summary.by_product:
            proceeds = ', '.join(format_currency(amount, currency) for currency, amount in p.proceeds_by_currency.items())
            print(f"  {p.title} [{p.sku}]: {p.quantity} units, {proceeds}")

    for message in report.diagnostics.warning_messages():
        print(f"\nWarning: {message}")


def cmd_validate(args: argparse.Namespace) -> int:
    result = validate_report(read_report(args.report))
    for error in result.errors:
        print(f"Error: {error}")
    for warning in result.warnings:
        print(f"Warning: {warning}")
    if result.valid:
        print("Report is valid")
    return 0 if result.valid else 1


def cmd_summary(args: argparse.Namespace) -> int:
    report = parse_report(read_report(args.report))
    if args.json:
        print(report.model_dump_json(by_alias=True, indent=2))
    else:
        print_summary(report)
    return 0


def cmd_export_csv(args: argparse.Namespace) -> int:
    report = parse_report(read_report(args.report))
    output = Path(args.output) if args.output else Path(args.report).parent / report_export_service.export_filename(report)
    output.write_text(report_export_service.generate_csv(report), encoding='utf-8')
    print(f"Wrote {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='appstore-report',
        description="App Store sales report tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    validate_parser = subparsers.add_parser('validate', help='Check report structure')
    validate_parser.add_argument('report', help='Path to the report file')
    validate_parser.set_defaults(func=cmd_validate)

    summary_parser = subparsers.add_parser('summary', help='Print report totals')
    summary_parser.add_argument('report', help='Path to the report file')
    summary_parser.add_argument('--json', action='store_true', help='Print the full parsed report as JSON')
    summary_parser.set_defaults(func=cmd_summary)

    export_parser = subparsers.add_parser('export-csv', help='Export the report as CSV')
    export_parser.add_argument('report', help='Path to the report file')
    export_parser.add_argument('-o', '--output', help='Output path (default: AppStore_Report_<start>_<end>.csv)')
    export_parser.set_defaults(func=cmd_export_csv)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    configure_logging(default_level='WARNING')
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ReportFormatError as e:
        logger.error(f"Report could not be parsed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.report}: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
