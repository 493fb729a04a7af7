"""
Tests for the CSV export of parsed reports.
"""
import csv
import io
import unittest
from datetime import date

from services.report_export_service import ReportExportService
from services.report_parser_service import parse_report
from tests.fixtures.report_fixtures import build_report, make_row


class TestReportExportService(unittest.TestCase):
    def setUp(self):
        self.service = ReportExportService()
        rows = [
            make_row(country='US', quantity='2', extended_share='1.40', partner_share='0.70'),
            make_row(country='DE', currency='EUR', quantity='1', extended_share='0.60', partner_share='0.60'),
            make_row(country='US', quantity='1', extended_share='0.70', partner_share='0.70',
                     sku='com.acme.pro', title='Acme, Pro'),
        ]
        self.report = parse_report(build_report(rows))

    def _sections(self, text):
        rows = list(csv.reader(io.StringIO(text)))
        sections = {}
        current = None
        for row in rows:
            if not row:
                current = None
                continue
            if current is None and len(row) == 1 and row[0].isupper():
                current = row[0]
                sections[current] = []
                continue
            if current:
                sections[current].append(row)
        return rows, sections

    def test_header_block(self):
        text = self.service.generate_csv(self.report, generated_on=date(2024, 2, 3))
        rows, _ = self._sections(text)
        self.assertEqual(rows[0], ['App Store Sales Report'])
        self.assertEqual(rows[1], ['Vendor', 'Acme Inc'])
        self.assertEqual(rows[2], ['Period Start', '2024-01-01'])
        self.assertEqual(rows[3], ['Period End', '2024-01-31'])
        self.assertEqual(rows[4], ['Generated', '2024-02-03'])

    def test_sections(self):
        text = self.service.generate_csv(self.report, generated_on=date(2024, 2, 3))
        _, sections = self._sections(text)

        self.assertEqual(sections['SUMMARY BY CURRENCY'], [
            ['Currency', 'Units Sold', 'Net Proceeds'],
            ['EUR', '1', '0.60'],
            ['USD', '3', '2.10'],
        ])
        self.assertEqual(sections['COUNTRY & CURRENCY BREAKDOWN'], [
            ['Country', 'Currency', 'Units', 'Net Proceeds'],
            ['DE', 'EUR', '1', '0.60'],
            ['US', 'USD', '3', '2.10'],
        ])
        self.assertEqual(sections['PRODUCT BREAKDOWN'], [
            ['Product', 'SKU', 'Units', 'Net Proceeds'],
            ['Acme App', 'com.acme.app', '3', '1.40 USD | 0.60 EUR'],
            ['Acme, Pro', 'com.acme.pro', '1', '0.70 USD'],
        ])
        details = sections['TRANSACTION DETAILS']
        self.assertEqual(details[0], ['Date', 'Country', 'Product', 'SKU', 'Type', 'Quantity', 'Proceeds', 'Currency'])
        self.assertEqual(details[1], ['2024-01-15', 'US', 'Acme App', 'com.acme.app', 'Sale', '2', '0.70', 'USD'])
        self.assertEqual(len(details), 4)

    def test_values_with_commas_are_quoted(self):
        text = self.service.generate_csv(self.report, generated_on=date(2024, 2, 3))
        self.assertIn('"Acme, Pro",com.acme.pro,1,0.70 USD', text)

    def test_product_section_omitted_when_empty(self):
        report = self.report.model_copy(update={
            'summary': self.report.summary.model_copy(update={'by_product': []})
        })
        text = self.service.generate_csv(report)
        self.assertNotIn('PRODUCT BREAKDOWN', text)
        self.assertIn('TRANSACTION DETAILS', text)

    def test_export_does_not_modify_report(self):
        before = self.report.model_dump()
        self.service.generate_csv(self.report)
        self.assertEqual(self.report.model_dump(), before)

    def test_out_of_range_amounts_export_as_zero(self):
        rows = [
            make_row(quantity='1', extended_share='1e30', partner_share='1e30'),
            make_row(quantity='1', extended_share='1e1000000', partner_share='0.70'),
        ]
        report = parse_report(build_report(rows))
        text = self.service.generate_csv(report, generated_on=date(2024, 2, 3))
        _, sections = self._sections(text)
        self.assertEqual(sections['SUMMARY BY CURRENCY'][1], ['USD', '2', '0.00'])
        self.assertEqual(sections['TRANSACTION DETAILS'][1][6], '0.00')

    def test_export_filename(self):
        self.assertEqual(self.service.export_filename(self.report), 'AppStore_Report_2024-01-01_2024-01-31.csv')


if __name__ == '__main__':
    unittest.main()
