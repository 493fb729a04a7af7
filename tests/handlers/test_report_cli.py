"""
Tests for the appstore-report command line entry point.
"""
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from handlers.report_cli import main
from tests.fixtures.report_fixtures import build_report, make_row


class TestReportCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.report_path = Path(self.tmp.name) / 'financial_report.txt'
        rows = [
            make_row(country='US', quantity='2', extended_share='1.40'),
            make_row(country='GB', currency='GBP', quantity='1', extended_share='0.55'),
        ]
        self.report_path.write_text(build_report(rows), encoding='utf-8')

    def run_cli(self, *argv):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout, \
                patch('sys.stderr', new_callable=io.StringIO) as stderr:
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_validate(self):
        code, out, _ = self.run_cli('validate', str(self.report_path))
        self.assertEqual(code, 0)
        self.assertIn('Report is valid', out)

    def test_validate_invalid_file(self):
        self.report_path.write_text('too\nshort\n', encoding='utf-8')
        code, out, _ = self.run_cli('validate', str(self.report_path))
        self.assertEqual(code, 1)
        self.assertIn('Error: File appears to be empty or too short', out)

    def test_summary(self):
        code, out, _ = self.run_cli('summary', str(self.report_path))
        self.assertEqual(code, 0)
        self.assertIn('Vendor: Acme Inc', out)
        self.assertIn('Period: 2024-01-01 to 2024-01-31', out)
        self.assertIn('USD: 2 units, $1.40', out)
        self.assertIn('GB (GBP): 1 units, £0.55', out)

    def test_summary_json(self):
        code, out, _ = self.run_cli('summary', str(self.report_path), '--json')
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data['summary']['totalTransactions'], 2)
        self.assertEqual(data['metadata']['vendorName'], 'Acme Inc')

    def test_export_csv_default_name(self):
        code, out, _ = self.run_cli('export-csv', str(self.report_path))
        self.assertEqual(code, 0)
        exported = Path(self.tmp.name) / 'AppStore_Report_2024-01-01_2024-01-31.csv'
        self.assertTrue(exported.exists())
        self.assertIn('SUMMARY BY CURRENCY', exported.read_text(encoding='utf-8'))

    def test_export_csv_output_path(self):
        output = Path(self.tmp.name) / 'out.csv'
        code, _, _ = self.run_cli('export-csv', str(self.report_path), '-o', str(output))
        self.assertEqual(code, 0)
        self.assertTrue(output.exists())

    def test_unparseable_report(self):
        self.report_path.write_text('\n'.join(['Vendor Name\tAcme'] * 12), encoding='utf-8')
        code, _, err = self.run_cli('summary', str(self.report_path))
        self.assertEqual(code, 1)
        self.assertIn('could not find data headers', err)

    def test_missing_file(self):
        code, _, err = self.run_cli('summary', str(Path(self.tmp.name) / 'missing.txt'))
        self.assertEqual(code, 1)
        self.assertIn('could not read', err)


if __name__ == '__main__':
    unittest.main()
