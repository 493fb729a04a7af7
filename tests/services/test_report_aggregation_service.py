"""
Unit tests for the report aggregation service.
"""
import unittest
from decimal import Decimal

from services.report_aggregation_service import ReportAggregationService, collation_key
from tests.fixtures.report_fixtures import create_test_transaction


class TestCollationKey(unittest.TestCase):
    def test_case_and_accents_ignored_first(self):
        values = ['b', 'Ä', 'a', 'C', 'É']
        self.assertEqual(sorted(values, key=collation_key), ['a', 'Ä', 'b', 'C', 'É'])

    def test_total_order_for_case_variants(self):
        self.assertNotEqual(collation_key('us'), collation_key('US'))


class TestReportAggregationService(unittest.TestCase):
    def setUp(self):
        self.service = ReportAggregationService()

    def test_by_country_groups_country_and_currency(self):
        transactions = [
            create_test_transaction(country='US', currency='USD', quantity=2, extended_share='1.40'),
            create_test_transaction(country='US', currency='USD', quantity=1, extended_share='0.70'),
            create_test_transaction(country='US', currency='EUR', quantity=1, extended_share='0.60'),
            create_test_transaction(country='DE', currency='EUR', quantity=3, extended_share='1.80'),
        ]
        result = self.service.aggregate_by_country(transactions)

        self.assertEqual(
            [(c.country_of_sale, c.currency, c.quantity, c.proceeds) for c in result],
            [
                ('DE', 'EUR', 3, Decimal('1.80')),
                ('US', 'USD', 3, Decimal('2.10')),
                ('US', 'EUR', 1, Decimal('0.60')),
            ]
        )

    def test_by_country_uses_extended_partner_share(self):
        transaction = create_test_transaction(quantity=3, extended_share='2.10')
        transaction = transaction.model_copy(update={'partner_share': Decimal('0.70')})
        result = self.service.aggregate_by_country([transaction])
        self.assertEqual(result[0].proceeds, Decimal('2.10'))

    def test_by_product(self):
        transactions = [
            create_test_transaction(sku='sku.b', title='Zeta', quantity=1, currency='USD', extended_share='0.70'),
            create_test_transaction(sku='sku.a', title='Alpha', quantity=2, currency='EUR', extended_share='1.20'),
            create_test_transaction(sku='sku.a', title='Alpha', quantity=1, currency='USD', extended_share='0.70'),
            create_test_transaction(sku='sku.a', title='Alpha', quantity=1, currency='EUR', extended_share='0.60'),
        ]
        result = self.service.aggregate_by_product(transactions)

        self.assertEqual([p.sku for p in result], ['sku.a', 'sku.b'])
        alpha = result[0]
        self.assertEqual(alpha.quantity, 4)
        self.assertEqual(list(alpha.proceeds_by_currency.items()), [
            ('EUR', Decimal('1.80')),
            ('USD', Decimal('0.70')),
        ])

    def test_by_product_shared_sku_keeps_first_title(self):
        transactions = [
            create_test_transaction(sku='com.acme.app', title='Acme App', quantity=1, extended_share='0.70'),
            create_test_transaction(sku='com.acme.app', title='Acme App (Renamed)', quantity=2, extended_share='1.40'),
        ]
        result = self.service.aggregate_by_product(transactions)

        self.assertEqual(len(result), 1)
        self.assertEqual(result[0].title, 'Acme App')
        self.assertEqual(result[0].quantity, 3)
        self.assertEqual(result[0].proceeds_by_currency, {'USD': Decimal('2.10')})

    def test_by_currency(self):
        transactions = [
            create_test_transaction(country='US', currency='USD', quantity=2, extended_share='1.40'),
            create_test_transaction(country='DE', currency='EUR', quantity=1, extended_share='0.60'),
            create_test_transaction(country='CA', currency='USD', quantity=1, extended_share='0.70'),
        ]
        result = self.service.aggregate_by_currency(transactions)

        self.assertEqual(
            [(c.currency, c.total_quantity, c.total_proceeds) for c in result],
            [('EUR', 1, Decimal('0.60')), ('USD', 3, Decimal('2.10'))]
        )

    def test_country_and_currency_totals_reconcile(self):
        transactions = [
            create_test_transaction(country=country, currency=currency, quantity=q, extended_share=share)
            for country, currency, q, share in [
                ('US', 'USD', 1, '0.70'), ('CA', 'USD', 2, '1.33'), ('MX', 'USD', 5, '3.01'),
                ('FR', 'EUR', 1, '0.59'), ('DE', 'EUR', 4, '2.40'), ('JP', 'JPY', 3, '210'),
            ]
        ]
        by_country = self.service.aggregate_by_country(transactions)
        by_currency = self.service.aggregate_by_currency(transactions)

        for summary in by_currency:
            with self.subTest(currency=summary.currency):
                matching = [c for c in by_country if c.currency == summary.currency]
                self.assertEqual(sum(c.proceeds for c in matching), summary.total_proceeds)
                self.assertEqual(sum(c.quantity for c in matching), summary.total_quantity)

    def test_empty_input(self):
        summary = self.service.build_summary([])
        self.assertEqual(summary.by_country, [])
        self.assertEqual(summary.by_product, [])
        self.assertEqual(summary.by_currency, [])
        self.assertEqual(summary.total_transactions, 0)

    def test_build_summary_counts_transactions(self):
        transactions = [create_test_transaction(), create_test_transaction(country='GB', currency='GBP')]
        summary = self.service.build_summary(transactions)
        self.assertEqual(summary.total_transactions, 2)
        self.assertEqual(len(summary.by_country), 2)
        self.assertEqual(len(summary.by_product), 1)

    def test_aggregation_does_not_change_input(self):
        transactions = [create_test_transaction(country='US'), create_test_transaction(country='AU')]
        before = list(transactions)
        self.service.build_summary(transactions)
        self.assertEqual(transactions, before)


if __name__ == '__main__':
    unittest.main()
