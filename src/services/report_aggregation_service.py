"""
Aggregations over the retained sales of a parsed report.

Each pass groups the same read-only transaction list on its own key and
sums quantities and proceeds, so the passes can run in any order.
"""
import logging
import unicodedata
from typing import Dict, List, Tuple

from models.breakdown import CountryBreakdown, ProductBreakdown, CurrencySummary
from models.money import Money
from models.report import ReportSummary
from models.transaction import Transaction

logger = logging.getLogger(__name__)


def collation_key(value: str) -> Tuple[str, str, str]:
    """
    Sort key approximating locale-aware ordering.

    Accents and case are ignored first; ties are broken by case-folded text
    and finally by the raw string so the order is total.
    """
    decomposed = unicodedata.normalize('NFKD', value)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value.casefold(), value)


class _ProductTotals:
    """Running totals for one SKU while aggregating."""

    def __init__(self, transaction: Transaction):
        self.title = transaction.title
        self.sku = transaction.sku
        self.quantity = 0
        self.proceeds: Dict[str, Money] = {}

    def add(self, transaction: Transaction) -> None:
        self.quantity += transaction.quantity
        currency = transaction.partner_share_currency
        running = self.proceeds.get(currency, Money.zero(currency))
        self.proceeds[currency] = running + transaction.proceeds


class ReportAggregationService:
    """
    Builds the country, product and currency breakdowns of a report.

    Proceeds always use the extended partner share. Amounts are summed as
    Decimal through Money, which refuses to mix currencies.
    """

    def aggregate_by_country(self, transactions: List[Transaction]) -> List[CountryBreakdown]:
        """Group by (country of sale, partner share currency), sorted by country."""
        totals: Dict[Tuple[str, str], Tuple[int, Money]] = {}

        for t in transactions:
            key = (t.country_of_sale, t.partner_share_currency)
            quantity, proceeds = totals.get(key, (0, Money.zero(t.partner_share_currency)))
            totals[key] = (quantity + t.quantity, proceeds + t.proceeds)

        breakdown = [
            CountryBreakdown(
                country_of_sale=country,
                currency=currency,
                quantity=quantity,
                proceeds=proceeds.amount
            )
            for (country, currency), (quantity, proceeds) in totals.items()
        ]
        return sorted(breakdown, key=lambda b: collation_key(b.country_of_sale))

    def aggregate_by_product(self, transactions: List[Transaction]) -> List[ProductBreakdown]:
        """
        Group by SKU, sorted by title.

        The title comes from the first row seen for the SKU. Proceeds are
        kept per currency in first-seen order.
        """
        totals: Dict[str, _ProductTotals] = {}

        for t in transactions:
            product = totals.get(t.sku)
            if product is None:
                product = totals[t.sku] = _ProductTotals(t)
            product.add(t)

        breakdown = [
            ProductBreakdown(
                title=product.title,
                sku=product.sku,
                quantity=product.quantity,
                proceeds_by_currency={
                    currency: money.amount for currency, money in product.proceeds.items()
                }
            )
            for product in totals.values()
        ]
        return sorted(breakdown, key=lambda b: collation_key(b.title))

    def aggregate_by_currency(self, transactions: List[Transaction]) -> List[CurrencySummary]:
        """Group by partner share currency, sorted by currency code."""
        totals: Dict[str, Tuple[int, Money]] = {}

        for t in transactions:
            currency = t.partner_share_currency
            quantity, proceeds = totals.get(currency, (0, Money.zero(currency)))
            totals[currency] = (quantity + t.quantity, proceeds + t.proceeds)

        summaries = [
            CurrencySummary(
                currency=currency,
                total_quantity=quantity,
                total_proceeds=proceeds.amount
            )
            for currency, (quantity, proceeds) in totals.items()
        ]
        return sorted(summaries, key=lambda s: collation_key(s.currency))

    def build_summary(self, transactions: List[Transaction]) -> ReportSummary:
        """Run all three aggregations and count the retained transactions."""
        summary = ReportSummary(
            by_country=self.aggregate_by_country(transactions),
            by_product=self.aggregate_by_product(transactions),
            by_currency=self.aggregate_by_currency(transactions),
            total_transactions=len(transactions)
        )
        logger.info(
            f"Aggregated {summary.total_transactions} transactions into "
            f"{len(summary.by_country)} country, {len(summary.by_product)} product "
            f"and {len(summary.by_currency)} currency groups"
        )
        return summary


report_aggregation_service = ReportAggregationService()
