"""Tests for totals and groupings over financial records."""

from decimal import Decimal
from itertools import permutations
from types import SimpleNamespace

import pytest

from ledgerdesk.core.entities import InvoiceDocument, LineItem
from ledgerdesk.core.exceptions import InvalidAmountError, ValidationError
from ledgerdesk.core.services.aggregator import (
    GRAND_TOTAL,
    category_totals,
    compute_document_total,
    compute_expense_total,
    compute_line_amount,
    filter_expenses,
    group_by_key,
    group_tax_entries_by_year,
    invoice_totals_by_status,
    sum_by_group,
    summarize_tax_entries,
)


def _rec(**kwargs) -> SimpleNamespace:
    return SimpleNamespace(**kwargs)


class TestComputeLineAmount:
    def test_half_up(self):
        assert compute_line_amount(2, "10.005") == Decimal("20.01")

    def test_exact(self):
        assert compute_line_amount("1.5", "4") == Decimal("6.00")

    def test_zero_quantity(self):
        assert compute_line_amount(0, 100) == Decimal("0.00")

    def test_negative_quantity(self):
        with pytest.raises(InvalidAmountError):
            compute_line_amount(-1, 5)

    def test_negative_price(self):
        with pytest.raises(InvalidAmountError):
            compute_line_amount(1, -5)


class TestComputeDocumentTotal:
    def test_sum(self, sample_line_items):
        assert compute_document_total(sample_line_items) == Decimal("1249.99")

    def test_empty(self):
        total = compute_document_total([])
        assert total == Decimal("0.00")
        assert str(total) == "0.00"

    def test_many_small_amounts(self):
        items = [_rec(amount=Decimal("0.10")) for _ in range(10)]
        assert compute_document_total(items) == Decimal("1.00")

    def test_invariant_under_reordering(self):
        items = [
            LineItem(description="A", quantity=1, unit_price=50),
            LineItem(description="B", quantity=3, unit_price="9.99"),
            LineItem(description="C", quantity=2, unit_price="10.005"),
        ]

        totals = {compute_document_total(list(order)) for order in permutations(items)}

        assert totals == {Decimal("99.98")}

    def test_worked_example(self):
        items = [
            LineItem(description="A", quantity=1, unit_price=50),
            LineItem(description="B", quantity=3, unit_price="9.99"),
        ]
        assert compute_document_total(items) == Decimal("79.97")

    def test_amount_too_large_for_cents(self):
        with pytest.raises(ValidationError, match="out of range"):
            compute_line_amount("1e30", 1)


class TestGroupByKey:
    def test_first_seen_order(self):
        records = [_rec(k="b"), _rec(k="a"), _rec(k="b"), _rec(k="c")]
        groups = group_by_key(records, lambda r: r.k)
        assert list(groups) == ["b", "a", "c"]
        assert len(groups["b"]) == 2

    def test_empty(self):
        assert group_by_key([], lambda r: r) == {}


class TestSumByGroup:
    def test_grand_total_last(self):
        groups = {
            "Travel": [_rec(amount="10.00"), _rec(amount="5.50")],
            "Food": [_rec(amount="3.25")],
        }
        totals = sum_by_group(groups)
        assert list(totals) == ["Travel", "Food", GRAND_TOTAL]
        assert totals["Travel"] == Decimal("15.50")
        assert totals[GRAND_TOTAL] == Decimal("18.75")

    def test_empty_groups(self):
        assert sum_by_group({}) == {GRAND_TOTAL: Decimal("0.00")}

    def test_custom_amount_fn(self):
        totals = sum_by_group({"a": [1, 2]}, amount_fn=lambda v: v)
        assert totals["a"] == Decimal("3.00")


class TestTaxGrouping:
    def test_years_descending(self, sample_tax_entries):
        assert list(group_tax_entries_by_year(sample_tax_entries)) == [2024, 2023]

    def test_summary(self, sample_tax_entries):
        summary = summarize_tax_entries(sample_tax_entries)

        assert list(summary) == [2024, 2023]
        assert list(summary[2024]) == ["Education", "Healthcare", GRAND_TOTAL]
        assert summary[2024]["Education"] == Decimal("399.75")
        assert summary[2024][GRAND_TOTAL] == Decimal("550.00")
        assert summary[2023] == {
            "Home Office": Decimal("1200.00"),
            GRAND_TOTAL: Decimal("1200.00"),
        }

    def test_entries_are_not_merged(self, sample_tax_entries):
        by_year = group_tax_entries_by_year(sample_tax_entries)
        assert len(by_year[2024]) == 3

    def test_three_years_most_recent_first(self):
        entries = [
            _rec(tax_year=2021, category="Travel", amount="1.00"),
            _rec(tax_year=2023, category="Travel", amount="2.00"),
            _rec(tax_year=2022, category="Travel", amount="3.00"),
        ]

        assert list(group_tax_entries_by_year(entries)) == [2023, 2022, 2021]
        assert list(summarize_tax_entries(entries)) == [2023, 2022, 2021]

    def test_categories_keep_first_seen_order(self):
        entries = [
            _rec(tax_year=2024, category="Travel", amount="10.00"),
            _rec(tax_year=2024, category="Food", amount="4.00"),
            _rec(tax_year=2024, category="Travel", amount="6.00"),
        ]

        summary = summarize_tax_entries(entries)[2024]

        assert list(summary) == ["Travel", "Food", GRAND_TOTAL]
        assert summary["Travel"] == Decimal("16.00")

    @pytest.mark.parametrize("key", ["category", "tax_year"])
    def test_grouped_grand_total_matches_ungrouped_total(self, sample_tax_entries, key):
        groups = group_by_key(sample_tax_entries, lambda e: getattr(e, key))

        totals = sum_by_group(groups)

        assert totals[GRAND_TOTAL] == compute_document_total(sample_tax_entries)
        assert totals[GRAND_TOTAL] == Decimal("1750.00")


class TestExpenseHelpers:
    def test_category_totals(self, sample_expenses):
        totals = category_totals(sample_expenses)
        assert totals == {
            "Software": Decimal("40.00"),
            "Office Supplies": Decimal("35.40"),
        }
        assert GRAND_TOTAL not in totals

    def test_expense_total(self, sample_expenses):
        assert compute_expense_total(sample_expenses) == Decimal("75.40")

    def test_search_is_case_insensitive_on_merchant(self, sample_expenses):
        result = filter_expenses(sample_expenses, search="GIT")
        assert [e.merchant for e in result] == ["GitHub", "GitLab"]

    def test_category_filter(self, sample_expenses):
        result = filter_expenses(sample_expenses, category="Office Supplies")
        assert [e.id for e in result] == [2]

    def test_status_filter_accepts_string(self, sample_expenses):
        result = filter_expenses(sample_expenses, status="approved")
        assert [e.id for e in result] == [1]

    def test_combined_filters(self, sample_expenses):
        result = filter_expenses(sample_expenses, search="git", status="rejected")
        assert [e.id for e in result] == [3]

    def test_empty_filters_match_all(self, sample_expenses):
        assert filter_expenses(sample_expenses, search="", category=None) == sample_expenses


class TestInvoiceTotalsByStatus:
    def test_every_status_listed(self):
        invoices = [
            InvoiceDocument(
                client_name="A",
                status="paid",
                items=[LineItem(quantity=1, unit_price=100)],
            ),
            InvoiceDocument(
                client_name="B",
                status="paid",
                items=[LineItem(quantity=2, unit_price="12.50")],
            ),
            InvoiceDocument(
                client_name="C",
                status="overdue",
                items=[LineItem(quantity=1, unit_price=40)],
            ),
        ]
        totals = invoice_totals_by_status(invoices)

        assert list(totals) == ["draft", "sent", "paid", "overdue", GRAND_TOTAL]
        assert totals["draft"] == Decimal("0.00")
        assert totals["paid"] == Decimal("125.00")
        assert totals["overdue"] == Decimal("40.00")
        assert totals[GRAND_TOTAL] == Decimal("165.00")

    def test_no_invoices(self):
        totals = invoice_totals_by_status([])
        assert all(v == Decimal("0.00") for v in totals.values())
