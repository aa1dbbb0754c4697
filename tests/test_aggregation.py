"""
Tests for the aggregation service: monthly series, category breakdown, totals.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import IncomeEntry, ExpenseEntry, Totals
from services.aggregation import (
    monthly_series,
    category_breakdown,
    totals,
    filter_by_date_range,
    sum_amounts,
)


def income(amount, date, source='Job'):
    return IncomeEntry(source=source, amount=amount, date=date)


def expense(amount, date, category='Food'):
    return ExpenseEntry(category=category, amount=amount, date=date)


class TestMonthlySeries:

    def test_groups_by_year_month_sorted(self):
        incomes = [income(100, '2024-03-05'), income(50, '2024-01-10'), income(25, '2024-01-31')]
        expenses = [expense(40, '2024-03-01'), expense(10, '2024-01-02')]

        series = monthly_series(incomes, expenses)

        assert [b.month for b in series] == ['2024-01', '2024-03']
        assert series[0].income == 75
        assert series[0].expenses == 10
        assert series[1].income == 100
        assert series[1].expenses == 40

    def test_month_with_only_one_side_gets_zero_on_the_other(self):
        series = monthly_series([income(100, '2024-02-01')], [expense(30, '2024-05-01')])

        assert [(b.month, b.income, b.expenses) for b in series] == [
            ('2024-02', 100, 0),
            ('2024-05', 0, 30),
        ]

    def test_entries_without_date_are_skipped(self):
        series = monthly_series([income(100, ''), income(20, '2024-01-01')], [expense(5, '')])

        assert len(series) == 1
        assert series[0].income == 20
        assert series[0].expenses == 0

    def test_series_sums_match_totals_over_dated_entries(self):
        incomes = [income(10, '2023-12-31'), income(20, '2024-01-01'), income(30, '2024-01-15'), income(99, '')]
        expenses = [expense(5, '2023-12-01'), expense(7, '2024-02-01'), expense(1, '')]

        series = monthly_series(incomes, expenses)

        assert sum(b.income for b in series) == 60
        assert sum(b.expenses for b in series) == 12

    def test_years_sort_before_months(self):
        series = monthly_series([income(1, '2024-01-01'), income(1, '2023-12-01')], [])
        assert [b.month for b in series] == ['2023-12', '2024-01']


class TestCategoryBreakdown:

    def test_one_bucket_per_category_in_first_seen_order(self):
        expenses = [
            expense(100, '2024-01-01', 'Housing'),
            expense(20, '2024-01-02', 'Food'),
            expense(30, '2024-01-03', 'Housing'),
        ]

        buckets = category_breakdown(expenses)

        assert [(b.category, b.amount) for b in buckets] == [('Housing', 130), ('Food', 20)]

    def test_empty_category_goes_to_other(self):
        buckets = category_breakdown([expense(5, '2024-01-01', ''), expense(7, '2024-01-01', None)])

        assert len(buckets) == 1
        assert buckets[0].category == 'Other'
        assert buckets[0].amount == 12

    def test_buckets_partition_expense_total(self):
        expenses = [
            expense(10, '2024-01-01', 'A'),
            expense(20, '2024-01-01', 'B'),
            expense(30, '2024-01-01', ''),
            expense(40, '2024-01-01', 'A'),
        ]
        buckets = category_breakdown(expenses)

        assert sum(b.amount for b in buckets) == sum_amounts(expenses)
        labels = [b.category for b in buckets]
        assert len(labels) == len(set(labels))


class TestTotals:

    def test_savings_is_income_minus_expenses(self):
        result = totals([income(1000, '2024-01-01')], [expense(1500, '2024-01-01')])

        assert result == Totals(income=1000, expenses=1500, savings=-500)

    def test_malformed_amounts_count_as_zero(self):
        incomes = [income('abc', '2024-01-01'), income(None, '2024-01-01'),
                   income(float('nan'), '2024-01-01'), income(50, '2024-01-01')]
        assert totals(incomes, []).income == 50

    def test_negative_amounts_propagate(self):
        assert totals([income(-20, '2024-01-01')], [expense(-5, '2024-01-01')]) == Totals(-20, -5, -15)


class TestEmptyInput:

    def test_empty_collections(self):
        assert monthly_series([], []) == []
        assert category_breakdown([]) == []
        assert totals([], []) == Totals(0, 0, 0)


class TestDateRange:

    def test_inclusive_bounds(self):
        entries = [income(1, '2024-01-01'), income(2, '2024-03-31'), income(3, '2024-04-01')]
        kept = filter_by_date_range(entries, '2024-01-01', '2024-03-31')
        assert [e.amount for e in kept] == [1, 2]

    def test_inverted_range_is_empty(self):
        assert filter_by_date_range([income(1, '2024-02-01')], '2024-03-01', '2024-01-01') == []

    def test_inputs_are_not_mutated(self):
        incomes = [income(10, '2024-01-01')]
        monthly_series(incomes, [])
        totals(incomes, [])
        assert incomes == [income(10, '2024-01-01')]
