"""
Tax report workbooks (ITR and GST) built from income and expense records.

The builders are pure: they return a ``Workbook`` value and leave
serialization to ``services.xlsx``.
"""

from datetime import date

from models import ReportSheet, Workbook
from services.aggregation import (
    category_breakdown,
    filter_by_date_range,
    monthly_series,
    totals,
)

REPORT_KINDS = ('ITR', 'GST')
DEFAULT_PREFIX = 'fintrack'

INCOME_COLUMNS = ['Date', 'Source', 'Amount', 'InvoiceURL']
EXPENSE_COLUMNS = ['Date', 'Category', 'Amount', 'ReceiptURL']
SUMMARY_COLUMNS = ['Metric', 'Value']

SHEET_NAMES = {
    'ITR': ('Income', 'Expenses', 'ITR Summary'),
    'GST': ('Sales', 'Purchases', 'GST Summary'),
}


def normalize_kind(kind):
    value = (kind or '').strip().upper()
    if value not in REPORT_KINDS:
        raise ValueError(f"Unknown report kind: {kind!r}")
    return value


def default_period(today=None):
    """1 January of the current year through today."""
    today = today or date.today()
    return date(today.year, 1, 1).isoformat(), today.isoformat()


def report_filename(kind, date_from, date_to, prefix=DEFAULT_PREFIX):
    return f"{prefix}-{normalize_kind(kind).lower()}-{date_from}-to-{date_to}"


def _income_rows(incomes):
    return [[i.date, i.source, i.amount, i.invoice_url or ''] for i in incomes]


def _expense_rows(expenses):
    return [[e.date, e.category, e.amount, e.receipt_url or ''] for e in expenses]


def _summary_rows(kind, period_totals, date_from, date_to):
    period = f"{date_from} to {date_to}"
    if kind == 'GST':
        return [
            ['Sales (Income)', period_totals.income],
            ['Purchases (Expenses)', period_totals.expenses],
            ['Period', period],
        ]
    return [
        ['Total Income', period_totals.income],
        ['Total Expenses', period_totals.expenses],
        ['Savings', period_totals.savings],
        ['Period', period],
    ]


def build_report(kind, incomes, expenses, date_from, date_to, prefix=DEFAULT_PREFIX):
    """Build the three-sheet ITR or GST workbook for ``[date_from, date_to]``.

    Both bounds are inclusive. An inverted range gives empty transaction
    sheets and zero totals.
    """
    kind = normalize_kind(kind)
    range_incomes = filter_by_date_range(incomes, date_from, date_to)
    range_expenses = filter_by_date_range(expenses, date_from, date_to)
    period_totals = totals(range_incomes, range_expenses)

    income_name, expense_name, summary_name = SHEET_NAMES[kind]
    return Workbook(
        name=report_filename(kind, date_from, date_to, prefix),
        sheets=[
            ReportSheet(income_name, list(INCOME_COLUMNS), _income_rows(range_incomes)),
            ReportSheet(expense_name, list(EXPENSE_COLUMNS), _expense_rows(range_expenses)),
            ReportSheet(summary_name, list(SUMMARY_COLUMNS),
                        _summary_rows(kind, period_totals, date_from, date_to)),
        ],
    )


def build_overview_report(kind, incomes, expenses, prefix=DEFAULT_PREFIX):
    """Dashboard export: monthly income, spending by category and a monthly net summary."""
    kind = normalize_kind(kind)
    series = monthly_series(incomes, expenses)
    categories = category_breakdown(expenses)

    return Workbook(
        name=f"{prefix}-{kind.lower()}-report",
        sheets=[
            ReportSheet('Income', ['Month', 'Amount'],
                        [[b.month, b.income] for b in series]),
            ReportSheet('Expenses', ['Category', 'Amount'],
                        [[c.category, c.amount] for c in categories]),
            ReportSheet(f'{kind} Summary', ['Month', 'Income', 'Expenses', 'Net'],
                        [[b.month, b.income, b.expenses, b.income - b.expenses] for b in series]),
        ],
    )


def report_preview(kind, incomes, expenses, date_from, date_to, prefix=DEFAULT_PREFIX):
    workbook = build_report(kind, incomes, expenses, date_from, date_to, prefix)
    kind = normalize_kind(kind)
    income_name, expense_name, summary_name = SHEET_NAMES[kind]
    return {
        'kind': kind,
        'from': date_from,
        'to': date_to,
        'filename': workbook.filename,
        'income': workbook.sheet(income_name).records(),
        'expenses': workbook.sheet(expense_name).records(),
        'summary': {metric: value for metric, value in workbook.sheet(summary_name).rows},
    }
