"""Group income and expense records into dashboard series and totals."""

from models import MonthlyBucket, CategoryBucket, Totals, coerce_amount

OTHER_CATEGORY = 'Other'


def sum_amounts(entries):
    return sum(coerce_amount(e.amount) for e in entries)


def monthly_series(incomes, expenses):
    """Per-month income and expense sums, keyed by ``YYYY-MM`` and sorted ascending.

    Entries without a date are left out. A month that only has income (or
    only expenses) still gets a bucket with 0 on the other side.
    """
    buckets = {}
    for entry in incomes:
        if not entry.date:
            continue
        key = entry.date[:7]
        bucket = buckets.setdefault(key, MonthlyBucket(month=key))
        bucket.income += coerce_amount(entry.amount)

    for entry in expenses:
        if not entry.date:
            continue
        key = entry.date[:7]
        bucket = buckets.setdefault(key, MonthlyBucket(month=key))
        bucket.expenses += coerce_amount(entry.amount)

    return [buckets[key] for key in sorted(buckets)]


def category_breakdown(expenses):
    """Expense sums per category, in order of first appearance."""
    buckets = {}
    for entry in expenses:
        name = (entry.category or '').strip() or OTHER_CATEGORY
        bucket = buckets.setdefault(name, CategoryBucket(category=name))
        bucket.amount += coerce_amount(entry.amount)
    return list(buckets.values())


def totals(incomes, expenses):
    total_income = sum_amounts(incomes)
    total_expenses = sum_amounts(expenses)
    return Totals(
        income=total_income,
        expenses=total_expenses,
        savings=total_income - total_expenses,
    )


def filter_by_date_range(entries, date_from, date_to):
    # ISO dates sort lexicographically, so an inverted range matches nothing.
    return [e for e in entries if e.date and date_from <= e.date <= date_to]
