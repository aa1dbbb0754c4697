"""
Record types shared by the store adapters and the aggregation services.

Rows coming out of a store are normalized here (``from_row``) so the
services can rely on well-typed values: amounts are floats, dates are ISO
``YYYY-MM-DD`` strings and optional text is "".
"""

import math
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Optional

REMINDER_STATUSES = ('upcoming', 'paid', 'snoozed')
RECURRING_MODES = ('none', 'monthly', 'yearly')


def coerce_amount(value):
    """Return ``value`` as a float, or 0.0 if it is missing, non-numeric or not finite.

    Negative values are kept as given.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def iso_date(value):
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def text(value):
    return '' if value is None else str(value)


@dataclass
class IncomeEntry:
    source: str
    amount: float
    date: str
    notes: str = ''
    invoice_url: str = ''
    id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row.get('id'),
            user_id=row.get('user_id'),
            source=text(row.get('source')),
            amount=coerce_amount(row.get('amount')),
            date=iso_date(row.get('date')),
            notes=text(row.get('notes')),
            invoice_url=text(row.get('invoice_url')),
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at'),
        )

    def to_dict(self):
        return asdict(self)


@dataclass
class ExpenseEntry:
    category: str
    amount: float
    date: str
    notes: str = ''
    receipt_url: str = ''
    id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row.get('id'),
            user_id=row.get('user_id'),
            category=text(row.get('category')),
            amount=coerce_amount(row.get('amount')),
            date=iso_date(row.get('date')),
            notes=text(row.get('notes')),
            receipt_url=text(row.get('receipt_url')),
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at'),
        )

    def to_dict(self):
        return asdict(self)


@dataclass
class SavingGoal:
    goal_name: str
    target_amount: float
    current_amount: float = 0.0
    category: str = 'General'
    notes: str = ''
    id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row.get('id'),
            user_id=row.get('user_id'),
            goal_name=text(row.get('goal_name')),
            category=text(row.get('category')) or 'General',
            target_amount=coerce_amount(row.get('target_amount')),
            current_amount=coerce_amount(row.get('current_amount')),
            notes=text(row.get('notes')),
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at'),
        )

    def to_dict(self):
        return asdict(self)


@dataclass
class Reminder:
    title: str
    due_date: str
    amount: float = 0.0
    recurring: str = 'none'
    status: str = 'upcoming'
    id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        recurring = text(row.get('recurring')) or 'none'
        status = text(row.get('status')) or 'upcoming'
        return cls(
            id=row.get('id'),
            user_id=row.get('user_id'),
            title=text(row.get('title')),
            due_date=iso_date(row.get('due_date')),
            amount=coerce_amount(row.get('amount')),
            recurring=recurring if recurring in RECURRING_MODES else 'none',
            status=status if status in REMINDER_STATUSES else 'upcoming',
            created_at=row.get('created_at'),
            updated_at=row.get('updated_at'),
        )

    def to_dict(self):
        return asdict(self)


# Derived, never persisted.

@dataclass
class MonthlyBucket:
    month: str
    income: float = 0.0
    expenses: float = 0.0


@dataclass
class CategoryBucket:
    category: str
    amount: float = 0.0


@dataclass
class Totals:
    income: float = 0.0
    expenses: float = 0.0
    savings: float = 0.0


@dataclass
class ReportSheet:
    name: str
    columns: list
    rows: list = field(default_factory=list)

    def records(self):
        return [dict(zip(self.columns, row)) for row in self.rows]


@dataclass
class Workbook:
    name: str
    sheets: list = field(default_factory=list)

    @property
    def filename(self):
        return f"{self.name}.xlsx"

    def sheet(self, name):
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        raise KeyError(name)
