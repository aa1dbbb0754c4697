"""
Tests for record normalization at the store boundary.
"""

import os
import sys
from datetime import date, datetime
from decimal import Decimal

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import coerce_amount, IncomeEntry, ExpenseEntry, SavingGoal, Reminder


class TestCoerceAmount:

    def test_numbers_and_strings(self):
        assert coerce_amount(Decimal('12.50')) == 12.5
        assert coerce_amount('7') == 7.0
        assert coerce_amount(3) == 3.0

    def test_bad_values_become_zero(self):
        for value in (None, '', 'abc', float('inf'), float('nan'), True, [1]):
            assert coerce_amount(value) == 0.0

    def test_negative_kept(self):
        assert coerce_amount('-4') == -4.0


class TestFromRow:

    def test_income_row(self):
        entry = IncomeEntry.from_row({
            'id': 3, 'user_id': 1, 'source': 'Job', 'amount': Decimal('2500.00'),
            'date': date(2024, 1, 15), 'notes': None, 'invoice_url': None,
        })

        assert entry.amount == 2500.0
        assert entry.date == '2024-01-15'
        assert entry.notes == ''
        assert entry.invoice_url == ''

    def test_expense_row_with_missing_fields(self):
        entry = ExpenseEntry.from_row({'id': 1, 'amount': 'oops'})

        assert entry.category == ''
        assert entry.amount == 0.0
        assert entry.date == ''

    def test_goal_defaults_category(self):
        goal = SavingGoal.from_row({'goal_name': 'Trip', 'category': None,
                                    'target_amount': Decimal('1000'), 'current_amount': None})
        assert goal.category == 'General'
        assert goal.current_amount == 0.0

    def test_reminder_row(self):
        reminder = Reminder.from_row({
            'title': 'Rent', 'due_date': datetime(2024, 2, 1, 9, 30), 'amount': None,
            'recurring': 'weekly', 'status': None,
        })

        assert reminder.due_date == '2024-02-01'
        assert reminder.amount == 0.0
        assert reminder.recurring == 'none'
        assert reminder.status == 'upcoming'

    def test_reminder_row_unknown_status(self):
        assert Reminder.from_row({'title': 'Rent', 'status': 'overdue'}).status == 'upcoming'
        assert Reminder.from_row({'title': 'Rent', 'status': 'snoozed'}).status == 'snoozed'
