"""
In-memory stand-in for the database, used when no backend is configured.

Income is read-only here: writing it needs a real database. Expenses,
goals and reminders can be changed, but only for the life of the process.
"""

import itertools
from dataclasses import replace
from datetime import date, datetime, timedelta

from models import IncomeEntry, ExpenseEntry, SavingGoal, Reminder
from store.base import RecordStore, BackendNotConfigured

DEMO_USER_ID = 0


def _days_from_today(days, today=None):
    return ((today or date.today()) + timedelta(days=days)).isoformat()


class DemoRecordStore(RecordStore):

    def __init__(self, today=None):
        self._ids = itertools.count(1)
        self.incomes = [
            IncomeEntry(source='Job', amount=2500.0, date=_days_from_today(0, today), notes='Salary'),
            IncomeEntry(source='Freelancing', amount=900.0, date=_days_from_today(-20, today), notes='Landing page'),
        ]
        self.expenses = [
            ExpenseEntry(category='Housing', amount=900.0, date=_days_from_today(0, today), notes='Rent'),
            ExpenseEntry(category='Food', amount=220.0, date=_days_from_today(-10, today), notes='Groceries'),
        ]
        self.goals = [
            SavingGoal(goal_name='Emergency Fund', category='Safety', target_amount=200000.0,
                       current_amount=65000.0, notes='6 months runway'),
            SavingGoal(goal_name='New Laptop', category='Gear', target_amount=120000.0,
                       current_amount=30000.0),
        ]
        self.reminders = [
            Reminder(title='Credit Card Bill', due_date=_days_from_today(5, today), amount=4500.0,
                     recurring='monthly'),
            Reminder(title='Internet Bill', due_date=_days_from_today(10, today), amount=799.0,
                     recurring='monthly'),
        ]
        for record in self.incomes + self.expenses + self.goals + self.reminders:
            record.id = next(self._ids)
            record.user_id = DEMO_USER_ID

    @staticmethod
    def _find(records, record_id):
        for record in records:
            if record.id == record_id:
                return record
        return None

    def _insert(self, records, record):
        now = datetime.now()
        stored = replace(record, id=next(self._ids), user_id=DEMO_USER_ID, created_at=now, updated_at=now)
        records.insert(0, stored)
        return stored.id

    @staticmethod
    def _replace(records, record):
        for idx, existing in enumerate(records):
            if existing.id == record.id:
                records[idx] = replace(record, user_id=existing.user_id,
                                       created_at=existing.created_at, updated_at=datetime.now())
                return

    # Income: read-only

    def list_income(self, ctx):
        return list(self.incomes)

    def get_income(self, ctx, income_id):
        return self._find(self.incomes, income_id)

    def add_income(self, ctx, entry):
        raise BackendNotConfigured("Connect a database to add income.")

    def update_income(self, ctx, entry):
        raise BackendNotConfigured("Connect a database to edit income.")

    def delete_income(self, ctx, income_id):
        raise BackendNotConfigured("Connect a database to delete income.")

    # Expenses, goals and reminders: kept in memory

    def list_expenses(self, ctx):
        return list(self.expenses)

    def get_expense(self, ctx, expense_id):
        return self._find(self.expenses, expense_id)

    def add_expense(self, ctx, entry):
        return self._insert(self.expenses, entry)

    def update_expense(self, ctx, entry):
        self._replace(self.expenses, entry)

    def delete_expense(self, ctx, expense_id):
        self.expenses = [e for e in self.expenses if e.id != expense_id]

    def list_goals(self, ctx):
        return list(self.goals)

    def get_goal(self, ctx, goal_id):
        return self._find(self.goals, goal_id)

    def add_goal(self, ctx, goal):
        return self._insert(self.goals, goal)

    def update_goal(self, ctx, goal):
        self._replace(self.goals, goal)

    def delete_goal(self, ctx, goal_id):
        self.goals = [g for g in self.goals if g.id != goal_id]

    def list_reminders(self, ctx):
        return sorted(self.reminders, key=lambda r: r.due_date)

    def get_reminder(self, ctx, reminder_id):
        return self._find(self.reminders, reminder_id)

    def add_reminder(self, ctx, reminder):
        return self._insert(self.reminders, reminder)

    def update_reminder(self, ctx, reminder):
        self._replace(self.reminders, reminder)

    def delete_reminder(self, ctx, reminder_id):
        self.reminders = [r for r in self.reminders if r.id != reminder_id]

    # Users

    def find_user(self, email):
        return None

    def create_user(self, name, email, password_hash):
        raise BackendNotConfigured("Connect a database to create accounts.")
