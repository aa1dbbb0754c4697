"""
Tests for reminder transitions.
"""

import os
import sys
from datetime import date

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import Reminder
from services.reminders import mark_paid, snooze, upcoming_count, is_overdue


def reminder(due='2024-01-28', status='upcoming', **kwargs):
    return Reminder(title='Internet Bill', due_date=due, status=status, **kwargs)


class TestMarkPaid:

    def test_sets_paid_and_keeps_due_date(self):
        r = reminder(amount=799.0, recurring='monthly')
        paid = mark_paid(r)

        assert paid.status == 'paid'
        assert paid.due_date == '2024-01-28'
        assert paid.recurring == 'monthly'
        assert r.status == 'upcoming'

    def test_snoozed_reminder_can_be_paid(self):
        assert mark_paid(reminder(status='snoozed')).status == 'paid'

    def test_idempotent(self):
        once = mark_paid(reminder())
        assert mark_paid(once) == once


class TestSnooze:

    def test_crosses_month_boundary(self):
        snoozed = snooze(reminder('2024-01-28'))

        assert snoozed.due_date == '2024-02-04'
        assert snoozed.status == 'snoozed'

    def test_crosses_year_boundary(self):
        assert snooze(reminder('2023-12-29')).due_date == '2024-01-05'

    def test_leap_day(self):
        assert snooze(reminder('2024-02-25')).due_date == '2024-03-03'

    def test_keeps_identity_and_input(self):
        r = reminder(id=5)
        snoozed = snooze(r)

        assert snoozed.id == 5
        assert r.due_date == '2024-01-28'

    def test_paid_reminder_unchanged(self):
        paid = mark_paid(reminder('2024-01-28'))
        snoozed = snooze(paid)

        assert snoozed.status == 'paid'
        assert snoozed.due_date == '2024-01-28'

    def test_invalid_due_date(self):
        with pytest.raises(ValueError):
            snooze(reminder('someday'))


class TestUpcomingCount:

    def test_counts_only_upcoming(self):
        reminders = [reminder(), reminder(status='snoozed'), reminder(status='paid'), reminder()]
        assert upcoming_count(reminders) == 2

    def test_paying_one_decreases_by_one(self):
        reminders = [reminder(id=1), reminder(id=2), reminder(id=3)]
        before = upcoming_count(reminders)

        reminders[1] = mark_paid(reminders[1])
        assert upcoming_count(reminders) == before - 1

        reminders[1] = mark_paid(reminders[1])
        assert upcoming_count(reminders) == before - 1

    def test_overdue_reminders_stay_upcoming(self):
        reminders = [reminder('2000-01-01')]
        assert upcoming_count(reminders) == 1
        assert reminders[0].status == 'upcoming'

    def test_empty(self):
        assert upcoming_count([]) == 0


class TestOverdue:

    def test_past_due(self):
        assert is_overdue(reminder('2024-01-28'), today=date(2024, 2, 1)) is True

    def test_due_today_not_overdue(self):
        assert is_overdue(reminder('2024-01-28'), today=date(2024, 1, 28)) is False

    def test_paid_never_overdue(self):
        assert is_overdue(reminder('2024-01-28', status='paid'), today=date(2024, 2, 1)) is False
