"""
Bill reminder transitions.

Status only changes through user actions: an ``upcoming`` reminder whose due
date has passed stays ``upcoming`` until it is marked paid or snoozed.
"""

from dataclasses import replace
from datetime import date, timedelta

SNOOZE_DAYS = 7


def mark_paid(reminder):
    return replace(reminder, status='paid')


def snooze(reminder):
    """Push the due date back one week and flag the reminder as snoozed.

    A paid reminder is returned unchanged. Raises ValueError if the due
    date is not an ISO date.
    """
    if reminder.status == 'paid':
        return reminder
    due = date.fromisoformat(reminder.due_date)
    return replace(
        reminder,
        due_date=(due + timedelta(days=SNOOZE_DAYS)).isoformat(),
        status='snoozed',
    )


def upcoming_count(reminders):
    return sum(1 for r in reminders if r.status == 'upcoming')


def is_overdue(reminder, today=None):
    # Display hint only.
    if reminder.status == 'paid' or not reminder.due_date:
        return False
    today = today or date.today()
    return reminder.due_date < today.isoformat()
