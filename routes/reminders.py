from flask import (Blueprint, request, redirect, url_for, current_app, flash, jsonify,
                   get_flashed_messages, abort, g)
from auth_utils import login_required
from models import Reminder, RECURRING_MODES
from routes.validation import parse_amount, parse_date, parse_label, first_error
from services.reminders import mark_paid, snooze, upcoming_count, is_overdue
from store import BackendNotConfigured

reminders_bp = Blueprint('reminders', __name__, url_prefix='/reminders')


def reminder_view(reminder):
    data = reminder.to_dict()
    data['overdue'] = is_overdue(reminder)
    return data


def _get_or_404(id):
    reminder = current_app.record_store.get_reminder(g.ctx, id)
    if reminder is None:
        abort(404)
    return reminder


def _save(reminder, message):
    try:
        current_app.record_store.update_reminder(g.ctx, reminder)
    except BackendNotConfigured as e:
        flash(str(e), "error")
    else:
        flash(message, "success")
    return redirect(url_for('reminders.index'))


@reminders_bp.route('/')
@login_required
def index():
    reminders = current_app.record_store.list_reminders(g.ctx)
    return jsonify(
        reminders=[reminder_view(r) for r in reminders],
        upcoming_count=upcoming_count(reminders),
        demo=g.ctx.demo,
        messages=get_flashed_messages(with_categories=True),
    )


@reminders_bp.route('/add', methods=['POST'])
@login_required
def add_reminder():
    fields = (
        parse_label(request.form.get('title'), 'Title'),
        parse_date(request.form.get('due_date'), 'Due date'),
        parse_amount(request.form.get('amount'), required=False),
    )
    error = first_error(*fields)
    recurring = request.form.get('recurring') or 'none'
    if not error and recurring not in RECURRING_MODES:
        error = "Recurring must be one of: " + ", ".join(RECURRING_MODES) + "."
    if error:
        flash(error, "error")
        return redirect(url_for('reminders.index'))

    title, due_date, amount = (value for value, _ in fields)
    reminder = Reminder(title=title, due_date=due_date, amount=amount,
                        recurring=recurring, status='upcoming')
    try:
        current_app.record_store.add_reminder(g.ctx, reminder)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('reminders.index'))

    flash("Reminder added.", "success")
    return redirect(url_for('reminders.index'))


@reminders_bp.route('/<int:id>/paid', methods=['POST'])
@login_required
def paid(id):
    return _save(mark_paid(_get_or_404(id)), "Reminder marked as paid.")


@reminders_bp.route('/<int:id>/snooze', methods=['POST'])
@login_required
def snooze_reminder(id):
    reminder = _get_or_404(id)
    if reminder.status == 'paid':
        flash("Paid reminders cannot be snoozed.", "error")
        return redirect(url_for('reminders.index'))
    try:
        snoozed = snooze(reminder)
    except ValueError:
        flash("Reminder has an invalid due date.", "error")
        return redirect(url_for('reminders.index'))
    return _save(snoozed, f"Reminder snoozed until {snoozed.due_date}.")


@reminders_bp.route('/delete/<int:id>', methods=['POST'])
@login_required
def delete_reminder(id):
    try:
        current_app.record_store.delete_reminder(g.ctx, id)
    except BackendNotConfigured as e:
        flash(str(e), "error")
    return redirect(url_for('reminders.index'))
