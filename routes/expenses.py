from dataclasses import replace
from flask import (Blueprint, request, redirect, url_for, current_app, flash, jsonify,
                   get_flashed_messages, abort, g)
from auth_utils import login_required
from models import ExpenseEntry
from routes.validation import (parse_amount, parse_date, parse_label, parse_notes,
                               check_attachment, first_error)
from services.aggregation import sum_amounts, category_breakdown
from store import BackendNotConfigured
from store.blobs import attachment_path

expenses_bp = Blueprint('expenses', __name__, url_prefix='/expenses')

MAX_CATEGORY_LENGTH = 50


def _read_form():
    # An empty category is accepted; it is reported under "Other".
    fields = (
        parse_label(request.form.get('category'), 'Category', max_length=MAX_CATEGORY_LENGTH, required=False),
        parse_amount(request.form.get('amount')),
        parse_date(request.form.get('date')),
        parse_notes(request.form.get('notes')),
        check_attachment(request.files.get('receipt'), current_app.config['ALLOWED_ATTACH_EXT']),
    )
    return [value for value, _ in fields], first_error(*fields)


def _store_receipt(expense_id, file):
    path = attachment_path('receipts', g.ctx.user_id, expense_id, file.filename)
    url = current_app.blob_store.store(path, file.read())
    current_app.logger.info("Stored receipt for expense %s at %s", expense_id, path)
    return url


@expenses_bp.route('/')
@login_required
def index():
    expenses = current_app.record_store.list_expenses(g.ctx)

    category = request.args.get('category')
    if category:
        expenses = [e for e in expenses if e.category == category]

    return jsonify(
        expenses=[e.to_dict() for e in expenses],
        total=sum_amounts(expenses),
        categories=[{'category': c.category, 'amount': c.amount} for c in category_breakdown(expenses)],
        demo=g.ctx.demo,
        messages=get_flashed_messages(with_categories=True),
    )


@expenses_bp.route('/view/<int:id>')
@login_required
def view_expense(id):
    entry = current_app.record_store.get_expense(g.ctx, id)
    if entry is None:
        abort(404)
    return jsonify(expense=entry.to_dict())


@expenses_bp.route('/add', methods=['POST'])
@login_required
def add_expense():
    (category, amount, date_str, notes, receipt), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('expenses.index'))

    store = current_app.record_store
    entry = ExpenseEntry(category=category, amount=amount, date=date_str, notes=notes)
    try:
        entry.id = store.add_expense(g.ctx, entry)
        if receipt:
            entry.receipt_url = _store_receipt(entry.id, receipt)
            store.update_expense(g.ctx, entry)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('expenses.index'))

    flash("Expense added.", "success")
    return redirect(url_for('expenses.index'))


@expenses_bp.route('/edit/<int:id>', methods=['POST'])
@login_required
def edit_expense(id):
    store = current_app.record_store
    entry = store.get_expense(g.ctx, id)
    if entry is None:
        abort(404)

    (category, amount, date_str, notes, receipt), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('expenses.index'))

    entry = replace(entry, category=category, amount=amount, date=date_str, notes=notes)
    try:
        store.update_expense(g.ctx, entry)
        if receipt:
            entry.receipt_url = _store_receipt(id, receipt)
            store.update_expense(g.ctx, entry)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('expenses.index'))

    flash("Expense updated.", "success")
    return redirect(url_for('expenses.index'))


@expenses_bp.route('/delete/<int:id>', methods=['POST'])
@login_required
def delete_expense(id):
    try:
        current_app.record_store.delete_expense(g.ctx, id)
    except BackendNotConfigured as e:
        flash(str(e), "error")
    return redirect(url_for('expenses.index'))
