from dataclasses import replace
from flask import (Blueprint, request, redirect, url_for, current_app, flash, jsonify,
                   get_flashed_messages, abort, g)
from auth_utils import login_required
from models import IncomeEntry
from routes.validation import (parse_amount, parse_date, parse_label, parse_notes,
                               check_attachment, first_error)
from services.aggregation import sum_amounts
from store import BackendNotConfigured
from store.blobs import attachment_path

income_bp = Blueprint('income', __name__, url_prefix='/income')


def _read_form():
    fields = (
        parse_label(request.form.get('source'), 'Source'),
        parse_amount(request.form.get('amount')),
        parse_date(request.form.get('date')),
        parse_notes(request.form.get('notes')),
        check_attachment(request.files.get('invoice'), current_app.config['ALLOWED_ATTACH_EXT']),
    )
    return [value for value, _ in fields], first_error(*fields)


def _store_invoice(income_id, file):
    path = attachment_path('invoices', g.ctx.user_id, income_id, file.filename)
    url = current_app.blob_store.store(path, file.read())
    current_app.logger.info("Stored invoice for income %s at %s", income_id, path)
    return url


@income_bp.route('/')
@login_required
def index():
    incomes = current_app.record_store.list_income(g.ctx)
    return jsonify(
        incomes=[i.to_dict() for i in incomes],
        total=sum_amounts(incomes),
        demo=g.ctx.demo,
        messages=get_flashed_messages(with_categories=True),
    )


@income_bp.route('/<int:id>')
@login_required
def view_income(id):
    entry = current_app.record_store.get_income(g.ctx, id)
    if entry is None:
        abort(404)
    return jsonify(income=entry.to_dict())


@income_bp.route('/add', methods=['POST'])
@login_required
def add_income():
    (source, amount, date_str, notes, invoice), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('income.index'))

    store = current_app.record_store
    entry = IncomeEntry(source=source, amount=amount, date=date_str, notes=notes)
    try:
        entry.id = store.add_income(g.ctx, entry)
        if invoice:
            entry.invoice_url = _store_invoice(entry.id, invoice)
            store.update_income(g.ctx, entry)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('income.index'))

    flash("Income added.", "success")
    return redirect(url_for('income.index'))


@income_bp.route('/edit/<int:id>', methods=['POST'])
@login_required
def edit_income(id):
    store = current_app.record_store
    entry = store.get_income(g.ctx, id)
    if entry is None:
        abort(404)

    (source, amount, date_str, notes, invoice), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('income.index'))

    entry = replace(entry, source=source, amount=amount, date=date_str, notes=notes)
    try:
        store.update_income(g.ctx, entry)
        if invoice:
            entry.invoice_url = _store_invoice(id, invoice)
            store.update_income(g.ctx, entry)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('income.index'))

    flash("Income updated.", "success")
    return redirect(url_for('income.index'))


@income_bp.route('/delete/<int:id>', methods=['POST'])
@login_required
def delete_income(id):
    try:
        current_app.record_store.delete_income(g.ctx, id)
    except BackendNotConfigured as e:
        flash(str(e), "error")
    return redirect(url_for('income.index'))
