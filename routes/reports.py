from io import BytesIO
from flask import Blueprint, current_app, jsonify, request, send_file, abort, g
from auth_utils import login_required
from services.reports import build_report, report_preview, default_period, normalize_kind
from services.xlsx import workbook_to_xlsx, XLSX_MIMETYPE

reports_bp = Blueprint('reports', __name__, url_prefix='/reports')


def _report_args(kind):
    try:
        kind = normalize_kind(kind)
    except ValueError:
        abort(404)
    default_from, default_to = default_period()
    return kind, request.args.get('from') or default_from, request.args.get('to') or default_to


@reports_bp.route('/<kind>')
@login_required
def preview(kind):
    kind, date_from, date_to = _report_args(kind)
    store = current_app.record_store
    return jsonify(report_preview(
        kind,
        store.list_income(g.ctx),
        store.list_expenses(g.ctx),
        date_from,
        date_to,
        prefix=current_app.config['REPORT_PREFIX'],
    ))


@reports_bp.route('/<kind>/export')
@login_required
def export(kind):
    kind, date_from, date_to = _report_args(kind)
    store = current_app.record_store
    workbook = build_report(
        kind,
        store.list_income(g.ctx),
        store.list_expenses(g.ctx),
        date_from,
        date_to,
        prefix=current_app.config['REPORT_PREFIX'],
    )
    current_app.logger.info("Exporting %s for user %s", workbook.filename, g.ctx.user_id)
    return send_file(BytesIO(workbook_to_xlsx(workbook)), mimetype=XLSX_MIMETYPE,
                     as_attachment=True, download_name=workbook.filename)
