from io import BytesIO
from flask import Blueprint, current_app, jsonify, request, send_file, abort, g
from auth_utils import login_required
from routes.goals import goal_view
from services.aggregation import monthly_series, category_breakdown, totals
from services.reminders import upcoming_count
from services.reports import build_overview_report
from services.xlsx import workbook_to_xlsx, XLSX_MIMETYPE

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='')


@dashboard_bp.route('/')
@login_required
def index():
    store = current_app.record_store
    incomes = store.list_income(g.ctx)
    expenses = store.list_expenses(g.ctx)
    goals = store.list_goals(g.ctx)
    reminders = store.list_reminders(g.ctx)

    summary = totals(incomes, expenses)

    return jsonify(
        user_name=g.ctx.user_name,
        demo=g.ctx.demo,
        total_income=summary.income,
        total_expenses=summary.expenses,
        net_savings=summary.savings,
        monthly=[{'month': b.month, 'income': b.income, 'expenses': b.expenses}
                 for b in monthly_series(incomes, expenses)],
        categories=[{'category': c.category, 'amount': c.amount}
                    for c in category_breakdown(expenses)],
        upcoming_reminders=upcoming_count(reminders),
        goals=[goal_view(goal) for goal in goals],
    )


@dashboard_bp.route('/export')
@login_required
def export():
    store = current_app.record_store
    try:
        workbook = build_overview_report(
            request.args.get('mode', 'ITR'),
            store.list_income(g.ctx),
            store.list_expenses(g.ctx),
            prefix=current_app.config['REPORT_PREFIX'],
        )
    except ValueError:
        abort(404)

    current_app.logger.info("Exporting %s for user %s", workbook.filename, g.ctx.user_id)
    return send_file(BytesIO(workbook_to_xlsx(workbook)), mimetype=XLSX_MIMETYPE,
                     as_attachment=True, download_name=workbook.filename)
