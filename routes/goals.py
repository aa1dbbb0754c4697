from dataclasses import replace
from flask import (Blueprint, request, redirect, url_for, current_app, flash, jsonify,
                   get_flashed_messages, abort, g)
from auth_utils import login_required
from models import SavingGoal
from routes.validation import parse_amount, parse_label, parse_notes, first_error
from services.goals import progress
from store import BackendNotConfigured

goals_bp = Blueprint('goals', __name__, url_prefix='/goals')


def goal_view(goal):
    data = goal.to_dict()
    data['progress_percent'] = progress(goal.current_amount, goal.target_amount)
    return data


def _read_form():
    fields = (
        parse_label(request.form.get('goal_name'), 'Goal name'),
        parse_label(request.form.get('category') or 'General', 'Category', max_length=50),
        parse_amount(request.form.get('target_amount'), 'Target amount'),
        parse_amount(request.form.get('current_amount'), 'Current amount', required=False),
        parse_notes(request.form.get('notes')),
    )
    values = [value for value, _ in fields]
    error = first_error(*fields)
    if not error and not values[2]:
        error = "Target amount must be greater than zero."
    return values, error


@goals_bp.route('/')
@login_required
def index():
    goals = current_app.record_store.list_goals(g.ctx)
    return jsonify(
        goals=[goal_view(goal) for goal in goals],
        demo=g.ctx.demo,
        messages=get_flashed_messages(with_categories=True),
    )


@goals_bp.route('/add', methods=['POST'])
@login_required
def add_goal():
    (goal_name, category, target, current, notes), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('goals.index'))

    goal = SavingGoal(goal_name=goal_name, category=category, target_amount=target,
                      current_amount=current, notes=notes)
    try:
        current_app.record_store.add_goal(g.ctx, goal)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('goals.index'))

    flash("Saving goal added.", "success")
    return redirect(url_for('goals.index'))


@goals_bp.route('/edit/<int:id>', methods=['POST'])
@login_required
def edit_goal(id):
    store = current_app.record_store
    goal = store.get_goal(g.ctx, id)
    if goal is None:
        abort(404)

    (goal_name, category, target, current, notes), error = _read_form()
    if error:
        flash(error, "error")
        return redirect(url_for('goals.index'))

    goal = replace(goal, goal_name=goal_name, category=category, target_amount=target,
                   current_amount=current, notes=notes)
    try:
        store.update_goal(g.ctx, goal)
    except BackendNotConfigured as e:
        flash(str(e), "error")
        return redirect(url_for('goals.index'))

    flash("Saving goal updated.", "success")
    return redirect(url_for('goals.index'))


@goals_bp.route('/delete/<int:id>', methods=['POST'])
@login_required
def delete_goal(id):
    try:
        current_app.record_store.delete_goal(g.ctx, id)
    except BackendNotConfigured as e:
        flash(str(e), "error")
    return redirect(url_for('goals.index'))
