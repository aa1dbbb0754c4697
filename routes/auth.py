import re
from flask import (Blueprint, request, redirect, url_for, current_app, session, flash, jsonify,
                   get_flashed_messages)
from werkzeug.security import generate_password_hash, check_password_hash
from store import BackendNotConfigured

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

MIN_PASSWORD_LENGTH = 8
MAX_NAME_LENGTH = 100
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _page(title):
    return jsonify(
        page=title,
        demo=bool(current_app.config.get('DEMO_MODE')),
        messages=get_flashed_messages(with_categories=True),
    )


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    if request.method == 'POST':
        name = request.form.get('name', '').strip()
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        error = None
        if not name or not email or not password:
            error = "All fields required."
        elif len(name) > MAX_NAME_LENGTH:
            error = f"Name must be at most {MAX_NAME_LENGTH} characters."
        elif not EMAIL_RE.match(email):
            error = "Enter a valid email address."
        elif len(password) < MIN_PASSWORD_LENGTH:
            error = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
        if error:
            flash(error, "error")
            return redirect(url_for('auth.signup'))

        store = current_app.record_store
        if store.find_user(email):
            return "Email already exists", 400
        try:
            store.create_user(name, email, generate_password_hash(password))
        except BackendNotConfigured as e:
            flash(str(e), "error")
            return redirect(url_for('auth.signup'))

        flash("Account created. Please log in.", "success")
        return redirect(url_for('auth.login'))

    return _page('Sign Up')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        user = current_app.record_store.find_user(email)
        if not user or not check_password_hash(user['password_hash'], password):
            flash("Invalid credentials. Want to sign up?", "error")
            return redirect(url_for('auth.login'))

        session.clear()
        session['user_id'] = user['id']
        session['user_name'] = user['name']

        return redirect(url_for('dashboard.index'))

    return _page('Log In')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    return redirect(url_for('auth.login'))
