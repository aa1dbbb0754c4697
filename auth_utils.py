from dataclasses import dataclass
from functools import wraps
from flask import session, redirect, url_for, current_app, g

from store.demo_store import DEMO_USER_ID


@dataclass(frozen=True)
class UserContext:
    user_id: int
    user_name: str = ''
    demo: bool = False


def current_context():
    """The signed-in user, the demo user when running without a database, or None."""
    if 'user_id' in session:
        return UserContext(user_id=session['user_id'], user_name=session.get('user_name', ''))
    if current_app.config.get('DEMO_MODE'):
        return UserContext(user_id=DEMO_USER_ID, user_name='Demo', demo=True)
    return None


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        ctx = current_context()
        if ctx is None:
            return redirect(url_for('auth.login'))
        g.ctx = ctx
        return fn(*args, **kwargs)
    return wrapper
