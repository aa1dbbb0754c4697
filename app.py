import os
from flask import Flask, send_from_directory, abort, g
from flask_wtf.csrf import CSRFProtect
from config import Config
from auth_utils import login_required
from store import LocalBlobStore, create_record_store
from routes.auth import auth_bp
from routes.dashboard import dashboard_bp
from routes.expenses import expenses_bp
from routes.income import income_bp
from routes.goals import goals_bp
from routes.reminders import reminders_bp
from routes.reports import reports_bp

csrf = CSRFProtect()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get("SECRET_KEY"):
        import secrets
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    if not app.config.get('DEMO_MODE'):
        config_class.init_db(app)

    app.record_store = create_record_store(app)
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
    app.blob_store = LocalBlobStore(app.config['UPLOAD_FOLDER'], url_prefix='/uploads')

    csrf.init_app(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(expenses_bp)
    app.register_blueprint(income_bp)
    app.register_blueprint(goals_bp)
    app.register_blueprint(reminders_bp)
    app.register_blueprint(reports_bp)

    @app.after_request
    def set_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    @app.route('/uploads/<path:filename>')
    @login_required
    def uploaded_file(filename):
        # invoices/<user>/<record>/<file> and receipts/<user>/<record>/<file>
        parts = filename.split('/')
        if len(parts) < 4 or parts[1] != str(g.ctx.user_id):
            abort(404)
        return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
