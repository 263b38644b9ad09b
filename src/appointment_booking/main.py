import logging
import os
import signal
import sys
from datetime import datetime

import pytz
from flask import Flask, json, jsonify, send_from_directory
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import load_config
from .errors import AppError, StorageError
# Import db instance from the central models init
from .models import db
from .routes.appointments import create_appointments_bp
from .routes.auth import create_auth_bp
from .stores import AccountStore, AppointmentStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level="INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(config_overrides=None):
    config = load_config()
    config.update(config_overrides or {})

    app = Flask(__name__, static_folder=os.path.join(os.path.dirname(__file__), "static"))
    app.config.update(config)

    # Fixed-size pool, requests past the limit wait for a free connection with no time limit
    if not app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {
            "pool_size": app.config["DB_POOL_SIZE"],
            "max_overflow": 0,
            "pool_timeout": None,
            "pool_pre_ping": True,
        })

    # Initialize db with app
    db.init_app(app)

    appointment_store = AppointmentStore(db)
    account_store = AccountStore(db)
    app.extensions["account_store"] = account_store

    app.register_blueprint(create_appointments_bp(appointment_store), url_prefix="/api")
    app.register_blueprint(create_auth_bp(account_store), url_prefix="/api/auth")

    _register_error_handlers(app)
    _register_health(app)
    _register_static(app)
    return app


def _register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Keep the original headers, e.g. Allow on a 405
        response = error.get_response()
        response.set_data(json.dumps({"error": error.description}))
        response.content_type = "application/json"
        return response

    @app.errorhandler(500)
    def internal_error(error):
        logger.exception("500 error")
        db.session.rollback()
        return jsonify({"error": "Internal server error"}), 500


def _register_health(app):
    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "OK", "timestamp": datetime.now(pytz.utc).isoformat()}), 200


def _register_static(app):
    # Serve the front-end (index.html, css, js) and fall back to index.html for client-side routing
    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def serve(path):
        static_folder_path = app.static_folder
        if static_folder_path is None:
            return "Static folder not configured", 404

        if path != "" and os.path.isfile(os.path.join(static_folder_path, path)):
            return send_from_directory(static_folder_path, path)

        if os.path.exists(os.path.join(static_folder_path, "index.html")):
            return send_from_directory(static_folder_path, "index.html")
        return "index.html not found in static folder", 404


def ensure_database(uri):
    """Create the MySQL database named in ``uri`` if it does not exist yet."""
    url = make_url(uri)
    if url.get_backend_name() != "mysql" or not url.database:
        return

    engine = create_engine(url.set(database=None))
    try:
        with engine.connect() as connection:
            connection.execute(text(f"CREATE DATABASE IF NOT EXISTS `{url.database}`"))
            connection.commit()
    finally:
        engine.dispose()
    logger.info("Database %s is ready", url.database)


def init_db(app):
    """Create the tables and seed the admin account. Run once before serving traffic."""
    with app.app_context():
        db.create_all()
        logger.info("Database connected and tables created")

        if app.config["SEED_ADMIN"]:
            app.extensions["account_store"].seed_admin(
                app.config["ADMIN_EMAIL"], app.config["ADMIN_PASSWORD"]
            )
        else:
            logger.info("Admin seeding disabled")


def bootstrap(app):
    try:
        ensure_database(app.config["SQLALCHEMY_DATABASE_URI"])
        init_db(app)
    except (SQLAlchemyError, StorageError) as e:
        logger.error("Database connection failed: %s", e)
        logger.error("Please ensure:")
        logger.error("1. MySQL is installed and running")
        logger.error("2. MySQL credentials (DB_HOST, DB_USER, DB_PASSWORD, DB_PORT) are correct")
        logger.error("3. Run: sudo systemctl start mysql (Linux) or brew services start mysql (Mac)")
        sys.exit(1)


def install_shutdown_handler(app):
    def shutdown(signum, frame):
        logger.info("SIGTERM received, closing server...")
        with app.app_context():
            db.engine.dispose()
        sys.exit(0)

    signal.signal(signal.SIGTERM, shutdown)


def main():
    app = create_app()
    configure_logging(app.config["LOG_LEVEL"])
    bootstrap(app)
    install_shutdown_handler(app)

    port = app.config["PORT"]
    logger.info("Server running on port %s", port)
    logger.info("Visit http://localhost:%s to access the appointment booking system", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
