import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask
from flask_cors import CORS

from gym_management.config import config
from gym_management.errors import Unauthenticated, error_response, register_error_handlers
from gym_management.extensions import db, jwt, limiter, ma, migrate, scheduler
from gym_management.models import User

logger = logging.getLogger(__name__)


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(handler)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        log_file = os.path.abspath(log_file)
        # one handler per file across repeated create_app() calls
        if any(getattr(h, "baseFilename", None) == log_file for h in root.handlers):
            return
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(file_handler)


def configure_scheduler(app):
    """Start the daily snapshot job once, only when enabled."""
    if not app.config.get("SCHEDULER_ENABLED") or scheduler.running:
        return

    from gym_management.services.progress import capture_snapshots

    def daily_progress_snapshot():
        with scheduler.app.app_context():
            try:
                capture_snapshots()
            except Exception:
                logger.exception("Daily progress snapshot failed")

    scheduler.init_app(app)
    scheduler.add_job(
        id="daily_progress_snapshot",
        func=daily_progress_snapshot,
        trigger="cron",
        hour=app.config["PROGRESS_SNAPSHOT_HOUR"],
        replace_existing=True,
    )
    scheduler.start()


def register_jwt_callbacks():
    @jwt.user_lookup_loader
    def user_lookup_callback(_jwt_header, jwt_data):
        try:
            return db.session.get(User, int(jwt_data["sub"]))
        except (TypeError, ValueError):
            return None

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(_jwt_header, jwt_data):
        return error_response(Unauthenticated("User for this token no longer exists"))

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return error_response(Unauthenticated("Token has expired"))

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return error_response(Unauthenticated(f"Invalid token: {error}"))

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return error_response(Unauthenticated(error))


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app.config.from_object(config[config_name])

    if config_name == "production" and not (
        app.config.get("JWT_SECRET_KEY") and app.config.get("SQLALCHEMY_DATABASE_URI")
    ):
        raise RuntimeError("JWT_SECRET_KEY and DATABASE_URL must be set in production")

    configure_logging(app)

    # Extensions
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app, resources={r"/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
    }})

    register_jwt_callbacks()
    register_error_handlers(app)

    # Blueprints
    from gym_management.routes import health_bp
    from gym_management.routes.auth import auth_bp
    from gym_management.routes.users import users_bp
    from gym_management.routes.workouts import workouts_bp
    from gym_management.routes.events import events_bp
    from gym_management.routes.progress import progress_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(users_bp, url_prefix="/users")
    app.register_blueprint(workouts_bp, url_prefix="/workouts")
    app.register_blueprint(events_bp, url_prefix="/events")
    app.register_blueprint(progress_bp, url_prefix="/progress")

    from gym_management.cli import register_commands
    register_commands(app)

    configure_scheduler(app)

    return app
