from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os
from asset_verification.logger import get_logger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "300 per hour"],
    storage_uri="memory://"  # Use Redis in production for distributed systems
)


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(config_overrides=None):
    """
    Application factory.

    Configuration is read from the environment first; ``config_overrides`` is
    applied last so tests can swap the database and disable HTTPS/rate limits.
    """
    from pathlib import Path

    app = Flask(__name__)

    logger = get_logger("asset_verification")
    logger.info("Initializing Flask application")

    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')

    # Prefer an explicit DATABASE_URL; otherwise keep SQLite under instance/
    db_env = os.environ.get('DATABASE_URL')
    if db_env:
        app.config['SQLALCHEMY_DATABASE_URI'] = db_env
    else:
        instance_dir = Path(__file__).parent.parent / 'instance'
        instance_dir.mkdir(parents=True, exist_ok=True)
        default_db_path = instance_dir / 'asset_verification.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{str(default_db_path.resolve())}"
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # HTTPS/TLS Configuration
    app.config['ENABLE_HTTPS'] = _env_flag('ENABLE_HTTPS', 'True')
    app.config['FORCE_HTTPS_REDIRECT'] = _env_flag('FORCE_HTTPS_REDIRECT', 'True')
    app.config['RATELIMIT_ENABLED'] = _env_flag('RATELIMIT_ENABLED', 'True')

    # Audit report thresholds
    app.config['AUDIT_EXPIRY_WINDOW_DAYS'] = int(os.environ.get('AUDIT_EXPIRY_WINDOW_DAYS', '30'))
    app.config['AUDIT_UTILIZATION_HIGH'] = int(os.environ.get('AUDIT_UTILIZATION_HIGH', '90'))
    app.config['AUDIT_UTILIZATION_LOW'] = int(os.environ.get('AUDIT_UTILIZATION_LOW', '30'))
    app.config['AUDIT_PENDING_BACKLOG_THRESHOLD'] = int(os.environ.get('AUDIT_PENDING_BACKLOG_THRESHOLD', '0'))

    if config_overrides:
        app.config.update(config_overrides)

    # SECURITY: Require SECRET_KEY - no fallback
    if not app.config['SECRET_KEY']:
        logger.critical("SECRET_KEY not set in environment! Application cannot start.")
        raise RuntimeError("SECRET_KEY environment variable is required")

    if app.config['ENABLE_HTTPS']:
        logger.info("HTTPS enforcement enabled")
    else:
        logger.warning("HTTPS enforcement DISABLED - Acceptable for development only!")

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from asset_verification.data.core.employee import Employee
    from asset_verification.data.core.asset import Asset
    from asset_verification.data.core.license import License
    from asset_verification.data.core.desk import Desk
    from asset_verification.data.verification.cycle import VerificationCycle
    from asset_verification.data.verification.record import VerificationRecord
    logger.debug("Models imported and registered")

    from asset_verification.presentation.routes import init_app as init_routes
    from asset_verification.presentation.errors import init_error_handlers
    from asset_verification.cli import verification_cli

    init_routes(app)
    init_error_handlers(app)
    app.cli.add_command(verification_cli)

    @app.before_request
    def enforce_https():
        """Redirect HTTP requests to HTTPS if HTTPS enforcement is enabled"""
        if app.config.get('ENABLE_HTTPS') and app.config.get('FORCE_HTTPS_REDIRECT'):
            from flask import request, redirect

            if not request.is_secure and not request.headers.get('X-Forwarded-Proto') == 'https':
                url = request.url.replace('http://', 'https://', 1)
                return redirect(url, code=301)

    @app.after_request
    def set_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Cache-Control'] = 'no-store'
        if app.config.get('ENABLE_HTTPS'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response

    logger.info("Flask application initialization complete")

    return app
