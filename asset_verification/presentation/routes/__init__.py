"""
Routes package for the asset verification engine
"""

from flask import current_app

from asset_verification.buisness.audit.structs import AuditThresholds
from asset_verification.buisness.verification.context import VerificationContext
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.routes")


def current_context() -> VerificationContext:
    """SQL-backed context using the running app's audit thresholds"""
    return VerificationContext.default(AuditThresholds.from_config(current_app.config))


def init_app(app):
    """Initialize all route blueprints with the Flask app"""
    logger.debug("Initializing route blueprints")

    from .verification import verification_bp
    from .audit import audit_bp

    app.register_blueprint(verification_bp, url_prefix='/verification')
    app.register_blueprint(audit_bp, url_prefix='/audit')

    logger.info("Registered verification and audit blueprints")
