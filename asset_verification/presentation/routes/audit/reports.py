"""
Audit report route
"""

from flask import jsonify

from asset_verification.logger import get_logger
from asset_verification.presentation.routes import current_context
from asset_verification.presentation.routes.audit import audit_bp
from asset_verification.services.audit.audit_report_service import AuditReportService

logger = get_logger("asset_verification.routes.audit")


@audit_bp.get('/report')
def audit_report():
    report = current_context().get_audit_report()
    logger.info(f"Audit report served with {len(report.findings)} findings")
    return jsonify(AuditReportService.serialize(report))
