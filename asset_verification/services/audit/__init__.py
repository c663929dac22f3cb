from asset_verification.services.audit.audit_report_service import AuditReportService

__all__ = ['AuditReportService']
