"""
Audit reporting business layer.

Main entry point: AuditReportCompiler

- sections: pure builders for the assets, verification, licenses and workspace sections
- findings: deterministic rules deriving severity-ranked findings from the sections
- compiler: reads each domain through its read port and degrades per section on failure
"""

from asset_verification.buisness.audit.compiler import AuditReportCompiler
from asset_verification.buisness.audit.structs import AuditFinding, AuditReport, AuditThresholds

__all__ = [
    'AuditReportCompiler',
    'AuditFinding',
    'AuditReport',
    'AuditThresholds',
]
