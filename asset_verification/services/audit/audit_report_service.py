"""
Audit Report Service
Serializes an AuditReport into the JSON structure returned by /audit/report.
"""

from dataclasses import asdict
from typing import Any, Dict, Optional

from asset_verification.buisness.audit.structs import AuditReport
from asset_verification.services.verification.verification_service import VerificationService
from asset_verification.utils.timekeeping import isoformat_or_none


class AuditReportService:

    @staticmethod
    def serialize_verification(section: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if section is None:
            return None
        data = dict(section)
        data['cycle'] = VerificationService.serialize_cycle(section['cycle'])
        data['employee_summary'] = [VerificationService.serialize_summary(s) for s in section['employee_summary']]
        data['action_items'] = [VerificationService.serialize_item(i) for i in section['action_items']]
        return data

    @classmethod
    def serialize(cls, report: AuditReport) -> Dict[str, Any]:
        """
        Convert a report into plain JSON types.

        Degraded sections stay ``None``; ``section_errors`` explains why.
        """
        return {
            'generated_at': isoformat_or_none(report.generated_at),
            'assets': report.assets,
            'verification': cls.serialize_verification(report.verification),
            'licenses': report.licenses,
            'workspace': report.workspace,
            'findings': [asdict(f) for f in report.findings],
            'section_errors': dict(report.section_errors),
        }
