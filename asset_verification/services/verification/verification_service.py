"""
Verification Service
Presentation service turning verification domain results into JSON-ready dicts.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from asset_verification.buisness.core.snapshots import EmployeeSnapshot
from asset_verification.buisness.verification.context import VerificationContext
from asset_verification.buisness.verification.structs import (
    AssetVerificationItem,
    CycleRollup,
    EmployeeComplianceSummary,
    EmployeeVerificationDetail,
    VerificationSession,
)
from asset_verification.data.verification.cycle import VerificationCycle
from asset_verification.data.verification.record import VerificationRecord
from asset_verification.utils.timekeeping import isoformat_or_none


class VerificationService:
    """
    Service for verification presentation data.

    Provides methods for:
    - Serializing cycles (model rows or snapshots) with their submission counts
    - Serializing records, summaries and the employee detail view
    - Building the payloads returned by the verification routes
    """

    @staticmethod
    def serialize_cycle(cycle, submitted_count: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """Serialize a VerificationCycle row or a CycleSnapshot"""
        if cycle is None:
            return None
        data = {
            'id': cycle.id,
            'title': cycle.title,
            'notes': cycle.notes or '',
            'status': cycle.status,
            'start_date': isoformat_or_none(cycle.start_date),
            'end_date': isoformat_or_none(cycle.end_date),
            'created_by': cycle.created_by,
            'closed_by': cycle.closed_by,
        }
        if submitted_count is not None:
            data['submitted_count'] = submitted_count
        return data

    @staticmethod
    def serialize_record(record: VerificationRecord) -> Dict[str, Any]:
        return {
            'id': record.id,
            'cycle_id': record.cycle_id,
            'employee_id': record.employee_id,
            'employee_name': record.employee_name,
            'asset_id': record.asset_id,
            'expected_tag': record.expected_tag,
            'entered_asset_id': record.entered_asset_id,
            'status': record.status,
            'is_match': record.is_match,
            'notes': record.notes or '',
            'verification_date': isoformat_or_none(record.verification_date),
        }

    @staticmethod
    def serialize_summary(summary: EmployeeComplianceSummary) -> Dict[str, Any]:
        return asdict(summary)

    @staticmethod
    def serialize_item(item: AssetVerificationItem) -> Dict[str, Any]:
        data = asdict(item)
        data['verification_date'] = isoformat_or_none(item.verification_date)
        return data

    @staticmethod
    def serialize_session(session: VerificationSession) -> Dict[str, Any]:
        data = asdict(session)
        data['date'] = isoformat_or_none(session.date)
        return data

    @staticmethod
    def serialize_employee(employee: EmployeeSnapshot) -> Dict[str, Any]:
        return asdict(employee)

    @classmethod
    def serialize_detail(cls, detail: EmployeeVerificationDetail) -> Dict[str, Any]:
        summary = detail.summary
        return {
            'employee': cls.serialize_employee(detail.employee),
            'cycle': cls.serialize_cycle(detail.cycle),
            'overall_status': detail.overall_status,
            'totals': {
                'total_assigned': summary.total_assigned,
                'total_verified': summary.total_verified,
                'matched': summary.matched,
                'mismatched': summary.mismatched,
                'flagged': summary.flagged,
                'compliance': summary.compliance,
            },
            'assets': [cls.serialize_item(item) for item in detail.assets],
            'all_sessions': [cls.serialize_session(s) for s in detail.all_sessions],
            'latest_session_date': isoformat_or_none(detail.latest_session_date),
        }

    @classmethod
    def serialize_rollup(cls, rollup: CycleRollup) -> Dict[str, Any]:
        return {
            'cycle': cls.serialize_cycle(rollup.cycle),
            'total_employees': rollup.total_employees,
            'verified_count': rollup.verified_count,
            'discrepant_count': rollup.discrepant_count,
            'pending_count': rollup.pending_count,
            'submitted_count': rollup.submitted_count,
            'summaries': [cls.serialize_summary(s) for s in rollup.summaries],
        }

    # Payload builders used by routes

    @classmethod
    def cycles_payload(cls, context: VerificationContext) -> List[Dict[str, Any]]:
        return [
            cls.serialize_cycle(cycle, context.submitted_count(cycle.id))
            for cycle in context.list_cycles()
        ]

    @classmethod
    def cycle_payload(cls, context: VerificationContext, cycle: Optional[VerificationCycle]) -> Optional[Dict[str, Any]]:
        if cycle is None:
            return None
        return cls.serialize_cycle(cycle, context.submitted_count(cycle.id))

    @classmethod
    def summary_payload(cls, context: VerificationContext, cycle_id: Optional[int] = None) -> Dict[str, Any]:
        return cls.serialize_rollup(context.get_cycle_rollup(cycle_id))

    @classmethod
    def detail_payload(cls, context: VerificationContext, employee_id: str,
                       cycle_id: Optional[int] = None) -> Dict[str, Any]:
        return cls.serialize_detail(context.get_employee_verification_detail(employee_id, cycle_id))
