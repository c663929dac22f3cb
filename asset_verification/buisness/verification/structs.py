"""
Derived (non-persisted) result types for verification aggregation
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from asset_verification.buisness.core.snapshots import CycleSnapshot, EmployeeSnapshot


OVERALL_VERIFIED = 'Verified'
OVERALL_DISCREPANT = 'Discrepant'
OVERALL_PENDING = 'Pending'


@dataclass(frozen=True)
class EmployeeComplianceSummary:
    employee_id: str
    employee_name: str
    department: str
    total_assigned: int
    total_verified: int
    matched: int
    mismatched: int
    flagged: int
    overall_status: str
    compliance: int


@dataclass(frozen=True)
class AssetVerificationItem:
    """An assigned asset joined with its record (or a synthesized Pending placeholder)"""
    asset_id: Optional[int]
    asset_tag: str
    asset_name: str
    asset_type: str
    model: str
    serial_number: str
    employee_id: str
    employee_name: str
    entered_asset_id: str
    status: str
    is_match: bool
    notes: str
    verification_date: Optional[datetime]
    record_id: Optional[int] = None


@dataclass(frozen=True)
class VerificationSession:
    cycle_id: int
    cycle_title: str
    date: Optional[datetime]
    count: int
    verified: int
    discrepant: int


@dataclass(frozen=True)
class EmployeeVerificationDetail:
    employee: EmployeeSnapshot
    cycle: Optional[CycleSnapshot]
    summary: EmployeeComplianceSummary
    assets: List[AssetVerificationItem]
    all_sessions: List[VerificationSession]
    latest_session_date: Optional[datetime]

    @property
    def overall_status(self) -> str:
        return self.summary.overall_status


@dataclass(frozen=True)
class CycleRollup:
    cycle: Optional[CycleSnapshot]
    summaries: List[EmployeeComplianceSummary] = field(default_factory=list)
    total_employees: int = 0
    verified_count: int = 0
    discrepant_count: int = 0
    pending_count: int = 0
    submitted_count: int = 0
