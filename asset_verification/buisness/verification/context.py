"""
VerificationContext - Domain facade for the verification engine

Single entry point for routes, services and the CLI. Writes go through
CycleStore and SubmissionManager; reads go through the read ports so the
same aggregation code runs against SQL or against fakes.
"""

from typing import Any, Dict, List, Optional, Sequence

from asset_verification.buisness.audit.structs import AuditReport, AuditThresholds
from asset_verification.buisness.core.read_ports import (
    AssetReadPort,
    EmployeeReadPort,
    LicenseReadPort,
    VerificationReadPort,
    WorkspaceReadPort,
)
from asset_verification.buisness.verification.cycle_store import CycleStore
from asset_verification.buisness.verification.reconciliation import EmployeeReconciliationAggregator
from asset_verification.buisness.verification.rollup import CycleComplianceRollup
from asset_verification.buisness.verification.structs import (
    CycleRollup,
    EmployeeComplianceSummary,
    EmployeeVerificationDetail,
)
from asset_verification.buisness.verification.submission_manager import SubmissionManager
from asset_verification.data.verification.cycle import VerificationCycle
from asset_verification.data.verification.record import VerificationRecord


class VerificationContext:
    """
    Holds the read ports and the write-side managers.

    Use ``VerificationContext.default()`` inside an application context to
    wire the SQLAlchemy-backed ports.
    """

    def __init__(self, assets: AssetReadPort, employees: EmployeeReadPort, licenses: LicenseReadPort,
                 workspace: WorkspaceReadPort, verification: VerificationReadPort,
                 thresholds: Optional[AuditThresholds] = None):
        self.assets = assets
        self.employees = employees
        self.licenses = licenses
        self.workspace = workspace
        self.verification = verification
        self.thresholds = thresholds or AuditThresholds()

        self.cycles = CycleStore()
        self.submissions = SubmissionManager()

    @classmethod
    def default(cls, thresholds: Optional[AuditThresholds] = None) -> 'VerificationContext':
        from asset_verification.buisness.core.sql_read_ports import (
            SqlAssetReadPort,
            SqlEmployeeReadPort,
            SqlLicenseReadPort,
            SqlVerificationReadPort,
            SqlWorkspaceReadPort,
        )
        return cls(
            assets=SqlAssetReadPort(),
            employees=SqlEmployeeReadPort(),
            licenses=SqlLicenseReadPort(),
            workspace=SqlWorkspaceReadPort(),
            verification=SqlVerificationReadPort(),
            thresholds=thresholds,
        )

    # Cycle lifecycle

    def start_cycle(self, title: str, created_by: str, notes: Optional[str] = None) -> VerificationCycle:
        return self.cycles.start_cycle(title, created_by, notes)

    def close_cycle(self, cycle_id: int, closed_by: Optional[str] = None) -> VerificationCycle:
        return self.cycles.close_cycle(cycle_id, closed_by)

    def get_active_cycle(self) -> Optional[VerificationCycle]:
        return self.cycles.get_active_cycle()

    def list_cycles(self) -> List[VerificationCycle]:
        return self.cycles.list_cycles()

    def submitted_count(self, cycle_id: int) -> int:
        return self.cycles.submitted_count(cycle_id)

    # Submissions

    def submit_verification(self, cycle_id, employee_id: str, asset_id, entered_asset_id: Optional[str],
                            notes: Optional[str] = None) -> VerificationRecord:
        return self.submissions.submit(cycle_id, employee_id, asset_id, entered_asset_id, notes)

    def submit_batch(self, cycle_id, employee_id: str,
                     entries: Sequence[Dict[str, Any]]) -> List[VerificationRecord]:
        return self.submissions.submit_batch(cycle_id, employee_id, entries)

    def submitted_asset_ids(self, cycle_id, employee_id: str) -> List[int]:
        return self.submissions.submitted_asset_ids(cycle_id, employee_id)

    def employee_status(self, cycle_id, employee_id: str) -> Dict[str, Any]:
        return self.submissions.employee_status(cycle_id, employee_id)

    # Reads

    def get_employee_verification_detail(self, employee_id: str,
                                         cycle_id: Optional[int] = None) -> EmployeeVerificationDetail:
        aggregator = EmployeeReconciliationAggregator(self.assets, self.employees, self.verification)
        return aggregator.detail(employee_id, cycle_id)

    def get_cycle_rollup(self, cycle_id: Optional[int] = None) -> CycleRollup:
        return CycleComplianceRollup(self.assets, self.employees, self.verification).compute(cycle_id)

    def get_verification_summary(self, cycle_id: Optional[int] = None) -> List[EmployeeComplianceSummary]:
        return self.get_cycle_rollup(cycle_id).summaries

    def get_audit_report(self, now=None) -> AuditReport:
        # audit.compiler imports this package; resolve it at call time
        from asset_verification.buisness.audit.compiler import AuditReportCompiler

        compiler = AuditReportCompiler(
            self.assets, self.employees, self.licenses, self.workspace, self.verification, self.thresholds,
        )
        return compiler.compile(now)
