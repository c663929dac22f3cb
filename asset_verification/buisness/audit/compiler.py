"""
AuditReportCompiler - cross-domain audit report

Reads assets, licenses, desks and verification data through independent read
ports, builds each section, then derives findings. A failure while building
one section is logged and recorded in ``section_errors``; the remaining
sections and their findings are still produced.
"""

from datetime import datetime
from typing import Callable, Optional

from asset_verification.buisness.audit.findings import derive_findings
from asset_verification.buisness.audit.sections import (
    build_assets_section,
    build_licenses_section,
    build_verification_section,
    build_workspace_section,
)
from asset_verification.buisness.audit.structs import AuditReport, AuditThresholds
from asset_verification.buisness.core.read_ports import (
    AssetReadPort,
    EmployeeReadPort,
    LicenseReadPort,
    VerificationReadPort,
    WorkspaceReadPort,
)
from asset_verification.buisness.verification.rollup import CycleComplianceRollup
from asset_verification.logger import get_logger
from asset_verification.utils.timekeeping import to_naive_utc, utc_now

logger = get_logger("asset_verification.buisness.audit")


class AuditReportCompiler:

    def __init__(self, assets: AssetReadPort, employees: EmployeeReadPort, licenses: LicenseReadPort,
                 workspace: WorkspaceReadPort, verification: VerificationReadPort,
                 thresholds: Optional[AuditThresholds] = None):
        self.assets = assets
        self.employees = employees
        self.licenses = licenses
        self.workspace = workspace
        self.verification = verification
        self.thresholds = thresholds or AuditThresholds()

    def compile(self, now: Optional[datetime] = None) -> AuditReport:
        """
        Compile the report as of ``now`` (default: current UTC time).

        Passing the same ``now`` over unchanged data yields an identical report.
        """
        now = to_naive_utc(now) if now is not None else utc_now()
        report = AuditReport(generated_at=now)
        window = self.thresholds.expiry_window_days

        report.assets = self._section(report, 'assets',
                                      lambda: build_assets_section(self.assets.list_assets(), now, window))
        report.verification = self._section(report, 'verification', self._verification_section)
        report.licenses = self._section(report, 'licenses',
                                        lambda: build_licenses_section(self.licenses.list_licenses(), now, window))
        report.workspace = self._section(report, 'workspace',
                                         lambda: build_workspace_section(self.workspace.list_desks()))

        report.findings = derive_findings(report.assets, report.verification, report.licenses,
                                          report.workspace, self.thresholds)
        logger.info(
            f"Audit report compiled: {len(report.findings)} findings, "
            f"{len(report.section_errors)} degraded section(s)"
        )
        return report

    def _verification_section(self):
        rollup = CycleComplianceRollup(self.assets, self.employees, self.verification).compute()
        all_assets = self.assets.list_assets()
        assigned = [a for a in all_assets if a.assigned_employee_id]
        records = self.verification.current_records(rollup.cycle.id) if rollup.cycle else []
        names = {s.employee_id: s.employee_name for s in rollup.summaries}
        return build_verification_section(
            rollup, assigned, records, {a.id: a for a in all_assets}, names,
        )

    @staticmethod
    def _section(report: AuditReport, name: str, build: Callable[[], dict]):
        try:
            return build()
        except Exception as e:
            # Degrade this section only
            logger.exception(f"Audit report section '{name}' failed: {e}", extra={"section": name})
            report.section_errors[name] = f"{type(e).__name__}: {e}"
            return None
