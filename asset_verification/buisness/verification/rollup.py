"""
Cycle compliance roll-up

Aggregates EmployeeComplianceSummary across every employee who currently holds
at least one asset. Read-only over a snapshot taken at call time.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Set

from asset_verification.buisness.core.read_ports import AssetReadPort, EmployeeReadPort, VerificationReadPort
from asset_verification.buisness.core.snapshots import AssetSnapshot, RecordSnapshot
from asset_verification.buisness.verification.reconciliation import resolve_cycle, summarize_employee
from asset_verification.buisness.verification.structs import (
    OVERALL_DISCREPANT,
    OVERALL_PENDING,
    OVERALL_VERIFIED,
    CycleRollup,
    EmployeeComplianceSummary,
)
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.buisness.rollup")


class CycleComplianceRollup:

    def __init__(self, assets: AssetReadPort, employees: EmployeeReadPort,
                 verification: VerificationReadPort):
        self.assets = assets
        self.employees = employees
        self.verification = verification

    def compute(self, cycle_id: Optional[int] = None) -> CycleRollup:
        """
        Roll up a cycle (default: the most recently started one).

        Summaries are ordered least compliant first, then by employee id.

        Raises:
            NotFoundError: If an explicit cycle id does not exist
        """
        cycle = resolve_cycle(self.verification, cycle_id)
        assigned = self.assets.list_assigned_assets()
        records = self.verification.current_records(cycle.id) if cycle else []

        summaries = self.summarize_all(assigned, records)
        by_status = defaultdict(int)
        for summary in summaries:
            by_status[summary.overall_status] += 1

        rollup = CycleRollup(
            cycle=cycle,
            summaries=summaries,
            total_employees=len(summaries),
            verified_count=by_status[OVERALL_VERIFIED],
            discrepant_count=by_status[OVERALL_DISCREPANT],
            pending_count=by_status[OVERALL_PENDING],
            submitted_count=len({r.employee_id for r in records}),
        )
        logger.debug(
            f"Roll-up for cycle {cycle.id if cycle else None}: {rollup.total_employees} employees, "
            f"{rollup.verified_count} verified, {rollup.discrepant_count} discrepant, {rollup.pending_count} pending"
        )
        return rollup

    def summarize_all(self, assigned: List[AssetSnapshot],
                      records: List[RecordSnapshot]) -> List[EmployeeComplianceSummary]:
        """Summaries for employees holding assets; employees with nothing assigned are excluded"""
        assigned_ids: Dict[str, Set[int]] = defaultdict(set)
        for asset in assigned:
            assigned_ids[asset.assigned_employee_id].add(asset.id)

        records_by_employee: Dict[str, List[RecordSnapshot]] = defaultdict(list)
        for record in records:
            records_by_employee[record.employee_id].append(record)

        directory = {e.emp_id: e for e in self.employees.list_employees()}

        summaries = []
        for emp_id in sorted(assigned_ids):
            employee = directory.get(emp_id)
            emp_records = records_by_employee.get(emp_id, [])
            if employee is not None:
                name, department = employee.full_name, employee.department
            else:
                # Directory gap: fall back to the name captured at submission
                name = emp_records[0].employee_name if emp_records else emp_id
                department = ''
            summaries.append(summarize_employee(emp_id, name, department, assigned_ids[emp_id], emp_records))

        summaries.sort(key=lambda s: (s.compliance, s.employee_id))
        return summaries
