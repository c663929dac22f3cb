"""
Employee reconciliation

Rolls one employee's records within a cycle up into an EmployeeComplianceSummary,
builds the per-asset view and the cross-cycle session history.
"""

from collections import OrderedDict
from datetime import datetime
from typing import Collection, Dict, Iterable, List, Optional, Sequence

from asset_verification.buisness.core.read_ports import AssetReadPort, EmployeeReadPort, VerificationReadPort
from asset_verification.buisness.core.snapshots import AssetSnapshot, CycleSnapshot, RecordSnapshot
from asset_verification.buisness.verification.classifier import FLAGGED, NOT_SUBMITTED_NOTE, PENDING, VERIFIED
from asset_verification.buisness.verification.errors import NotFoundError
from asset_verification.buisness.verification.structs import (
    OVERALL_DISCREPANT,
    OVERALL_PENDING,
    OVERALL_VERIFIED,
    AssetVerificationItem,
    EmployeeComplianceSummary,
    EmployeeVerificationDetail,
    VerificationSession,
)
from asset_verification.utils.percentages import percent


UNKNOWN_ASSET_NAME = 'Unknown Asset'
UNKNOWN_ASSET_TAG = 'N/A'


def resolve_cycle(verification: VerificationReadPort, cycle_id: Optional[int] = None) -> Optional[CycleSnapshot]:
    """
    The requested cycle, or the most recently started one when none is given.

    Raises:
        NotFoundError: If an explicit cycle id does not exist
    """
    if cycle_id is None:
        return verification.latest_cycle()
    cycle = verification.get_cycle(cycle_id)
    if cycle is None:
        raise NotFoundError(f"Verification cycle {cycle_id} not found", details={'cycle_id': cycle_id})
    return cycle


def derive_overall_status(total_assigned: int, matched: int, mismatched: int, flagged: int) -> str:
    if total_assigned > 0 and matched == total_assigned:
        return OVERALL_VERIFIED
    if mismatched > 0 or flagged > 0:
        return OVERALL_DISCREPANT
    return OVERALL_PENDING


def summarize_employee(employee_id: str, employee_name: str, department: str,
                       assigned_ids: Collection[int], records: Sequence[RecordSnapshot]) -> EmployeeComplianceSummary:
    """
    Summarize one employee for one cycle.

    Only records for assets currently assigned to the employee are counted;
    records for reassigned or retired assets stay history.

    Args:
        employee_id: emp_id
        employee_name: Display name
        department: Department (may be '')
        assigned_ids: Ids of the assets currently assigned, independent of the cycle
        records: The employee's current records in the cycle
    """
    assigned_ids = set(assigned_ids)
    counted = [r for r in records if r.asset_id in assigned_ids]
    matched = sum(1 for r in counted if r.status == VERIFIED)
    mismatched = sum(1 for r in counted if r.status == PENDING and not r.is_match)
    flagged = sum(1 for r in counted if r.status == FLAGGED)
    total_assigned = len(assigned_ids)

    return EmployeeComplianceSummary(
        employee_id=employee_id,
        employee_name=employee_name,
        department=department,
        total_assigned=total_assigned,
        total_verified=len(counted),
        matched=matched,
        mismatched=mismatched,
        flagged=flagged,
        overall_status=derive_overall_status(total_assigned, matched, mismatched, flagged),
        compliance=percent(matched, total_assigned),
    )


def build_sessions(records: Iterable[RecordSnapshot],
                   cycles_by_id: Dict[int, CycleSnapshot]) -> List[VerificationSession]:
    """One session per cycle the employee submitted in, most recent first"""
    grouped: Dict[int, List[RecordSnapshot]] = OrderedDict()
    for record in records:
        grouped.setdefault(record.cycle_id, []).append(record)

    sessions = []
    for cycle_id, cycle_records in grouped.items():
        dates = [r.verification_date for r in cycle_records if r.verification_date is not None]
        verified = sum(1 for r in cycle_records if r.status == VERIFIED)
        cycle = cycles_by_id.get(cycle_id)
        sessions.append(VerificationSession(
            cycle_id=cycle_id,
            cycle_title=cycle.title if cycle else '',
            date=max(dates) if dates else None,
            count=len(cycle_records),
            verified=verified,
            discrepant=len(cycle_records) - verified,
        ))

    # None dates sort last; cycle id breaks ties deterministically
    sessions.sort(key=lambda s: (s.date or datetime.min, s.cycle_id), reverse=True)
    return sessions


def item_from_record(record: RecordSnapshot, asset: Optional[AssetSnapshot]) -> AssetVerificationItem:
    """Join a record with asset context, using placeholders when the asset is gone"""
    return AssetVerificationItem(
        asset_id=record.asset_id,
        asset_tag=asset.tag if asset else (record.expected_tag or UNKNOWN_ASSET_TAG),
        asset_name=asset.name if asset else UNKNOWN_ASSET_NAME,
        asset_type=asset.asset_type if asset else '',
        model=asset.model if asset else '',
        serial_number=asset.serial_number if asset else '',
        employee_id=record.employee_id,
        employee_name=record.employee_name,
        entered_asset_id=record.entered_asset_id,
        status=record.status,
        is_match=record.is_match,
        notes=record.notes,
        verification_date=record.verification_date,
        record_id=record.id,
    )


def pending_item(asset: AssetSnapshot, employee_name: str) -> AssetVerificationItem:
    """Default state of an assigned asset with no record in the cycle"""
    return AssetVerificationItem(
        asset_id=asset.id,
        asset_tag=asset.tag,
        asset_name=asset.name,
        asset_type=asset.asset_type,
        model=asset.model,
        serial_number=asset.serial_number,
        employee_id=asset.assigned_employee_id or '',
        employee_name=employee_name,
        entered_asset_id='',
        status=PENDING,
        is_match=False,
        notes=NOT_SUBMITTED_NOTE,
        verification_date=None,
    )


def merge_assets_with_records(assigned: Sequence[AssetSnapshot], records: Sequence[RecordSnapshot],
                              assets_by_id: Dict[int, AssetSnapshot],
                              employee_names: Dict[str, str]) -> List[AssetVerificationItem]:
    """
    Every assigned asset with its record (or a Pending placeholder), followed by
    records for assets that are no longer assigned to the submitter.
    """
    by_key = {(r.employee_id, r.asset_id): r for r in records}
    items = []
    covered = set()
    for asset in assigned:
        key = (asset.assigned_employee_id, asset.id)
        record = by_key.get(key)
        if record is not None:
            items.append(item_from_record(record, asset))
            covered.add(key)
        else:
            name = employee_names.get(asset.assigned_employee_id, asset.assigned_employee_id or '')
            items.append(pending_item(asset, name))

    for record in records:
        if (record.employee_id, record.asset_id) not in covered:
            items.append(item_from_record(record, assets_by_id.get(record.asset_id)))
    return items


class EmployeeReconciliationAggregator:
    """
    Builds the per-employee verification view over the read ports.
    """

    def __init__(self, assets: AssetReadPort, employees: EmployeeReadPort,
                 verification: VerificationReadPort):
        self.assets = assets
        self.employees = employees
        self.verification = verification

    def detail(self, employee_id: str, cycle_id: Optional[int] = None) -> EmployeeVerificationDetail:
        """
        Full verification view for one employee.

        Raises:
            NotFoundError: If the employee or the explicit cycle does not exist
        """
        employee = self.employees.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} not found", details={'employee_id': employee_id})
        cycle = resolve_cycle(self.verification, cycle_id)

        assigned = self.assets.list_assigned_assets(employee.emp_id)
        history = self.verification.current_records(employee_id=employee.emp_id)
        records = [r for r in history if cycle is not None and r.cycle_id == cycle.id]

        assigned_ids = {a.id for a in assigned}
        if any(r.asset_id not in assigned_ids for r in records):
            assets_by_id = {a.id: a for a in self.assets.list_assets()}
        else:
            assets_by_id = {a.id: a for a in assigned}
        items = merge_assets_with_records(assigned, records, assets_by_id, {employee.emp_id: employee.full_name})

        cycles_by_id = {c.id: c for c in self.verification.list_cycles()}
        sessions = build_sessions(history, cycles_by_id)
        summary = summarize_employee(employee.emp_id, employee.full_name, employee.department,
                                     assigned_ids, records)

        return EmployeeVerificationDetail(
            employee=employee,
            cycle=cycle,
            summary=summary,
            assets=items,
            all_sessions=sessions,
            latest_session_date=sessions[0].date if sessions else None,
        )
