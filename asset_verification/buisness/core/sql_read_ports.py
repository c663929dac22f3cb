"""
SQLAlchemy implementations of the read ports.

Rows are converted to snapshots immediately; nothing here writes.
"""

from typing import List, Optional

from asset_verification import db
from asset_verification.data.core.asset import Asset
from asset_verification.data.core.desk import Desk
from asset_verification.data.core.employee import Employee
from asset_verification.data.core.license import License
from asset_verification.data.verification.cycle import VerificationCycle
from asset_verification.data.verification.record import VerificationRecord
from asset_verification.buisness.core.read_ports import (
    AssetReadPort,
    EmployeeReadPort,
    LicenseReadPort,
    VerificationReadPort,
    WorkspaceReadPort,
)
from asset_verification.buisness.core.snapshots import (
    AssetSnapshot,
    CycleSnapshot,
    DeskSnapshot,
    EmployeeSnapshot,
    LicenseSnapshot,
    RecordSnapshot,
)


def asset_snapshot(asset: Asset) -> AssetSnapshot:
    return AssetSnapshot(
        id=asset.id,
        tag=asset.tag or '',
        name=asset.name or '',
        asset_type=asset.asset_type or '',
        model=asset.model or '',
        serial_number=asset.serial_number or '',
        assigned_employee_id=asset.assigned_employee_id or None,
        warranty_expiry=asset.warranty_expiry,
        status=asset.status or '',
    )


def cycle_snapshot(cycle: VerificationCycle) -> CycleSnapshot:
    return CycleSnapshot(
        id=cycle.id,
        title=cycle.title,
        status=cycle.status,
        start_date=cycle.start_date,
        end_date=cycle.end_date,
        created_by=cycle.created_by,
        closed_by=cycle.closed_by,
        notes=cycle.notes or '',
    )


def record_snapshot(record: VerificationRecord) -> RecordSnapshot:
    return RecordSnapshot(
        id=record.id,
        cycle_id=record.cycle_id,
        employee_id=record.employee_id,
        employee_name=record.employee_name or '',
        asset_id=record.asset_id,
        expected_tag=record.expected_tag or '',
        entered_asset_id=record.entered_asset_id,
        status=record.status,
        is_match=bool(record.is_match),
        notes=record.notes or '',
        verification_date=record.verification_date,
    )


class SqlAssetReadPort(AssetReadPort):

    def list_assets(self) -> List[AssetSnapshot]:
        return [asset_snapshot(a) for a in Asset.query.order_by(Asset.id).all()]

    def list_assigned_assets(self, employee_id: Optional[str] = None) -> List[AssetSnapshot]:
        query = Asset.query.filter(Asset.assigned_employee_id.isnot(None), Asset.assigned_employee_id != '')
        if employee_id is not None:
            query = query.filter(Asset.assigned_employee_id == employee_id)
        return [asset_snapshot(a) for a in query.order_by(Asset.id).all()]


class SqlEmployeeReadPort(EmployeeReadPort):

    def list_employees(self) -> List[EmployeeSnapshot]:
        return [self._snapshot(e) for e in Employee.query.order_by(Employee.emp_id).all()]

    def get_employee(self, emp_id: str) -> Optional[EmployeeSnapshot]:
        employee = Employee.query.filter_by(emp_id=emp_id).first()
        return self._snapshot(employee) if employee else None

    @staticmethod
    def _snapshot(employee: Employee) -> EmployeeSnapshot:
        return EmployeeSnapshot(
            emp_id=employee.emp_id,
            full_name=employee.full_name,
            department=employee.department or '',
            email=employee.email or '',
            is_active=bool(employee.is_active),
        )


class SqlLicenseReadPort(LicenseReadPort):

    def list_licenses(self) -> List[LicenseSnapshot]:
        return [
            LicenseSnapshot(
                id=lic.id,
                software_name=lic.software_name or '',
                seats_limit=lic.seats_limit or 0,
                used_seats=lic.used_seats or 0,
                expiry_date=lic.expiry_date,
            )
            for lic in License.query.order_by(License.id).all()
        ]


class SqlWorkspaceReadPort(WorkspaceReadPort):

    def list_desks(self) -> List[DeskSnapshot]:
        return [DeskSnapshot(desk_id=d.desk_id, status=d.status) for d in Desk.query.order_by(Desk.id).all()]


class SqlVerificationReadPort(VerificationReadPort):

    def get_cycle(self, cycle_id: int) -> Optional[CycleSnapshot]:
        cycle = db.session.get(VerificationCycle, cycle_id)
        return cycle_snapshot(cycle) if cycle else None

    def latest_cycle(self) -> Optional[CycleSnapshot]:
        cycle = (
            VerificationCycle.query
            .order_by(VerificationCycle.start_date.desc(), VerificationCycle.id.desc())
            .first()
        )
        return cycle_snapshot(cycle) if cycle else None

    def list_cycles(self) -> List[CycleSnapshot]:
        cycles = (
            VerificationCycle.query
            .order_by(VerificationCycle.start_date.desc(), VerificationCycle.id.desc())
            .all()
        )
        return [cycle_snapshot(c) for c in cycles]

    def current_records(self, cycle_id: Optional[int] = None,
                        employee_id: Optional[str] = None) -> List[RecordSnapshot]:
        query = VerificationRecord.query.filter(VerificationRecord.superseded_at.is_(None))
        if cycle_id is not None:
            query = query.filter(VerificationRecord.cycle_id == cycle_id)
        if employee_id is not None:
            query = query.filter(VerificationRecord.employee_id == employee_id)
        query = query.order_by(VerificationRecord.verification_date.desc(), VerificationRecord.id.desc())
        return [record_snapshot(r) for r in query.all()]
