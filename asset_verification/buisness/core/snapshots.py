"""
Immutable read snapshots of upstream and engine records.

Business logic computes over these rather than over ORM rows, so aggregation
and report compilation can run against fakes and never write by accident.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class EmployeeSnapshot:
    emp_id: str
    full_name: str
    department: str = ''
    email: str = ''
    is_active: bool = True


@dataclass(frozen=True)
class AssetSnapshot:
    id: int
    tag: str
    name: str
    asset_type: str = ''
    model: str = ''
    serial_number: str = ''
    assigned_employee_id: Optional[str] = None
    warranty_expiry: Optional[datetime] = None
    status: str = ''


@dataclass(frozen=True)
class LicenseSnapshot:
    id: int
    software_name: str
    seats_limit: int = 1
    used_seats: int = 0
    expiry_date: Optional[datetime] = None


@dataclass(frozen=True)
class DeskSnapshot:
    desk_id: str
    status: str


@dataclass(frozen=True)
class CycleSnapshot:
    id: int
    title: str
    status: str
    start_date: datetime
    end_date: Optional[datetime] = None
    created_by: str = ''
    closed_by: Optional[str] = None
    notes: str = ''


@dataclass(frozen=True)
class RecordSnapshot:
    id: int
    cycle_id: int
    employee_id: str
    employee_name: str
    asset_id: int
    expected_tag: str
    entered_asset_id: str
    status: str
    is_match: bool
    notes: str
    verification_date: Optional[datetime]
