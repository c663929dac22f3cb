"""
Read ports for the cross-domain data the verification engine consumes.

Each upstream domain is an independent interface so the aggregator and the
audit compiler can be exercised with fakes, and so a failure reading one
domain only degrades the part of a report that depends on it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from asset_verification.buisness.core.snapshots import (
    AssetSnapshot,
    CycleSnapshot,
    DeskSnapshot,
    EmployeeSnapshot,
    LicenseSnapshot,
    RecordSnapshot,
)


class AssetReadPort(ABC):

    @abstractmethod
    def list_assets(self) -> List[AssetSnapshot]:
        """All assets in inventory"""

    def list_assigned_assets(self, employee_id: Optional[str] = None) -> List[AssetSnapshot]:
        """Assets currently assigned to someone (or to ``employee_id``)"""
        assets = [a for a in self.list_assets() if a.assigned_employee_id]
        if employee_id is not None:
            assets = [a for a in assets if a.assigned_employee_id == employee_id]
        return assets


class EmployeeReadPort(ABC):

    @abstractmethod
    def list_employees(self) -> List[EmployeeSnapshot]:
        """All employees in the directory"""

    def get_employee(self, emp_id: str) -> Optional[EmployeeSnapshot]:
        for employee in self.list_employees():
            if employee.emp_id == emp_id:
                return employee
        return None


class LicenseReadPort(ABC):

    @abstractmethod
    def list_licenses(self) -> List[LicenseSnapshot]:
        """All license records"""


class WorkspaceReadPort(ABC):

    @abstractmethod
    def list_desks(self) -> List[DeskSnapshot]:
        """All desks / workstation seats"""


class VerificationReadPort(ABC):

    @abstractmethod
    def get_cycle(self, cycle_id: int) -> Optional[CycleSnapshot]:
        """One cycle by id"""

    @abstractmethod
    def latest_cycle(self) -> Optional[CycleSnapshot]:
        """The most recently started cycle, whatever its status"""

    @abstractmethod
    def list_cycles(self) -> List[CycleSnapshot]:
        """All cycles, newest first"""

    @abstractmethod
    def current_records(self, cycle_id: Optional[int] = None,
                        employee_id: Optional[str] = None) -> List[RecordSnapshot]:
        """Non-superseded records, optionally narrowed to a cycle and/or employee"""
