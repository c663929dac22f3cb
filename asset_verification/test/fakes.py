"""
In-memory read ports for exercising aggregation and reporting without a database.
"""

from asset_verification.buisness.core.read_ports import (
    AssetReadPort,
    EmployeeReadPort,
    LicenseReadPort,
    VerificationReadPort,
    WorkspaceReadPort,
)


class FakeAssets(AssetReadPort):
    def __init__(self, assets=()):
        self.assets = list(assets)

    def list_assets(self):
        return list(self.assets)


class FakeEmployees(EmployeeReadPort):
    def __init__(self, employees=()):
        self.employees = list(employees)

    def list_employees(self):
        return list(self.employees)


class FakeLicenses(LicenseReadPort):
    def __init__(self, licenses=()):
        self.licenses = list(licenses)

    def list_licenses(self):
        return list(self.licenses)


class FakeWorkspace(WorkspaceReadPort):
    def __init__(self, desks=()):
        self.desks = list(desks)

    def list_desks(self):
        return list(self.desks)


class FakeVerification(VerificationReadPort):
    def __init__(self, cycles=(), records=()):
        self.cycles = list(cycles)
        self.records = list(records)

    def get_cycle(self, cycle_id):
        return next((c for c in self.cycles if c.id == cycle_id), None)

    def latest_cycle(self):
        cycles = self.list_cycles()
        return cycles[0] if cycles else None

    def list_cycles(self):
        return sorted(self.cycles, key=lambda c: (c.start_date, c.id), reverse=True)

    def current_records(self, cycle_id=None, employee_id=None):
        return [
            r for r in self.records
            if (cycle_id is None or r.cycle_id == cycle_id)
            and (employee_id is None or r.employee_id == employee_id)
        ]


class BrokenPort(AssetReadPort, LicenseReadPort, WorkspaceReadPort):
    """Every read raises, to exercise per-section degradation"""

    def __init__(self, message='upstream unavailable'):
        self.message = message

    def list_assets(self):
        raise RuntimeError(self.message)

    def list_licenses(self):
        raise RuntimeError(self.message)

    def list_desks(self):
        raise RuntimeError(self.message)
