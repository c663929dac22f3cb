"""
Tests for audit report compilation and findings
"""

from datetime import datetime

import pytest

from asset_verification.buisness.audit.compiler import AuditReportCompiler
from asset_verification.buisness.audit.findings import derive_findings
from asset_verification.buisness.audit.structs import AuditThresholds
from asset_verification.buisness.core.snapshots import (
    AssetSnapshot,
    CycleSnapshot,
    DeskSnapshot,
    EmployeeSnapshot,
    LicenseSnapshot,
    RecordSnapshot,
)
from asset_verification.test.fakes import (
    BrokenPort,
    FakeAssets,
    FakeEmployees,
    FakeLicenses,
    FakeVerification,
    FakeWorkspace,
)

NOW = datetime(2026, 6, 1, 12, 0, 0)
CYCLE = CycleSnapshot(id=7, title='Q2', status='active', start_date=datetime(2026, 5, 20), created_by='ADMIN01')


def desks(occupied, total):
    return [DeskSnapshot(f'D-{i}', 'Occupied' if i < occupied else 'Available') for i in range(total)]


@pytest.fixture
def ports():
    assets = FakeAssets([
        AssetSnapshot(1, 'LT-1', 'Laptop 1', 'Laptop', assigned_employee_id='E1',
                      warranty_expiry=datetime(2026, 5, 1), status='IN_USE'),
        AssetSnapshot(2, 'PH-2', 'Phone 2', 'Phone', assigned_employee_id='E1',
                      warranty_expiry=datetime(2026, 6, 15), status='IN_USE'),
        AssetSnapshot(3, 'LT-3', 'Laptop 3', 'Laptop', warranty_expiry=datetime(2027, 1, 1), status='STORAGE'),
    ])
    employees = FakeEmployees([EmployeeSnapshot('E1', 'Ana Lima', 'Ops')])
    licenses = FakeLicenses([
        LicenseSnapshot(1, 'Office', seats_limit=10, used_seats=10, expiry_date=datetime(2026, 5, 1)),
        LicenseSnapshot(2, 'Office', seats_limit=10, used_seats=4, expiry_date=datetime(2026, 6, 20)),
        LicenseSnapshot(3, 'Slack', seats_limit=20, used_seats=5),
    ])
    workspace = FakeWorkspace(desks(10, 10))
    verification = FakeVerification(cycles=[CYCLE], records=[
        RecordSnapshot(id=1, cycle_id=7, employee_id='E1', employee_name='Ana Lima', asset_id=1,
                       expected_tag='LT-1', entered_asset_id='REPORTED_LOST', status='Flagged',
                       is_match=False, notes='Reported lost by user', verification_date=datetime(2026, 5, 25)),
    ])
    return {
        'assets': assets, 'employees': employees, 'licenses': licenses,
        'workspace': workspace, 'verification': verification,
    }


def compile_report(ports, thresholds=None, now=NOW):
    return AuditReportCompiler(thresholds=thresholds, **ports).compile(now)


def test_sections(ports):
    report = compile_report(ports)

    assert report.generated_at == NOW
    assert report.section_errors == {}

    assets = report.assets
    assert assets['total_assets'] == 3
    assert (assets['assigned'], assets['unassigned']) == (2, 1)
    assert (assets['warranty_expired'], assets['warranty_expiring']) == (1, 1)
    assert assets['by_type'] == [{'type': 'Laptop', 'count': 2}, {'type': 'Phone', 'count': 1}]
    assert assets['status_breakdown'] == [{'status': 'IN_USE', 'count': 2}, {'status': 'STORAGE', 'count': 1}]

    licenses = report.licenses
    assert (licenses['total'], licenses['active'], licenses['expired'], licenses['expiring']) == (3, 2, 1, 1)
    office, slack = licenses['by_software']
    assert office == {
        'software_name': 'Office', 'total': 2, 'total_seats': 20, 'used_seats': 14,
        'seat_utilization': 70, 'active': 1, 'expired': 1, 'expiring': 1,
    }
    assert slack['seat_utilization'] == 25

    assert report.workspace == {'total_desks': 10, 'occupied': 10, 'available': 0, 'reserved': 0, 'utilization': 100}

    verification = report.verification
    assert verification['cycle'].id == 7
    assert (verification['total'], verification['verified'], verification['pending'], verification['flagged']) == (2, 0, 1, 1)
    assert verification['discrepant_employees'] == 1
    assert verification['submitted_count'] == 1
    assert [i.status for i in verification['action_items']] == ['Flagged', 'Pending']
    assert verification['action_items'][0].employee_name == 'Ana Lima'


def test_findings_are_ordered_by_severity_then_area(ports):
    findings = compile_report(ports).findings

    assert [(f.severity, f.area) for f in findings] == [
        ('high', 'Assets'),
        ('high', 'Licenses'),
        ('high', 'Verification'),
        ('medium', 'Assets'),
        ('medium', 'Licenses'),
        ('medium', 'Verification'),
        ('low', 'Assets'),
        ('low', 'Verification'),
        ('low', 'Workspace'),
    ]
    assert findings[0].message == '1 asset has an expired warranty'
    assert findings[-1].message == 'Workspace utilization at 100% is above the 90% threshold'


def test_scenario_e_expired_warranty_gives_high_asset_finding():
    ports = {
        'assets': FakeAssets([AssetSnapshot(1, 'LT-1', 'Laptop', assigned_employee_id=None,
                                            warranty_expiry=datetime(2026, 1, 1))]),
        'employees': FakeEmployees(),
        'licenses': FakeLicenses(),
        'workspace': FakeWorkspace(),
        'verification': FakeVerification(),
    }
    report = compile_report(ports)

    assert any(f.severity == 'high' and f.area == 'Assets' for f in report.findings)
    assert report.verification['cycle'] is None
    assert report.verification['total'] == 0


def test_plural_messages_and_no_deduplication():
    sections = {
        'assets': {'warranty_expired': 3, 'warranty_expiring': 0, 'unassigned': 0},
        'verification': None,
        'licenses': {'expired': 2, 'expiring': 0},
        'workspace': None,
    }
    findings = derive_findings(thresholds=AuditThresholds(), **sections)

    assert [f.message for f in findings] == ['3 assets have expired warranties', '2 licenses expired']


def test_workspace_band_uses_thresholds():
    thresholds = AuditThresholds(utilization_high=80, utilization_low=20)

    def workspace_findings(occupied, total):
        section = {'total_desks': total, 'utilization': round(100 * occupied / total) if total else 0}
        return derive_findings(None, None, None, section, thresholds)

    assert workspace_findings(9, 10)[0].message == 'Workspace utilization at 90% is above the 80% threshold'
    assert workspace_findings(1, 10)[0].message == 'Workspace utilization at 10% is below the 20% threshold'
    assert workspace_findings(5, 10) == []
    assert workspace_findings(0, 0) == []


def test_pending_backlog_threshold_is_strictly_greater(ports):
    findings = compile_report(ports, AuditThresholds(pending_backlog=1)).findings
    assert not any(f.area == 'Verification' and f.severity == 'low' for f in findings)


def test_expiry_window_is_configurable(ports):
    report = compile_report(ports, AuditThresholds(expiry_window_days=7))
    assert report.assets['warranty_expiring'] == 0
    assert report.licenses['expiring'] == 0
    assert not any(f.severity == 'medium' and f.area in ('Assets', 'Licenses') for f in report.findings)


def test_broken_license_port_degrades_only_that_section(ports):
    ports['licenses'] = BrokenPort('license service down')
    report = compile_report(ports)

    assert report.licenses is None
    assert report.section_errors == {'licenses': 'RuntimeError: license service down'}
    assert report.assets is not None
    assert report.workspace is not None
    assert report.verification is not None
    assert not any(f.area == 'Licenses' for f in report.findings)
    assert any(f.area == 'Assets' for f in report.findings)


def test_broken_asset_port_degrades_asset_dependent_sections(ports):
    ports['assets'] = BrokenPort()
    report = compile_report(ports)

    assert report.assets is None
    assert report.verification is None
    assert set(report.section_errors) == {'assets', 'verification'}
    assert report.licenses is not None
    assert {f.area for f in report.findings} == {'Licenses', 'Workspace'}


def test_report_is_idempotent(ports):
    assert compile_report(ports) == compile_report(ports)


def test_thresholds_from_config():
    thresholds = AuditThresholds.from_config({
        'AUDIT_EXPIRY_WINDOW_DAYS': '14',
        'AUDIT_UTILIZATION_HIGH': 85,
    })
    assert thresholds == AuditThresholds(expiry_window_days=14, utilization_high=85)
