"""
Tests for the dict-based model insertion and the demo data loader
"""

from datetime import datetime

from asset_verification.data.core.asset import Asset
from asset_verification.data.core.employee import Employee
from asset_verification.data.core.license import License
from asset_verification.debug.debug_data_manager import MODEL_GROUPS, insert_demo_data, load_demo_data


def test_from_dict_ignores_unknown_keys_and_parses_dates(app):
    lic = License.from_dict({
        'software_name': 'Figma',
        'seats_limit': 5,
        'expiry_date': '2026-12-31T00:00:00',
        'vendor_portal': 'https://example.com',
    })

    assert lic.software_name == 'Figma'
    assert lic.expiry_date == datetime(2026, 12, 31)
    assert not hasattr(lic, 'vendor_portal')


def test_from_dict_respects_skip_fields(app):
    asset = Asset.from_dict({'tag': 'LT-9', 'name': 'Spare', 'assigned_employee_id': 'EMP001'},
                            skip_fields=['assigned_employee_id'])
    assert asset.assigned_employee_id is None


def test_bulk_create_commits_rows(app):
    Employee.bulk_create_from_dicts([
        {'emp_id': 'EMP010', 'full_name': 'Ana Lima'},
        {'emp_id': 'EMP011', 'full_name': 'Ben Cole'},
    ])
    assert sorted(e.emp_id for e in Employee.query.all()) == ['EMP010', 'EMP011']


def test_insert_demo_data_loads_every_group(app):
    data = load_demo_data()

    summary = insert_demo_data()

    for group, model in MODEL_GROUPS:
        assert summary[group] == {'status': 'inserted', 'count': len(data[group])}
        assert model.query.count() == len(data[group])


def test_insert_demo_data_skips_populated_tables(app):
    insert_demo_data()
    summary = insert_demo_data()

    assert all(entry == {'status': 'skipped', 'reason': 'data_present'} for entry in summary.values())
    assert Employee.query.count() == len(load_demo_data()['Employees'])


def test_insert_demo_data_disabled(app):
    assert insert_demo_data(enabled=False) == {}
    assert Employee.query.count() == 0
