"""
Row factories for tests. Each helper commits and returns the model instance.
"""

from asset_verification import db as _db
from asset_verification.data.core.asset import Asset
from asset_verification.data.core.desk import Desk
from asset_verification.data.core.employee import Employee
from asset_verification.data.core.license import License


def add_employee(emp_id, full_name=None, department='Engineering', is_active=True):
    employee = Employee(
        emp_id=emp_id,
        full_name=full_name or f'Employee {emp_id}',
        email=f'{emp_id.lower()}@example.com',
        department=department,
        is_active=is_active,
    )
    _db.session.add(employee)
    _db.session.commit()
    return employee


def add_asset(tag, employee_id=None, name=None, asset_type='Laptop', warranty_expiry=None, status='IN_USE'):
    asset = Asset(
        tag=tag,
        name=name or f'Asset {tag}',
        asset_type=asset_type,
        model='Model X',
        serial_number=f'SN-{tag}',
        assigned_employee_id=employee_id,
        warranty_expiry=warranty_expiry,
        status=status,
    )
    _db.session.add(asset)
    _db.session.commit()
    return asset


def add_license(software_name, seats_limit=10, used_seats=5, expiry_date=None):
    lic = License(software_name=software_name, seats_limit=seats_limit, used_seats=used_seats,
                  expiry_date=expiry_date)
    _db.session.add(lic)
    _db.session.commit()
    return lic


def add_desk(desk_id, status=Desk.AVAILABLE):
    desk = Desk(desk_id=desk_id, status=status)
    _db.session.add(desk)
    _db.session.commit()
    return desk

