from asset_verification import db
from asset_verification.data.core.record_base import RecordBase


class Employee(RecordBase):
    """Employee directory entry (owned by the employee-directory subsystem)"""
    __tablename__ = 'employees'

    emp_id = db.Column(db.String(50), unique=True, nullable=False, index=True)
    full_name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=True)
    department = db.Column(db.String(100), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def __repr__(self):
        return f'<Employee {self.emp_id} {self.full_name}>'
