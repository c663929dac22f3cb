from asset_verification import db
from asset_verification.data.core.record_base import RecordBase


class Asset(RecordBase):
    """Hardware asset (owned by the asset-inventory subsystem)"""
    __tablename__ = 'assets'

    tag = db.Column(db.String(100), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    asset_type = db.Column(db.String(50), nullable=False, default='Laptop')
    model = db.Column(db.String(100), nullable=True)
    serial_number = db.Column(db.String(100), nullable=True)
    # Employee emp_id, not a foreign key: the directory is an external system
    assigned_employee_id = db.Column(db.String(50), nullable=True, index=True)
    warranty_expiry = db.Column(db.DateTime, nullable=True)
    status = db.Column(db.String(50), nullable=False, default='STORAGE')

    def __repr__(self):
        return f'<Asset {self.tag} ({self.name})>'
