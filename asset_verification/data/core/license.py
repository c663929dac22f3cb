from asset_verification import db
from asset_verification.data.core.record_base import RecordBase


class License(RecordBase):
    """Software license (owned by the license subsystem)"""
    __tablename__ = 'licenses'

    software_name = db.Column(db.String(200), nullable=False)
    version = db.Column(db.String(50), nullable=True)
    seats_limit = db.Column(db.Integer, nullable=False, default=1)
    used_seats = db.Column(db.Integer, nullable=False, default=0)
    start_date = db.Column(db.DateTime, nullable=True)
    expiry_date = db.Column(db.DateTime, nullable=True)

    def __repr__(self):
        return f'<License {self.software_name} {self.version or ""}>'
