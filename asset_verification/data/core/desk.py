from asset_verification import db
from asset_verification.data.core.record_base import RecordBase


class Desk(RecordBase):
    """Desk / workstation seat (owned by the workspace subsystem)"""
    __tablename__ = 'desks'

    OCCUPIED = 'Occupied'
    AVAILABLE = 'Available'
    RESERVED = 'Reserved'

    desk_id = db.Column(db.String(50), unique=True, nullable=False)
    location = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=AVAILABLE)
    assigned_to = db.Column(db.String(50), nullable=True)

    def __repr__(self):
        return f'<Desk {self.desk_id} {self.status}>'
