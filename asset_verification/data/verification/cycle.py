from asset_verification import db
from sqlalchemy import text
from asset_verification.data.core.record_base import RecordBase
from asset_verification.utils.timekeeping import utc_now


class VerificationCycle(RecordBase):
    __tablename__ = 'verification_cycles'
    __table_args__ = (
        # At most one row with status = 'active'
        db.Index(
            'uq_verification_cycles_single_active',
            'status',
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
    )

    ACTIVE = 'active'
    CLOSED = 'closed'

    title = db.Column(db.String(200), nullable=False)
    notes = db.Column(db.Text, nullable=False, default='')
    status = db.Column(db.String(20), nullable=False, default=ACTIVE, index=True)
    start_date = db.Column(db.DateTime, nullable=False, default=utc_now)
    end_date = db.Column(db.DateTime, nullable=True)
    created_by = db.Column(db.String(50), nullable=False)
    closed_by = db.Column(db.String(50), nullable=True)

    @property
    def is_active(self):
        return self.status == self.ACTIVE

    def __repr__(self):
        return f'<VerificationCycle {self.id} {self.title!r} {self.status}>'
