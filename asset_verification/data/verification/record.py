from asset_verification import db
from sqlalchemy import text
from asset_verification.data.core.record_base import RecordBase


class VerificationRecord(RecordBase):
    """
    One employee attestation for one asset in one cycle.

    Rows are never edited after insert except for ``superseded_at``, which is
    stamped when a later submission for the same (cycle, employee, asset)
    replaces this one. Readers only consider rows where it is NULL.
    """
    __tablename__ = 'verification_records'
    __table_args__ = (
        db.Index(
            'uq_verification_records_current',
            'cycle_id', 'employee_id', 'asset_id',
            unique=True,
            sqlite_where=text('superseded_at IS NULL'),
            postgresql_where=text('superseded_at IS NULL'),
        ),
        db.Index('ix_verification_records_employee_cycle', 'employee_id', 'cycle_id'),
    )

    cycle_id = db.Column(db.Integer, db.ForeignKey('verification_cycles.id'), nullable=False, index=True)
    employee_id = db.Column(db.String(50), nullable=False)
    employee_name = db.Column(db.String(200), nullable=False, default='')
    # No foreign key: assets may be deleted upstream while history must survive
    asset_id = db.Column(db.Integer, nullable=False, index=True)
    expected_tag = db.Column(db.String(100), nullable=False, default='')
    entered_asset_id = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False)
    is_match = db.Column(db.Boolean, nullable=False, default=False)
    notes = db.Column(db.Text, nullable=False, default='')
    verification_date = db.Column(db.DateTime, nullable=False)
    superseded_at = db.Column(db.DateTime, nullable=True)

    cycle = db.relationship('VerificationCycle')

    def __repr__(self):
        return f'<VerificationRecord {self.id} cycle={self.cycle_id} {self.employee_id}/{self.asset_id} {self.status}>'
