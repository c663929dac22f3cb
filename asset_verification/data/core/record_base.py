from asset_verification import db
from sqlalchemy.orm import declared_attr
from asset_verification.buisness.core.data_insertion_mixin import DataInsertionMixin
from asset_verification.utils.timekeeping import utc_now


class RecordBase(db.Model, DataInsertionMixin):
    """Abstract base class for all persisted entities with timestamps"""

    __abstract__ = True

    @declared_attr
    def __tablename__(cls):
        return cls.__name__.lower() + 's'

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=utc_now)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now)
