"""
Generic data insertion mixin for SQLAlchemy models
Provides from_dict and bulk_create_from_dicts, used by the demo data loader
"""

from asset_verification import db
from datetime import datetime, date
from sqlalchemy import inspect
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.domain.core.data_insertion")


def _coerce_datetime(value):
    """Accept ISO strings (as found in JSON fixtures) for DateTime columns"""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    return value


class DataInsertionMixin:
    """
    Mixin that provides generic data insertion capabilities for SQLAlchemy models

    This mixin adds:
    - from_dict(): Create model instance from dictionary
    - bulk_create_from_dicts(): Create multiple instances from list of dictionaries
    """

    @classmethod
    def from_dict(cls, data_dict, skip_fields=None):
        """
        Create a model instance from a dictionary

        Unknown keys are ignored; DateTime columns accept ISO-8601 strings.

        Args:
            data_dict (dict): Dictionary containing model data
            skip_fields (list, optional): Fields to skip during creation

        Returns:
            Model instance (not saved to database)
        """
        if skip_fields is None:
            skip_fields = []

        mapper = inspect(cls)
        columns = {c.key: c for c in mapper.columns}

        filtered_data = {}
        for key, value in data_dict.items():
            if key not in columns or key in skip_fields:
                continue
            if key in ['created_at', 'updated_at'] and value is None:
                continue
            if isinstance(columns[key].type, db.DateTime):
                value = _coerce_datetime(value)
            filtered_data[key] = value

        return cls(**filtered_data)

    @classmethod
    def bulk_create_from_dicts(cls, data_list, skip_fields=None, commit=True):
        """
        Create multiple model instances from a list of dictionaries

        Args:
            data_list (list): List of dictionaries containing model data
            skip_fields (list, optional): Fields to skip during creation
            commit (bool): Whether to commit the transaction

        Returns:
            list: List of created model instances
        """
        instances = []
        for data_dict in data_list:
            instance = cls.from_dict(data_dict, skip_fields)
            db.session.add(instance)
            instances.append(instance)

        if commit:
            db.session.commit()
            logger.info(f"Created {len(instances)} {cls.__name__} instances")

        return instances
