"""
Asset Assignment Policy

An employee may only attest assets currently assigned to them.
"""

from asset_verification import db
from asset_verification.buisness.verification.errors import ValidationError
from asset_verification.data.core.asset import Asset


class AssetAssignmentPolicy:

    @classmethod
    def check(cls, asset_id, employee_id: str) -> Asset:
        """
        Raises:
            ValidationError: If the asset is unknown or not assigned to the employee
        """
        asset = db.session.get(Asset, asset_id) if asset_id is not None else None
        if asset is None:
            raise ValidationError(f"Unknown asset id: {asset_id}", details={'asset_id': asset_id})
        if asset.assigned_employee_id != employee_id:
            raise ValidationError(
                f"Asset {asset.tag} is not assigned to employee {employee_id}",
                details={'asset_id': asset_id, 'employee_id': employee_id},
            )
        return asset
