"""
Policy classes for verification business rules

Policies are composable validation rules that enforce invariants.
They raise domain exceptions when violations are detected.
"""

from asset_verification.buisness.verification.policies.single_active_cycle import SingleActiveCyclePolicy
from asset_verification.buisness.verification.policies.submission_window import SubmissionWindowPolicy
from asset_verification.buisness.verification.policies.asset_assignment import AssetAssignmentPolicy

__all__ = [
    'SingleActiveCyclePolicy',
    'SubmissionWindowPolicy',
    'AssetAssignmentPolicy',
]
