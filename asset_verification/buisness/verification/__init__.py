"""
Verification business layer.

Main entry point: VerificationContext (domain facade)

- CycleStore: cycle lifecycle (start / close) under the single-active rule
- SubmissionManager: classifies and records employee attestations
- EmployeeReconciliationAggregator: per-employee detail and session history
- CycleComplianceRollup: cycle-wide compliance summary
- State machine and policies: lifecycle transitions and business rules
"""

from asset_verification.buisness.verification.context import VerificationContext
from asset_verification.buisness.verification.cycle_store import CycleStore
from asset_verification.buisness.verification.submission_manager import SubmissionManager
from asset_verification.buisness.verification.reconciliation import EmployeeReconciliationAggregator
from asset_verification.buisness.verification.rollup import CycleComplianceRollup
from asset_verification.buisness.verification.errors import (
    VerificationDomainError,
    ValidationError,
    InvalidStateError,
    NotFoundError,
    CycleClosedError,
)

__all__ = [
    'VerificationContext',
    'CycleStore',
    'SubmissionManager',
    'EmployeeReconciliationAggregator',
    'CycleComplianceRollup',
    'VerificationDomainError',
    'ValidationError',
    'InvalidStateError',
    'NotFoundError',
    'CycleClosedError',
]
