"""
Single Active Cycle Policy

At most one VerificationCycle may have status = active. The partial unique
index on verification_cycles is the authority; this policy gives callers a
specific message before the insert is attempted.
"""

from typing import Optional
from asset_verification.buisness.verification.errors import InvalidStateError
from asset_verification.data.verification.cycle import VerificationCycle


DUPLICATE_ACTIVE_MESSAGE = (
    "There is already an active verification cycle. "
    "Please close it before starting a new one."
)


class SingleActiveCyclePolicy:

    @classmethod
    def find_active(cls) -> Optional[VerificationCycle]:
        return VerificationCycle.query.filter_by(status=VerificationCycle.ACTIVE).first()

    @classmethod
    def check(cls) -> None:
        """
        Raises:
            InvalidStateError: If a cycle is already active
        """
        existing = cls.find_active()
        if existing is not None:
            raise cls.violation(existing.id)

    @classmethod
    def violation(cls, active_cycle_id=None) -> InvalidStateError:
        details = {'active_cycle_id': active_cycle_id} if active_cycle_id is not None else {}
        return InvalidStateError(DUPLICATE_ACTIVE_MESSAGE, details=details)
