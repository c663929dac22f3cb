"""
Submission Window Policy

Submissions are only accepted while their cycle is active. The cycle row is
read with FOR UPDATE so a concurrent close either waits for the submission to
commit or is observed by it.
"""

from asset_verification import db
from asset_verification.buisness.verification.errors import CycleClosedError, NotFoundError
from asset_verification.data.verification.cycle import VerificationCycle


class SubmissionWindowPolicy:

    @classmethod
    def lock_open_cycle(cls, cycle_id) -> VerificationCycle:
        """
        Load and lock the target cycle, requiring it to be active.

        Raises:
            NotFoundError: If the cycle does not exist
            CycleClosedError: If the cycle is not active
        """
        cycle = db.session.execute(
            db.select(VerificationCycle)
            .where(VerificationCycle.id == cycle_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalars().first()

        if cycle is None:
            raise NotFoundError(f"Verification cycle {cycle_id} not found", details={'cycle_id': cycle_id})
        if cycle.status != VerificationCycle.ACTIVE:
            raise CycleClosedError(
                "This verification cycle has been closed and no longer accepts submissions",
                details={'cycle_id': cycle_id, 'status': cycle.status},
            )
        return cycle
