"""
CycleStore - Domain service for the verification cycle lifecycle

Starts and closes cycles and answers lifecycle queries. All writes commit
before returning; storage constraints back the single-active-cycle rule.
"""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from asset_verification import db
from asset_verification.data.verification.cycle import VerificationCycle
from asset_verification.data.verification.record import VerificationRecord
from asset_verification.buisness.verification.errors import InvalidStateError, NotFoundError, ValidationError
from asset_verification.buisness.verification.policies import SingleActiveCyclePolicy
from asset_verification.buisness.verification.state_machine import CycleStateMachine
from asset_verification.logger import get_logger
from asset_verification.utils.timekeeping import utc_now

logger = get_logger("asset_verification.buisness.cycles")

DEFAULT_CLOSED_BY = 'admin'


class CycleStore:
    """
    Responsibilities:
    - Create cycles (None -> active) under the single-active rule
    - Close cycles (active -> closed) with a compare-and-set update
    - Read the active cycle and the cycle history
    """

    def start_cycle(self, title: str, created_by: str, notes: Optional[str] = None) -> VerificationCycle:
        """
        Start a new verification cycle.

        Args:
            title: Cycle title (required)
            created_by: Employee id of the administrator (required)
            notes: Optional free text

        Returns:
            VerificationCycle: The new active cycle

        Raises:
            ValidationError: If title or created_by is empty
            InvalidStateError: If another cycle is active, including when a
                concurrent start wins the race
        """
        title = (title or '').strip()
        created_by = (created_by or '').strip()
        if not title:
            raise ValidationError("Title is required to start a verification cycle")
        if not created_by:
            raise ValidationError("createdBy is required to start a verification cycle")

        SingleActiveCyclePolicy.check()

        cycle = VerificationCycle(
            title=title,
            notes=(notes or '').strip(),
            status=CycleStateMachine.ACTIVE,
            start_date=utc_now(),
            end_date=None,
            created_by=created_by,
        )
        db.session.add(cycle)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.warning(f"Concurrent start of verification cycle {title!r} by {created_by} rejected")
            active = SingleActiveCyclePolicy.find_active()
            raise SingleActiveCyclePolicy.violation(active.id if active else None)

        logger.info(f"Verification cycle {cycle.id} ({cycle.title!r}) started by {created_by}",
                    extra={"cycle_id": cycle.id})
        return cycle

    def close_cycle(self, cycle_id: int, closed_by: Optional[str] = None) -> VerificationCycle:
        """
        Close an active cycle.

        Raises:
            NotFoundError: If the cycle does not exist
            InvalidStateError: If the cycle is already closed
        """
        cycle = db.session.get(VerificationCycle, cycle_id)
        if cycle is None:
            raise NotFoundError(f"Verification cycle {cycle_id} not found", details={'cycle_id': cycle_id})

        CycleStateMachine.validate_transition(cycle.status, CycleStateMachine.CLOSED)

        closed_by = (closed_by or '').strip() or DEFAULT_CLOSED_BY
        result = db.session.execute(
            db.update(VerificationCycle)
            .where(VerificationCycle.id == cycle_id, VerificationCycle.status == CycleStateMachine.ACTIVE)
            .values(status=CycleStateMachine.CLOSED, end_date=utc_now(), closed_by=closed_by, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            # Someone else closed it between our read and the update
            db.session.rollback()
            raise InvalidStateError("This cycle is already closed", details={'cycle_id': cycle_id})
        db.session.commit()

        db.session.refresh(cycle)
        logger.info(f"Verification cycle {cycle.id} ({cycle.title!r}) closed by {closed_by}",
                    extra={"cycle_id": cycle.id})
        return cycle

    def get_active_cycle(self) -> Optional[VerificationCycle]:
        return SingleActiveCyclePolicy.find_active()

    def get_cycle(self, cycle_id: int) -> VerificationCycle:
        cycle = db.session.get(VerificationCycle, cycle_id)
        if cycle is None:
            raise NotFoundError(f"Verification cycle {cycle_id} not found", details={'cycle_id': cycle_id})
        return cycle

    def list_cycles(self) -> List[VerificationCycle]:
        """All cycles, newest start first"""
        return (
            VerificationCycle.query
            .order_by(VerificationCycle.start_date.desc(), VerificationCycle.id.desc())
            .all()
        )

    def submitted_count(self, cycle_id: int) -> int:
        """Distinct employees with at least one current record in the cycle"""
        return (
            db.session.query(db.func.count(db.distinct(VerificationRecord.employee_id)))
            .filter(VerificationRecord.cycle_id == cycle_id, VerificationRecord.superseded_at.is_(None))
            .scalar()
        ) or 0
