"""
State machine for the verification cycle lifecycle

None -> active -> closed. Closed is terminal; there is no reopen.
"""

from typing import Dict, Set
from asset_verification.buisness.verification.errors import InvalidStateError


class CycleStateMachine:
    """
    Encodes valid VerificationCycle.status transitions.

    Creation (None -> active) is handled by the cycle store, which also
    guards the single-active-cycle rule.
    """

    ACTIVE = 'active'
    CLOSED = 'closed'

    TERMINAL_STATES = {CLOSED}

    TRANSITIONS: Dict[str, Set[str]] = {
        ACTIVE: {CLOSED},
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        if from_status in cls.TERMINAL_STATES:
            return False
        return to_status in cls.TRANSITIONS.get(from_status, set())

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """
        Raises:
            InvalidStateError: If transition is not allowed
        """
        if from_status in cls.TERMINAL_STATES:
            raise InvalidStateError(
                f"This cycle is already {from_status}",
                details={'status': from_status},
            )
        if not cls.can_transition(from_status, to_status):
            raise InvalidStateError(
                f"Invalid cycle status transition: {from_status} -> {to_status}",
                details={'from': from_status, 'to': to_status},
            )

    @classmethod
    def get_allowed_transitions(cls, from_status: str) -> Set[str]:
        if from_status in cls.TERMINAL_STATES:
            return set()
        return cls.TRANSITIONS.get(from_status, set())
