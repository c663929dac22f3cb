"""
Submission classifier

Decides the status of one employee attestation for one assigned asset.
Pure and deterministic: same inputs, same Classification.
"""

from dataclasses import dataclass
from typing import Optional


LOST_SENTINEL = 'REPORTED_LOST'

VERIFIED = 'Verified'
PENDING = 'Pending'
FLAGGED = 'Flagged'

LOST_NOTE = 'Reported lost by user'
MISMATCH_NOTE = 'ID Mismatch reported by user'
NOT_SUBMITTED_NOTE = 'Not yet submitted'


@dataclass(frozen=True)
class Classification:
    status: str
    is_match: bool
    entered_asset_id: str
    notes: str


def normalize_identifier(value: Optional[str]) -> str:
    """Trim surrounding whitespace and upper-case; None becomes ''"""
    if value is None:
        return ''
    return str(value).strip().upper()


def is_lost_sentinel(value: Optional[str]) -> bool:
    return normalize_identifier(value) == LOST_SENTINEL


def classify_submission(canonical_tag: Optional[str], entered_value: Optional[str],
                        notes: Optional[str] = None) -> Classification:
    """
    Classify an entered asset identifier against the inventory tag.

    Rules, in order:
    - lost sentinel -> Flagged, no match
    - empty / not submitted -> Pending, no match
    - equal to the tag (case and surrounding whitespace ignored) -> Verified
    - anything else -> Pending, no match (ID mismatch)

    Args:
        canonical_tag: The asset's tag from inventory
        entered_value: What the employee typed, or LOST_SENTINEL
        notes: Free text; replaces the default note when non-empty

    Returns:
        Classification
    """
    entered = normalize_identifier(entered_value)
    note = (notes or '').strip()

    if entered == LOST_SENTINEL:
        return Classification(FLAGGED, False, LOST_SENTINEL, note or LOST_NOTE)

    if not entered:
        return Classification(PENDING, False, '', note)

    tag = normalize_identifier(canonical_tag)
    if tag and entered == tag:
        return Classification(VERIFIED, True, entered, note)

    return Classification(PENDING, False, entered, note or MISMATCH_NOTE)
