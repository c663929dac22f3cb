"""
Tests for the submission classifier and percentage rounding
"""

import pytest

from asset_verification.buisness.verification.classifier import (
    FLAGGED,
    LOST_NOTE,
    LOST_SENTINEL,
    MISMATCH_NOTE,
    PENDING,
    VERIFIED,
    classify_submission,
    is_lost_sentinel,
    normalize_identifier,
)
from asset_verification.utils.percentages import percent


@pytest.mark.parametrize('entered', ['LT-1001', 'lt-1001', '  Lt-1001  ', '\tLT-1001\n'])
def test_exact_tag_is_verified_regardless_of_case_and_whitespace(entered):
    result = classify_submission('LT-1001', entered)
    assert result.status == VERIFIED
    assert result.is_match is True
    assert result.entered_asset_id == 'LT-1001'


def test_lost_sentinel_is_flagged_with_default_note():
    result = classify_submission('LT-1001', LOST_SENTINEL)
    assert result.status == FLAGGED
    assert result.is_match is False
    assert result.notes == LOST_NOTE


def test_lost_sentinel_note_can_be_overridden():
    result = classify_submission('LT-1001', ' reported_lost ', notes='Left on the train')
    assert result.status == FLAGGED
    assert result.notes == 'Left on the train'


def test_lost_sentinel_wins_even_if_tag_equals_sentinel():
    result = classify_submission(LOST_SENTINEL, LOST_SENTINEL)
    assert result.status == FLAGGED


@pytest.mark.parametrize('entered', [None, '', '   '])
def test_empty_entry_is_pending_without_note(entered):
    result = classify_submission('LT-1001', entered)
    assert result.status == PENDING
    assert result.is_match is False
    assert result.entered_asset_id == ''
    assert result.notes == ''


def test_mismatch_is_pending_with_mismatch_note():
    result = classify_submission('LT-1001', 'LT-9999')
    assert result.status == PENDING
    assert result.is_match is False
    assert result.entered_asset_id == 'LT-9999'
    assert result.notes == MISMATCH_NOTE


def test_mismatch_note_can_be_overridden():
    result = classify_submission('LT-1001', 'LT-9999', notes='Sticker is worn')
    assert result.notes == 'Sticker is worn'


def test_missing_canonical_tag_never_verifies():
    assert classify_submission('', 'LT-1001').status == PENDING
    assert classify_submission(None, 'LT-1001').status == PENDING


def test_classification_is_deterministic():
    assert classify_submission('LT-1', 'lt-2', 'x') == classify_submission('LT-1', 'lt-2', 'x')


def test_normalize_identifier():
    assert normalize_identifier(None) == ''
    assert normalize_identifier('  ab-1 ') == 'AB-1'
    assert is_lost_sentinel('reported_lost')
    assert not is_lost_sentinel('LOST')


@pytest.mark.parametrize('part, whole, expected', [
    (0, 0, 0),
    (5, 0, 0),
    (0, 3, 0),
    (1, 2, 50),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),   # 12.5 rounds half-up
    (3, 3, 100),
    (7, 3, 100),  # clamped
    (-1, 3, 0),   # clamped
])
def test_percent_rounds_half_up_and_clamps(part, whole, expected):
    assert percent(part, whole) == expected
