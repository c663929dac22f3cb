"""
Tests for the verification cycle lifecycle
"""

import pytest

from asset_verification.buisness.verification.cycle_store import CycleStore
from asset_verification.buisness.verification.errors import InvalidStateError, NotFoundError, ValidationError
from asset_verification.buisness.verification.policies import SingleActiveCyclePolicy
from asset_verification.buisness.verification.state_machine import CycleStateMachine
from asset_verification.data.verification.cycle import VerificationCycle


def active_cycles():
    return VerificationCycle.query.filter_by(status=VerificationCycle.ACTIVE).all()


def test_start_cycle_creates_active_cycle(app):
    store = CycleStore()
    cycle = store.start_cycle('Q1 2026 Verification', 'ADMIN01', notes='  first run ')

    assert cycle.id is not None
    assert cycle.status == 'active'
    assert cycle.start_date is not None
    assert cycle.end_date is None
    assert cycle.created_by == 'ADMIN01'
    assert cycle.notes == 'first run'
    assert store.get_active_cycle().id == cycle.id


@pytest.mark.parametrize('title, created_by', [('', 'ADMIN01'), ('   ', 'ADMIN01'), (None, 'ADMIN01'), ('Q1', '')])
def test_start_cycle_requires_title_and_creator(app, title, created_by):
    with pytest.raises(ValidationError):
        CycleStore().start_cycle(title, created_by)
    assert VerificationCycle.query.count() == 0


def test_second_start_while_active_fails_and_leaves_first_untouched(app):
    """Scenario C"""
    store = CycleStore()
    first = store.start_cycle('Q1', 'ADMIN01')
    first_start = first.start_date

    with pytest.raises(InvalidStateError) as exc_info:
        store.start_cycle('Q1 again', 'ADMIN02')

    assert exc_info.value.details == {'active_cycle_id': first.id}
    assert 'already an active verification cycle' in exc_info.value.message
    cycles = active_cycles()
    assert [c.id for c in cycles] == [first.id]
    assert cycles[0].title == 'Q1'
    assert cycles[0].start_date == first_start


def test_lost_start_race_is_reported_as_invalid_state(app, monkeypatch):
    """A concurrent start that passes the pre-check is stopped by the unique index"""
    store = CycleStore()
    winner = store.start_cycle('Winner', 'ADMIN01')

    # Simulate the loser having checked before the winner committed
    monkeypatch.setattr(SingleActiveCyclePolicy, 'check', classmethod(lambda cls: None))

    with pytest.raises(InvalidStateError) as exc_info:
        store.start_cycle('Loser', 'ADMIN02')

    assert exc_info.value.details == {'active_cycle_id': winner.id}
    assert [c.title for c in active_cycles()] == ['Winner']
    assert VerificationCycle.query.count() == 1


def test_close_cycle_sets_end_date_and_closer(app):
    store = CycleStore()
    cycle = store.start_cycle('Q1', 'ADMIN01')

    closed = store.close_cycle(cycle.id, 'ADMIN02')

    assert closed.status == 'closed'
    assert closed.end_date is not None
    assert closed.end_date >= closed.start_date
    assert closed.closed_by == 'ADMIN02'
    assert store.get_active_cycle() is None


def test_close_cycle_defaults_closed_by_to_admin(app):
    store = CycleStore()
    cycle = store.start_cycle('Q1', 'ADMIN01')
    assert store.close_cycle(cycle.id).closed_by == 'admin'


def test_close_closed_cycle_fails(app):
    store = CycleStore()
    cycle = store.start_cycle('Q1', 'ADMIN01')
    store.close_cycle(cycle.id)
    end_date = store.get_cycle(cycle.id).end_date

    with pytest.raises(InvalidStateError) as exc_info:
        store.close_cycle(cycle.id, 'ADMIN02')

    assert exc_info.value.message == 'This cycle is already closed'
    reloaded = store.get_cycle(cycle.id)
    assert reloaded.end_date == end_date
    assert reloaded.closed_by == 'admin'


def test_close_unknown_cycle_fails(app):
    with pytest.raises(NotFoundError):
        CycleStore().close_cycle(999)


def test_close_race_lost_after_read_is_invalid_state(app, db):
    """The compare-and-set update rejects a close whose cycle was closed after it was read"""
    store = CycleStore()
    cycle = store.start_cycle('Q1', 'ADMIN01')

    # Another writer closes it behind the session's back
    db.session.execute(
        db.update(VerificationCycle).where(VerificationCycle.id == cycle.id).values(status='closed')
        .execution_options(synchronize_session=False)
    )
    # The store still sees the stale 'active' instance from the identity map
    assert cycle.status == 'active'

    with pytest.raises(InvalidStateError):
        store.close_cycle(cycle.id, 'ADMIN02')


def test_new_cycle_can_start_after_close(app):
    store = CycleStore()
    first = store.start_cycle('Q1', 'ADMIN01')
    store.close_cycle(first.id)
    second = store.start_cycle('Q2', 'ADMIN01')

    assert store.get_active_cycle().id == second.id
    assert len(active_cycles()) == 1


def test_list_cycles_newest_first(app):
    store = CycleStore()
    ids = []
    for title in ('Q1', 'Q2', 'Q3'):
        cycle = store.start_cycle(title, 'ADMIN01')
        ids.append(cycle.id)
        store.close_cycle(cycle.id)

    assert [c.id for c in store.list_cycles()] == list(reversed(ids))


def test_at_most_one_active_after_any_sequence(app):
    store = CycleStore()
    for i in range(4):
        try:
            store.start_cycle(f'Cycle {i}', 'ADMIN01')
        except InvalidStateError:
            pass
        assert len(active_cycles()) <= 1
        if i % 2:
            store.close_cycle(store.get_active_cycle().id)
            assert len(active_cycles()) == 0


def test_state_machine_has_no_reopen():
    assert CycleStateMachine.can_transition('active', 'closed')
    assert not CycleStateMachine.can_transition('closed', 'active')
    assert CycleStateMachine.get_allowed_transitions('closed') == set()
    with pytest.raises(InvalidStateError):
        CycleStateMachine.validate_transition('closed', 'active')
