import pytest

from depot.data_model import Transaction, YieldPhase
from depot.engine.periods import (
    active_transactions,
    effective_end_year,
    is_active,
    occurrences,
    phase_covers,
    resolve_rate,
)
from depot.errors import ValidationError


def test_resolve_rate_last_matching_phase_wins():
    phases = [
        YieldPhase(id=1, start_year=1, end_year=10, rate=6.0),
        YieldPhase(id=2, start_year=5, end_year=7, rate=-3.5, custom_duration=True),
    ]

    assert resolve_rate(phases, 4) == 6.0
    assert resolve_rate(phases, 5) == -3.5
    assert resolve_rate(phases, 7) == -3.5
    assert resolve_rate(phases, 8) == 6.0


def test_resolve_rate_order_is_collection_order_not_id():
    phases = [
        YieldPhase(id=9, start_year=1, end_year=10, rate=2.0, custom_duration=True),
        YieldPhase(id=1, start_year=1, end_year=10, rate=8.0, custom_duration=True),
    ]

    assert resolve_rate(phases, 5) == 8.0
    assert resolve_rate(list(reversed(phases)), 5) == 2.0


def test_resolve_rate_defaults_to_zero_without_match():
    phases = [YieldPhase(id=1, start_year=3, end_year=4, rate=5.0, custom_duration=True)]

    assert resolve_rate(phases, 1) == 0.0
    assert resolve_rate([], 1) == 0.0


def test_inverted_phase_matches_no_year():
    phase = YieldPhase(id=1, start_year=6, end_year=2, rate=5.0, custom_duration=True)

    assert not any(phase_covers(phase, year) for year in range(1, 11))
    assert resolve_rate([phase], 4) == 0.0


def test_effective_end_year_defaults_to_horizon_for_non_custom_monthly():
    plain = Transaction(id=1, amount=100, type="monthly", start_year=1, end_year=3)
    custom = Transaction(id=2, amount=100, type="monthly", start_year=1, end_year=3, custom_duration=True)

    assert effective_end_year(plain, 20) == 20
    assert effective_end_year(custom, 20) == 3


def test_once_transaction_is_active_only_in_start_year():
    once = Transaction(id=1, amount=1000, type="once", start_year=4, end_year=9)

    assert [year for year in range(1, 11) if is_active(once, year, 10)] == [4]


def test_custom_monthly_transaction_window():
    monthly = Transaction(id=1, amount=50, type="monthly", start_year=3, end_year=5, custom_duration=True)

    assert [year for year in range(1, 11) if is_active(monthly, year, 10)] == [3, 4, 5]


def test_active_transactions_filters_by_year():
    txs = [
        Transaction(id=1, amount=50, type="monthly", start_year=1, end_year=10),
        Transaction(id=2, amount=5000, type="once", start_year=2),
    ]

    assert [t.id for t in active_transactions(txs, 1, 10)] == [1]
    assert [t.id for t in active_transactions(txs, 2, 10)] == [1, 2]


def test_occurrences():
    assert occurrences(Transaction(id=1, amount=1, type="monthly", start_year=1, end_year=1), 15) == 180
    assert occurrences(Transaction(id=2, amount=1, type="monthly", start_year=3, end_year=5, custom_duration=True), 15) == 36
    assert occurrences(Transaction(id=3, amount=1, type="monthly", start_year=5, end_year=3, custom_duration=True), 15) == 0
    assert occurrences(Transaction(id=4, amount=1, type="once", start_year=7), 15) == 1


def test_unknown_transaction_type_is_rejected():
    weird = Transaction(id=1, amount=100, type="weekly", start_year=1)

    with pytest.raises(ValidationError):
        is_active(weird, 1, 10)
    with pytest.raises(ValidationError):
        occurrences(weird, 10)


def test_inverted_custom_monthly_transaction_is_never_active():
    inverted = Transaction(id=1, amount=100, type="monthly", start_year=6, end_year=2, custom_duration=True)

    assert [year for year in range(1, 11) if is_active(inverted, year, 10)] == []
    assert active_transactions([inverted], 6, 10) == []
