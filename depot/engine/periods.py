"""Per-year resolution of yield phases and transactions."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..data_model import TRANSACTION_TYPES, Transaction, YieldPhase
from ..errors import ValidationError


def check_transaction_type(transaction: Transaction) -> None:
    if transaction.type not in TRANSACTION_TYPES:
        raise ValidationError(
            f"transaction {transaction.id!r}: type '{transaction.type}' is not valid; "
            f"expected one of [{', '.join(TRANSACTION_TYPES)}]"
        )


def check_transactions(transactions: Iterable[Transaction]) -> None:
    for transaction in transactions:
        check_transaction_type(transaction)


def phase_covers(phase: YieldPhase, year: int) -> bool:
    return phase.start_year <= year <= phase.end_year


def resolve_rate(phases: Sequence[YieldPhase], year: int) -> float:
    """Annual percent for ``year``; the last covering phase in the collection wins."""
    rate = 0.0
    for phase in phases:
        if phase_covers(phase, year):
            rate = phase.rate
    return rate


def effective_end_year(transaction: Transaction, duration_years: int) -> int:
    if transaction.type == "monthly" and not transaction.custom_duration:
        return duration_years
    return transaction.end_year


def is_active(transaction: Transaction, year: int, duration_years: int) -> bool:
    check_transaction_type(transaction)
    if year < transaction.start_year:
        return False
    if transaction.type == "once":
        return year == transaction.start_year
    return year <= effective_end_year(transaction, duration_years)


def active_transactions(transactions: Iterable[Transaction], year: int, duration_years: int) -> List[Transaction]:
    return [t for t in transactions if is_active(t, year, duration_years)]


def occurrences(transaction: Transaction, duration_years: int) -> int:
    """Number of times the amount is booked over the whole horizon."""
    check_transaction_type(transaction)
    if transaction.type == "once":
        return 1
    years = effective_end_year(transaction, duration_years) - transaction.start_year + 1
    return max(0, years) * 12
