from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Iterator, List, Sequence

import pandas as pd

from ..data_model import SimulationConfig, Transaction, YearResult, YieldPhase
from ..errors import ComputationError
from .periods import active_transactions, check_transactions, resolve_rate

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class MonthStep:
    year: int
    month: int
    rate: float
    deposits: float
    gain: float
    principal: float
    total_gains: float
    reported_balance: float


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        raise ComputationError(f"cannot round non-finite value {value!r}")
    floor = math.floor(value)
    return int(floor + 1 if value - floor >= 0.5 else floor)


def monthly_rate(annual_percent: float) -> float:
    """Effective monthly rate equivalent to an annual percent rate."""
    annual = annual_percent / 100.0
    if not math.isfinite(annual):
        raise ComputationError(f"annual rate {annual_percent!r}% is not finite")
    if annual < -1.0:
        raise ComputationError(f"annual rate {annual_percent}% is below -100% and cannot be compounded monthly")
    return (1.0 + annual) ** (1.0 / MONTHS_PER_YEAR) - 1.0


def _ensure_finite(step: MonthStep) -> None:
    for name in ("principal", "total_gains", "gain", "deposits", "reported_balance"):
        value = getattr(step, name)
        if not math.isfinite(value):
            raise ComputationError(f"year {step.year} month {step.month}: {name} is not finite ({value!r})")


def iter_months(
    config: SimulationConfig,
    phases: Sequence[YieldPhase],
    transactions: Sequence[Transaction],
) -> Iterator[MonthStep]:
    check_transactions(transactions)
    balance = config.initial_capital
    total_gains = 0.0

    for year in range(1, config.duration_years + 1):
        rate = resolve_rate(phases, year)
        rate_m = monthly_rate(rate)
        active = active_transactions(transactions, year, config.duration_years)
        logger.debug("year %d: rate %.4f%%, %d active transactions", year, rate, len(active))

        for month in range(1, MONTHS_PER_YEAR + 1):
            deposits = 0.0
            for transaction in active:
                if transaction.type == "monthly" or month == 1:
                    balance += transaction.amount
                    deposits += transaction.amount

            gain = balance * rate_m
            total_gains += gain
            if config.reinvest_gains:
                balance += gain

            reported = balance if config.reinvest_gains else balance + total_gains
            step = MonthStep(
                year=year,
                month=month,
                rate=rate,
                deposits=deposits,
                gain=gain,
                principal=balance,
                total_gains=total_gains,
                reported_balance=reported,
            )
            _ensure_finite(step)
            yield step


def simulate(
    config: SimulationConfig,
    phases: Sequence[YieldPhase],
    transactions: Sequence[Transaction],
) -> List[YearResult]:
    """Compound the balance month by month and report one row per year."""
    logger.debug(
        "simulating %d years from %.2f (reinvest=%s, %d phases, %d transactions)",
        config.duration_years,
        config.initial_capital,
        config.reinvest_gains,
        len(phases),
        len(transactions),
    )
    results: List[YearResult] = []
    year_deposits = 0.0
    year_returns = 0.0
    for step in iter_months(config, phases, transactions):
        year_deposits += step.deposits
        year_returns += step.gain
        if step.month != MONTHS_PER_YEAR:
            continue
        results.append(
            YearResult(
                year=step.year,
                balance=round_half_up(step.reported_balance),
                rate=step.rate,
                deposits=round_half_up(year_deposits),
                returns=round_half_up(year_returns),
            )
        )
        year_deposits = 0.0
        year_returns = 0.0
    return results


def simulate_monthly(
    config: SimulationConfig,
    phases: Sequence[YieldPhase],
    transactions: Sequence[Transaction],
) -> pd.DataFrame:
    records = []
    for index, step in enumerate(iter_months(config, phases, transactions)):
        records.append(
            {
                "MonthIndex": index,
                "Year": step.year,
                "MonthInYear": step.month,
                "Rate": step.rate,
                "Deposits": step.deposits,
                "Returns": step.gain,
                "Principal": step.principal,
                "CumulativeGains": step.total_gains,
                "Balance": step.reported_balance,
            }
        )
    return pd.DataFrame(records)


def results_to_frame(results: Sequence[YearResult]) -> pd.DataFrame:
    columns = ["year", "balance", "rate", "deposits", "returns"]
    return pd.DataFrame([asdict(row) for row in results], columns=columns)
