"""Invested capital, German equity fund tax and inflation adjustment."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..config import TaxRules
from ..data_model import SimulationConfig, TaxResult, Transaction
from ..errors import ComputationError
from .periods import occurrences
from .simulator import round_half_up

logger = logging.getLogger(__name__)


def total_invested(config: SimulationConfig, transactions: Sequence[Transaction]) -> float:
    invested = config.initial_capital
    for transaction in transactions:
        invested += transaction.amount * occurrences(transaction, config.duration_years)
    return invested


def inflation_factor(duration_years: int, inflation_rate: float = TaxRules.inflation_rate) -> float:
    factor = (1.0 + inflation_rate) ** duration_years
    if not math.isfinite(factor) or factor <= 0:
        raise ComputationError(f"inflation factor for {duration_years} years at {inflation_rate!r} is not usable")
    return factor


def taxable_gains(gains: float, rules: TaxRules) -> float:
    """Gains left after the partial exemption and the flat allowance."""
    after_exemption = gains * (1.0 - rules.partial_exemption)
    return max(0.0, after_exemption - rules.allowance)


def calculate_tax(
    final_balance: float,
    invested: float,
    duration_years: int,
    rules: TaxRules | None = None,
) -> TaxResult:
    rules = rules or TaxRules()
    if not (math.isfinite(final_balance) and math.isfinite(invested)):
        raise ComputationError("final balance and invested capital must be finite")

    gains = max(0.0, final_balance - invested)
    tax = round_half_up(taxable_gains(gains, rules) * rules.rate)
    after_tax = final_balance - tax
    effective_rate = f"{tax / gains * 100:.1f}" if gains > 0 else "0.0"

    factor = inflation_factor(duration_years, rules.inflation_rate)
    in_todays_money = round_half_up((after_tax if tax > 0 else final_balance) / factor)
    logger.debug("gains %.2f taxed %d (effective %s%%)", gains, tax, effective_rate)
    return TaxResult(
        gains=gains,
        tax=tax,
        after_tax=after_tax,
        in_todays_money=in_todays_money,
        effective_rate=effective_rate,
    )
