from __future__ import annotations

import logging
from typing import Sequence

from ..config import TaxRules
from ..data_model import BENCHMARKS, Benchmark, ProjectionResult, SimulationConfig, Transaction, YieldPhase
from .benchmarks import compare_benchmarks
from .metrics import calculate_tax, total_invested
from .simulator import simulate

logger = logging.getLogger(__name__)


def project(
    config: SimulationConfig,
    phases: Sequence[YieldPhase],
    transactions: Sequence[Transaction],
    rules: TaxRules | None = None,
    benchmarks: Sequence[Benchmark] = BENCHMARKS,
) -> ProjectionResult:
    """Run the simulation and derive tax, real value and benchmark figures from it."""
    years = simulate(config, phases, transactions)
    invested = total_invested(config, transactions)
    tax = calculate_tax(years[-1].balance, invested, config.duration_years, rules)
    logger.info(
        "projected %d years: final balance %d, invested %.2f, tax %d",
        config.duration_years,
        years[-1].balance,
        invested,
        tax.tax,
    )
    return ProjectionResult(
        years=years,
        total_invested=invested,
        tax=tax,
        benchmarks=compare_benchmarks(config.duration_years, benchmarks),
    )
