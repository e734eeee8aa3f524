from .aggregate import aggregate_period
from .benchmarks import benchmark_cagr, compare_benchmarks
from .metrics import calculate_tax, inflation_factor, taxable_gains, total_invested
from .periods import (
    active_transactions,
    check_transaction_type,
    effective_end_year,
    is_active,
    occurrences,
    phase_covers,
    resolve_rate,
)
from .projection import project
from .simulator import monthly_rate, results_to_frame, round_half_up, simulate, simulate_monthly

__all__ = [
    "active_transactions",
    "aggregate_period",
    "benchmark_cagr",
    "calculate_tax",
    "check_transaction_type",
    "compare_benchmarks",
    "effective_end_year",
    "inflation_factor",
    "is_active",
    "monthly_rate",
    "occurrences",
    "phase_covers",
    "project",
    "resolve_rate",
    "results_to_frame",
    "round_half_up",
    "simulate",
    "simulate_monthly",
    "taxable_gains",
    "total_invested",
]
