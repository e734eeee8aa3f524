from .benchmarks import BENCHMARKS, Benchmark, get_benchmark, latest_year
from .phases import YieldPhase, YieldPhaseTableModel, dataframe_to_phases, sync_phase_duration
from .plan import SimulationConfig
from .results import BenchmarkResult, ProjectionResult, TaxResult, YearResult
from .transactions import (
    TRANSACTION_TYPES,
    Transaction,
    TransactionTableModel,
    dataframe_to_transactions,
    sync_transaction_duration,
)

__all__ = [
    "BENCHMARKS",
    "TRANSACTION_TYPES",
    "Benchmark",
    "BenchmarkResult",
    "ProjectionResult",
    "SimulationConfig",
    "TaxResult",
    "Transaction",
    "TransactionTableModel",
    "YearResult",
    "YieldPhase",
    "YieldPhaseTableModel",
    "dataframe_to_phases",
    "dataframe_to_transactions",
    "get_benchmark",
    "latest_year",
    "sync_phase_duration",
    "sync_transaction_duration",
]
