from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class YearResult:
    year: int
    balance: int
    rate: float
    deposits: int
    returns: int


@dataclass(frozen=True)
class TaxResult:
    gains: float
    tax: int
    after_tax: float
    in_todays_money: int
    effective_rate: str


@dataclass(frozen=True)
class BenchmarkResult:
    key: str
    name: str
    ticker: str
    identifier: str
    expense_ratio: float
    cagr: float | None
    total_return: float
    years_available: int
    years_requested: int
    from_year: int
    to_year: int

    @property
    def is_partial(self) -> bool:
        return self.years_available < self.years_requested


@dataclass(frozen=True)
class ProjectionResult:
    years: List[YearResult]
    total_invested: float
    tax: TaxResult
    benchmarks: List[BenchmarkResult] = field(default_factory=list)

    @property
    def final_balance(self) -> int:
        return self.years[-1].balance

    def to_dict(self) -> dict[str, Any]:
        return {
            "years": [asdict(row) for row in self.years],
            "totalInvested": self.total_invested,
            "finalBalance": self.final_balance,
            "tax": {
                "gains": self.tax.gains,
                "tax": self.tax.tax,
                "afterTax": self.tax.after_tax,
                "inTodaysMoney": self.tax.in_todays_money,
                "effectiveRate": self.tax.effective_rate,
            },
            "benchmarks": [
                {
                    "key": bench.key,
                    "name": bench.name,
                    "ticker": bench.ticker,
                    "identifier": bench.identifier,
                    "expenseRatio": bench.expense_ratio,
                    "cagr": bench.cagr,
                    "totalReturn": bench.total_return,
                    "yearsAvailable": bench.years_available,
                    "yearsRequested": bench.years_requested,
                    "fromYear": bench.from_year,
                    "toYear": bench.to_year,
                    "partial": bench.is_partial,
                }
                for bench in self.benchmarks
            ],
        }
