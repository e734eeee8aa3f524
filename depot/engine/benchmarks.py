from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..data_model import BENCHMARKS, Benchmark, BenchmarkResult, latest_year

logger = logging.getLogger(__name__)


def benchmark_cagr(benchmark: Benchmark, duration_years: int, end_year: int) -> BenchmarkResult:
    """Compound the benchmark over the trailing ``duration_years`` ending at ``end_year``.

    Years missing from the table are skipped rather than counted as zero, so
    ``years_available`` can be lower than ``years_requested``.
    """
    start_year = end_year - duration_years + 1
    cumulative = 1.0
    used = 0
    for year in range(start_year, end_year + 1):
        annual = benchmark.returns.get(year)
        if annual is None:
            continue
        cumulative *= 1.0 + annual / 100.0
        used += 1

    cagr = (math.pow(cumulative, 1.0 / used) - 1.0) * 100.0 if used > 0 else None
    if used < duration_years:
        logger.info(
            "%s: only %d of %d requested years available (%d-%d)",
            benchmark.name,
            used,
            duration_years,
            start_year,
            end_year,
        )
    return BenchmarkResult(
        key=benchmark.key,
        name=benchmark.name,
        ticker=benchmark.ticker,
        identifier=benchmark.identifier,
        expense_ratio=benchmark.expense_ratio,
        cagr=cagr,
        total_return=(cumulative - 1.0) * 100.0,
        years_available=used,
        years_requested=duration_years,
        from_year=start_year,
        to_year=end_year,
    )


def compare_benchmarks(
    duration_years: int,
    benchmarks: Sequence[Benchmark] = BENCHMARKS,
) -> List[BenchmarkResult]:
    if not benchmarks:
        return []
    end_year = latest_year(tuple(benchmarks))
    return [benchmark_cagr(bench, duration_years, end_year) for bench in benchmarks]
