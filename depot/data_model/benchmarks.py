"""Historical benchmark index returns.

Annual total returns in percent, keyed by calendar year. MSCI figures are net
returns in USD; the DAX is a performance index and therefore already includes
dividends. The FTSE All-World tracker only has returns from its first full
calendar year, so long horizons get partial coverage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping


@dataclass(frozen=True)
class Benchmark:
    key: str
    name: str
    ticker: str
    identifier: str
    expense_ratio: float
    inception_year: int
    returns: Mapping[int, float] = field(default_factory=dict)


def _frozen(values: dict[int, float]) -> Mapping[int, float]:
    return MappingProxyType(dict(sorted(values.items())))


_MSCI_WORLD = {
    2000: -13.18, 2001: -16.82, 2002: -19.89, 2003: 33.11, 2004: 14.72,
    2005: 9.49, 2006: 20.07, 2007: 9.04, 2008: -40.71, 2009: 29.99,
    2010: 11.76, 2011: -5.54, 2012: 15.83, 2013: 26.68, 2014: 4.94,
    2015: -0.87, 2016: 7.51, 2017: 22.40, 2018: -8.71, 2019: 27.67,
    2020: 15.90, 2021: 21.82, 2022: -18.14, 2023: 23.79, 2024: 18.67,
}

_SP_500 = {
    2000: -9.10, 2001: -11.89, 2002: -22.10, 2003: 28.68, 2004: 10.88,
    2005: 4.91, 2006: 15.79, 2007: 5.49, 2008: -37.00, 2009: 26.46,
    2010: 15.06, 2011: 2.11, 2012: 16.00, 2013: 32.39, 2014: 13.69,
    2015: 1.38, 2016: 11.96, 2017: 21.83, 2018: -4.38, 2019: 31.49,
    2020: 18.40, 2021: 28.71, 2022: -18.11, 2023: 26.29, 2024: 25.02,
}

_FTSE_ALL_WORLD = {
    2013: 22.80, 2014: 4.16, 2015: -2.36, 2016: 7.86, 2017: 23.97,
    2018: -9.41, 2019: 26.60, 2020: 16.25, 2021: 18.54, 2022: -18.36,
    2023: 22.20, 2024: 17.49,
}

_DAX = {
    2000: -7.54, 2001: -19.79, 2002: -43.94, 2003: 37.08, 2004: 7.34,
    2005: 27.07, 2006: 21.98, 2007: 22.29, 2008: -40.37, 2009: 23.85,
    2010: 16.06, 2011: -14.69, 2012: 29.06, 2013: 25.48, 2014: 2.65,
    2015: 9.56, 2016: 6.87, 2017: 12.51, 2018: -18.26, 2019: 25.48,
    2020: 3.55, 2021: 15.79, 2022: -12.35, 2023: 20.31, 2024: 18.85,
}

_MSCI_EM = {
    2000: -30.83, 2001: -2.62, 2002: -6.16, 2003: 55.82, 2004: 25.55,
    2005: 34.00, 2006: 32.14, 2007: 39.39, 2008: -53.33, 2009: 78.51,
    2010: 18.88, 2011: -18.42, 2012: 18.22, 2013: -2.60, 2014: -2.19,
    2015: -14.92, 2016: 11.19, 2017: 37.28, 2018: -14.57, 2019: 18.42,
    2020: 18.31, 2021: -2.54, 2022: -20.09, 2023: 9.83, 2024: 7.50,
}

BENCHMARKS: Final[tuple[Benchmark, ...]] = (
    Benchmark(
        key="msci_world",
        name="MSCI World",
        ticker="EUNL",
        identifier="IE00B4L5Y983",
        expense_ratio=0.20,
        inception_year=2009,
        returns=_frozen(_MSCI_WORLD),
    ),
    Benchmark(
        key="sp500",
        name="S&P 500",
        ticker="SXR8",
        identifier="IE00B5BMR087",
        expense_ratio=0.07,
        inception_year=2010,
        returns=_frozen(_SP_500),
    ),
    Benchmark(
        key="ftse_all_world",
        name="FTSE All-World",
        ticker="VWRL",
        identifier="IE00B3RBWM25",
        expense_ratio=0.22,
        inception_year=2012,
        returns=_frozen(_FTSE_ALL_WORLD),
    ),
    Benchmark(
        key="dax",
        name="DAX",
        ticker="EXS1",
        identifier="DE0005933931",
        expense_ratio=0.16,
        inception_year=2000,
        returns=_frozen(_DAX),
    ),
    Benchmark(
        key="msci_em",
        name="MSCI Emerging Markets",
        ticker="IS3N",
        identifier="IE00BKM4GZ66",
        expense_ratio=0.18,
        inception_year=2014,
        returns=_frozen(_MSCI_EM),
    ),
)


def latest_year(benchmarks: tuple[Benchmark, ...] = BENCHMARKS) -> int:
    return max(year for bench in benchmarks for year in bench.returns)


def get_benchmark(key: str) -> Benchmark:
    for bench in BENCHMARKS:
        if bench.key == key:
            return bench
    raise KeyError(f"Unknown benchmark: {key}")
