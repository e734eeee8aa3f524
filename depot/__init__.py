"""Portfolio growth projection: rate phases, deposits, tax and benchmarks."""

__version__ = "0.1.0"
