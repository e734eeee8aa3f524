import pytest

from depot.data_model import SimulationConfig, Transaction, YieldPhase


@pytest.fixture
def base_config() -> SimulationConfig:
    return SimulationConfig(initial_capital=30000, duration_years=15, reinvest_gains=True)


@pytest.fixture
def base_phases() -> list:
    return [YieldPhase(id=1, start_year=1, end_year=15, rate=6.0)]


@pytest.fixture
def base_transactions() -> list:
    return [Transaction(id=1, amount=500, type="monthly", start_year=1, end_year=15)]
