import math

import pytest

from depot.config import TaxRules
from depot.data_model import SimulationConfig, Transaction
from depot.engine import project
from depot.engine.metrics import calculate_tax, inflation_factor, taxable_gains, total_invested


def test_total_invested_counts_each_occurrence(base_config, base_transactions):
    assert total_invested(base_config, base_transactions) == 30000 + 500 * 180


def test_total_invested_respects_custom_windows_and_withdrawals():
    config = SimulationConfig(initial_capital=1000, duration_years=10)
    txs = [
        Transaction(id=1, amount=100, type="monthly", start_year=3, end_year=5, custom_duration=True),
        Transaction(id=2, amount=2500, type="once", start_year=4),
        Transaction(id=3, amount=-50, type="monthly", start_year=9, end_year=10, custom_duration=True),
    ]

    assert total_invested(config, txs) == 1000 + 100 * 36 + 2500 - 50 * 24


def test_no_gains_means_no_tax():
    result = calculate_tax(9000, 10000, 10)

    assert result.gains == 0
    assert result.tax == 0
    assert result.effective_rate == "0.0"
    assert result.after_tax == 9000
    assert result.in_todays_money == math.floor(9000 / 1.02**10 + 0.5)


def test_tax_on_five_thousand_gains():
    result = calculate_tax(15000, 10000, 10)

    assert result.gains == 5000
    assert result.tax == 659
    assert result.after_tax == 15000 - 659
    assert result.effective_rate == "13.2"
    assert result.in_todays_money == math.floor((15000 - 659) / 1.02**10 + 0.5)


def test_gains_below_allowance_are_tax_free():
    result = calculate_tax(11000, 10000, 5)

    assert result.gains == 1000
    assert result.tax == 0
    assert result.effective_rate == "0.0"
    assert result.in_todays_money == math.floor(11000 / 1.02**5 + 0.5)


def test_taxable_gains_apply_exemption_then_allowance():
    rules = TaxRules()

    assert taxable_gains(5000, rules) == pytest.approx(2500)
    assert taxable_gains(1000, rules) == 0.0


def test_custom_tax_rules():
    rules = TaxRules(partial_exemption=0.0, allowance=0.0, rate=0.25, inflation_rate=0.0)

    result = calculate_tax(14000, 10000, 3, rules)

    assert result.tax == 1000
    assert result.effective_rate == "25.0"
    assert result.in_todays_money == 13000


def test_inflation_factor():
    assert inflation_factor(1) == pytest.approx(1.02)
    assert inflation_factor(15) == pytest.approx(1.02**15)
    assert inflation_factor(10, 0.0) == 1.0


def test_project_runs_all_stages(base_config, base_phases, base_transactions):
    result = project(base_config, base_phases, base_transactions)

    assert len(result.years) == 15
    assert result.total_invested == 120000
    assert result.tax.gains == result.final_balance - 120000
    assert result.tax.tax > 0
    assert len(result.benchmarks) == 5
    payload = result.to_dict()
    assert payload["finalBalance"] == result.years[-1].balance
    assert payload["tax"]["effectiveRate"] == result.tax.effective_rate
