import logging

import pytest

from depot.config import Settings, TaxRules, load_settings
from depot.errors import ValidationError


def test_defaults_without_environment():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.tax == TaxRules(partial_exemption=0.30, allowance=1000.0, rate=0.26375, inflation_rate=0.02)
    assert settings.log_level == logging.INFO


def test_environment_overrides():
    settings = load_settings(
        {
            "DEPOT_TAX_ALLOWANCE": "2000",
            "DEPOT_INFLATION_RATE": "0.03",
            "DEPOT_LOG_LEVEL": "debug",
            "DEPOT_API_PORT": "9001",
            "DEPOT_API_DEBUG": "yes",
        }
    )

    assert settings.tax.allowance == 2000.0
    assert settings.tax.inflation_rate == 0.03
    assert settings.tax.partial_exemption == 0.30
    assert settings.log_level == logging.DEBUG
    assert settings.api_port == 9001
    assert settings.api_debug is True


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("DEPOT_TAX_RATE", "0.25")

    assert load_settings().tax.rate == 0.25


@pytest.mark.parametrize(
    "env",
    [
        {"DEPOT_TAX_RATE": "a lot"},
        {"DEPOT_API_PORT": "80.5"},
        {"DEPOT_PARTIAL_EXEMPTION": "1.5"},
        {"DEPOT_TAX_ALLOWANCE": "-1"},
        {"DEPOT_LOG_LEVEL": "chatty"},
    ],
)
def test_invalid_values_are_rejected(env):
    with pytest.raises(ValidationError):
        load_settings(env)
