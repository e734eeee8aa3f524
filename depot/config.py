"""Environment-driven settings.

Env vars:
  DEPOT_PARTIAL_EXEMPTION=0.30   -> tax-exempt share of equity fund gains
  DEPOT_TAX_ALLOWANCE=1000       -> flat allowance deducted before the tax rate
  DEPOT_TAX_RATE=0.26375         -> capital gains rate incl. solidarity surcharge
  DEPOT_INFLATION_RATE=0.02      -> annual inflation for the real-value figure
  DEPOT_LOG_LEVEL=INFO           -> logging level for the API process
  DEPOT_API_HOST=127.0.0.1       -> dev server bind address
  DEPOT_API_PORT=8000            -> dev server port
  DEPOT_API_DEBUG=0              -> Flask debug mode
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from .errors import ValidationError

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TaxRules:
    partial_exemption: float = 0.30
    allowance: float = 1000.0
    rate: float = 0.26375
    inflation_rate: float = 0.02


@dataclass(frozen=True)
class Settings:
    tax: TaxRules = field(default_factory=TaxRules)
    log_level: int = logging.INFO
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_debug: bool = False


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValidationError(f"{key}: expected a number, got {raw!r}") from exc


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{key}: expected an integer, got {raw!r}") from exc


def _env_log_level(env: Mapping[str, str], key: str, default: int) -> int:
    raw = str(env.get(key, "")).strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValidationError(f"{key}: unknown log level {raw!r}")
    return level


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    defaults = TaxRules()
    tax = TaxRules(
        partial_exemption=_env_float(env, "DEPOT_PARTIAL_EXEMPTION", defaults.partial_exemption),
        allowance=_env_float(env, "DEPOT_TAX_ALLOWANCE", defaults.allowance),
        rate=_env_float(env, "DEPOT_TAX_RATE", defaults.rate),
        inflation_rate=_env_float(env, "DEPOT_INFLATION_RATE", defaults.inflation_rate),
    )
    if not 0.0 <= tax.partial_exemption <= 1.0:
        raise ValidationError("DEPOT_PARTIAL_EXEMPTION: must be between 0 and 1")
    if tax.allowance < 0:
        raise ValidationError("DEPOT_TAX_ALLOWANCE: must be >= 0")
    if tax.inflation_rate <= -1.0:
        raise ValidationError("DEPOT_INFLATION_RATE: must be > -1")
    return Settings(
        tax=tax,
        log_level=_env_log_level(env, "DEPOT_LOG_LEVEL", logging.INFO),
        api_host=str(env.get("DEPOT_API_HOST") or "127.0.0.1"),
        api_port=_env_int(env, "DEPOT_API_PORT", 8000),
        api_debug=str(env.get("DEPOT_API_DEBUG", "")).lower() in TRUTHY,
    )
