"""REST backend for portfolio growth projections."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

import pandas as pd
from flask import Flask, jsonify, request

from depot.config import TRUTHY, load_settings
from depot.data_model import (
    BENCHMARKS,
    SimulationConfig,
    Transaction,
    TransactionTableModel,
    YieldPhase,
    YieldPhaseTableModel,
    dataframe_to_phases,
    dataframe_to_transactions,
)
from depot.data_model.base import TableModel
from depot.data_model.phases import DEFAULT_DURATION_YEARS
from depot.engine import aggregate_period, project, simulate_monthly
from depot.errors import ComputationError, ValidationError

logger = logging.getLogger(__name__)

MAX_DURATION_YEARS = 100

app = Flask(__name__)
settings = load_settings()

PHASE_FIELDS = {
    "id": "ID",
    "rate": "Rate (%)",
    "startYear": "Start Year",
    "endYear": "End Year",
    "customDuration": "Custom Duration",
}

TRANSACTION_FIELDS = {
    "id": "ID",
    "amount": "Amount",
    "type": "Type",
    "startYear": "Start Year",
    "endYear": "End Year",
    "customDuration": "Custom Duration",
}


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_sanitize_json_compat(item) for item in value]
    return value


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [_sanitize_json_compat(dict(row)) for row in records]


def _model_payload(model: TableModel) -> Dict[str, Any]:
    columns: List[Dict[str, Any]] = []
    for col in model.columns:
        columns.append(
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "options": col.options or [],
                "min": col.min_value,
                "step": col.step,
                "format": col.format,
                "help": col.help,
            }
        )
    defaults = _sanitize_records(model.create_default_df().to_dict("records"))
    return {
        "name": model.name,
        "columns": columns,
        "defaults": defaults,
    }


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _rows_to_frame(rows: Any, fields: Dict[str, str], path: str) -> pd.DataFrame:
    if rows is None:
        return pd.DataFrame(columns=list(fields.values()))
    if not isinstance(rows, list):
        raise ValidationError(f"{path}: expected array")
    mapped = []
    for idx, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValidationError(f"{path}[{idx}]: expected object")
        # accept both API keys and editor column labels
        mapped.append({fields.get(key, key): value for key, value in row.items()})
    return pd.DataFrame(mapped, columns=list(fields.values()))


def parse_phases(rows: Any, duration_years: int) -> List[YieldPhase]:
    return dataframe_to_phases(_rows_to_frame(rows, PHASE_FIELDS, "phases"), duration_years)


def parse_transactions(rows: Any, duration_years: int) -> List[Transaction]:
    return dataframe_to_transactions(_rows_to_frame(rows, TRANSACTION_FIELDS, "transactions"), duration_years)


def parse_config(payload: dict) -> SimulationConfig:
    capital = _extract_payload_value(payload, "initialCapital", "initial_capital")
    duration = _extract_payload_value(payload, "durationYears", "duration_years")
    if capital is None:
        raise ValidationError("initialCapital: missing required field")
    if duration is None:
        raise ValidationError("durationYears: missing required field")
    try:
        capital = float(capital)
        duration = float(duration)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"initialCapital/durationYears: expected numbers ({exc})") from exc
    if duration > MAX_DURATION_YEARS:
        raise ValidationError(f"durationYears: must be <= {MAX_DURATION_YEARS}")
    reinvest = _extract_payload_value(payload, "reinvestGains", "reinvest_gains", default=True)
    if isinstance(reinvest, str):
        reinvest = reinvest.strip().lower() in TRUTHY
    return SimulationConfig(initial_capital=capital, duration_years=duration, reinvest_gains=bool(reinvest))


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.errorhandler(ValidationError)
def handle_validation_error(exc: ValidationError):
    logger.warning("rejected projection request: %s", exc)
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(ComputationError)
def handle_computation_error(exc: ComputationError):
    logger.warning("projection failed: %s", exc)
    return jsonify({"error": str(exc)}), 422


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    duration = max(1, request.args.get("durationYears", DEFAULT_DURATION_YEARS, type=int))
    payload = {
        "planDefaults": {
            "initialCapital": 30000.0,
            "durationYears": duration,
            "reinvestGains": True,
            "freq": "Y",
        },
        "phases": _model_payload(YieldPhaseTableModel(duration)),
        "transactions": _model_payload(TransactionTableModel(duration)),
        "freqOptions": [
            {"label": "Monthly", "value": "M"},
            {"label": "Quarterly", "value": "Q"},
            {"label": "Yearly", "value": "Y"},
        ],
        "taxRules": {
            "partialExemption": settings.tax.partial_exemption,
            "allowance": settings.tax.allowance,
            "rate": settings.tax.rate,
            "inflationRate": settings.tax.inflation_rate,
        },
    }
    return jsonify(payload)


@app.get("/api/benchmarks")
def list_benchmarks():
    return jsonify(
        {
            "benchmarks": [
                {
                    "key": bench.key,
                    "name": bench.name,
                    "ticker": bench.ticker,
                    "identifier": bench.identifier,
                    "expenseRatio": bench.expense_ratio,
                    "inceptionYear": bench.inception_year,
                    "returns": {str(year): value for year, value in bench.returns.items()},
                }
                for bench in BENCHMARKS
            ]
        }
    )


@app.post("/api/projection")
def run_projection():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")

    config = parse_config(payload)
    phases = parse_phases(payload.get("phases"), config.duration_years)
    transactions = parse_transactions(payload.get("transactions"), config.duration_years)

    result = project(config, phases, transactions, rules=settings.tax)
    body = result.to_dict()

    freq = request.args.get("freq")
    if freq:
        try:
            detail = aggregate_period(simulate_monthly(config, phases, transactions), freq=freq)
        except ValueError as exc:
            raise ValidationError(f"freq: {exc}") from exc
        body["periods"] = _sanitize_records(detail.to_dict(orient="records"))
        body["freq"] = freq.upper()
    return jsonify(_sanitize_json_compat(body))


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting projection API on %s:%d", settings.api_host, settings.api_port)
    app.run(host=settings.api_host, port=settings.api_port, debug=settings.api_debug)


if __name__ == "__main__":
    main()
