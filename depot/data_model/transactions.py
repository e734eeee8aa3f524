from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Literal

import pandas as pd

from ..errors import ValidationError
from .base import ColumnDefinition, TableModel, cell_bool, cell_float, cell_int, is_blank
from .phases import DEFAULT_DURATION_YEARS

TRANSACTION_TYPES = ["monthly", "once"]
DEFAULT_MONTHLY_AMOUNT = 500.0


@dataclass(frozen=True)
class Transaction:
    id: int | str
    amount: float
    type: Literal["monthly", "once"]
    start_year: int = 1
    end_year: int = 1
    custom_duration: bool = False


def sync_transaction_duration(transaction: Transaction, duration_years: int) -> Transaction:
    """Stretch a non-custom monthly transaction over the whole horizon."""
    if transaction.custom_duration or transaction.type != "monthly":
        return transaction
    return replace(transaction, start_year=1, end_year=duration_years)


def _transaction_defaults(duration_years: int) -> List[dict[str, float | int | str | bool]]:
    return [
        {
            "ID": 1,
            "Amount": DEFAULT_MONTHLY_AMOUNT,
            "Type": "monthly",
            "Start Year": 1,
            "End Year": duration_years,
            "Custom Duration": False,
        }
    ]


class TransactionTableModel(TableModel):
    def __init__(self, duration_years: int = DEFAULT_DURATION_YEARS) -> None:
        columns = [
            ColumnDefinition("ID", "ID", kind="number", default=1, min_value=1, step=1),
            ColumnDefinition(
                "Amount",
                "Amount",
                kind="number",
                default=0.0,
                step=50.0,
                format="%.2f",
                help="Negative amounts are withdrawals",
            ),
            ColumnDefinition("Type", "Type", kind="select", default="monthly", options=TRANSACTION_TYPES),
            ColumnDefinition("Start Year", "Start Year", kind="number", default=1, min_value=1, step=1),
            ColumnDefinition(
                "End Year",
                "End Year",
                kind="number",
                default=duration_years,
                min_value=1,
                step=1,
                help="Ignored for one-time deposits",
            ),
            ColumnDefinition("Custom Duration", "Custom Duration", kind="checkbox", default=False),
        ]
        super().__init__("transactions", columns, _transaction_defaults(duration_years))


def dataframe_to_transactions(df: pd.DataFrame, duration_years: int) -> List[Transaction]:
    rows: List[Transaction] = []
    for idx, row in enumerate(df.to_dict("records")):
        path = f"transactions[{idx}]"
        amount = cell_float(row, "Amount", path, default=0.0)
        if amount == 0.0:
            continue
        kind = "monthly" if is_blank(row.get("Type")) else str(row.get("Type")).strip().lower()
        if kind not in TRANSACTION_TYPES:
            raise ValidationError(f"{path}.Type: '{kind}' is not valid; expected one of [{', '.join(TRANSACTION_TYPES)}]")
        custom = cell_bool(row, "Custom Duration")
        start_year = cell_int(row, "Start Year", path, default=1)
        if kind == "once":
            end_year = start_year
        elif custom:
            end_year = cell_int(row, "End Year", path, default=duration_years)
        else:
            start_year, end_year = 1, duration_years
        transaction_id = row.get("ID")
        rows.append(
            Transaction(
                id=cell_int(row, "ID", path) if not is_blank(transaction_id) else idx + 1,
                amount=amount,
                type=kind,
                start_year=start_year,
                end_year=end_year,
                custom_duration=custom,
            )
        )
    return rows
