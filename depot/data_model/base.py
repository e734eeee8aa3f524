from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd

from ..errors import ValidationError


@dataclass
class ColumnDefinition:
    """Lightweight schema descriptor used by table editors."""

    field: str
    label: str
    kind: str = "text"  # text | number | select | checkbox
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None


@dataclass
class TableModel:
    """Container for a table schema plus default rows."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows)
        seed = {col.field: col.default for col in self.columns}
        return pd.DataFrame([seed])


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def cell_float(row: dict, key: str, path: str, default: float | None = None) -> float:
    value = row.get(key)
    if is_blank(value):
        if default is None:
            raise ValidationError(f"{path}.{key}: value is required")
        return default
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{path}.{key}: '{value}' is not a number") from exc


def cell_int(row: dict, key: str, path: str, default: int | None = None) -> int:
    number = cell_float(row, key, path, None if default is None else float(default))
    if not number.is_integer():
        raise ValidationError(f"{path}.{key}: '{row.get(key)}' is not a whole year")
    return int(number)


def cell_bool(row: dict, key: str) -> bool:
    value = row.get(key)
    if is_blank(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on", "x"}
    return bool(value)
