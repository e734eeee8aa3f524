from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

import pandas as pd

from .base import ColumnDefinition, TableModel, cell_bool, cell_float, cell_int, is_blank

DEFAULT_DURATION_YEARS = 15
DEFAULT_RATE = 6.0


@dataclass(frozen=True)
class YieldPhase:
    id: int | str
    start_year: int
    end_year: int
    rate: float
    custom_duration: bool = False


def sync_phase_duration(phase: YieldPhase, duration_years: int) -> YieldPhase:
    """Stretch a non-custom phase over the whole horizon."""
    if phase.custom_duration:
        return phase
    return replace(phase, start_year=1, end_year=duration_years)


def _phase_defaults(duration_years: int) -> List[dict[str, float | int | bool]]:
    return [
        {
            "ID": 1,
            "Rate (%)": DEFAULT_RATE,
            "Start Year": 1,
            "End Year": duration_years,
            "Custom Duration": False,
        }
    ]


class YieldPhaseTableModel(TableModel):
    def __init__(self, duration_years: int = DEFAULT_DURATION_YEARS) -> None:
        columns = [
            ColumnDefinition("ID", "ID", kind="number", default=1, min_value=1, step=1),
            ColumnDefinition(
                "Rate (%)",
                "Annual Return (%)",
                kind="number",
                default=DEFAULT_RATE,
                step=0.5,
                format="%.2f",
                help="May be negative",
            ),
            ColumnDefinition("Start Year", "Start Year", kind="number", default=1, min_value=1, step=1),
            ColumnDefinition("End Year", "End Year", kind="number", default=duration_years, min_value=1, step=1),
            ColumnDefinition(
                "Custom Duration",
                "Custom Duration",
                kind="checkbox",
                default=False,
                help="Unchecked phases span the whole horizon",
            ),
        ]
        super().__init__("phases", columns, _phase_defaults(duration_years))


def dataframe_to_phases(df: pd.DataFrame, duration_years: int) -> List[YieldPhase]:
    phases: List[YieldPhase] = []
    for idx, row in enumerate(df.to_dict("records")):
        if is_blank(row.get("Rate (%)")):
            continue
        path = f"phases[{idx}]"
        custom = cell_bool(row, "Custom Duration")
        phase_id = row.get("ID")
        phase = YieldPhase(
            id=cell_int(row, "ID", path) if not is_blank(phase_id) else idx + 1,
            start_year=cell_int(row, "Start Year", path, default=1) if custom else 1,
            end_year=cell_int(row, "End Year", path, default=duration_years) if custom else duration_years,
            rate=cell_float(row, "Rate (%)", path),
            custom_duration=custom,
        )
        phases.append(phase)
    return phases
