# data_model/plan.py
from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import ValidationError


@dataclass(frozen=True)
class SimulationConfig:
    initial_capital: float
    duration_years: int
    reinvest_gains: bool = True

    def __post_init__(self) -> None:
        capital = float(self.initial_capital)
        if not math.isfinite(capital) or capital < 0:
            raise ValidationError("initial_capital: must be a finite number >= 0")
        try:
            whole = not isinstance(self.duration_years, bool) and float(self.duration_years) == int(self.duration_years)
        except (TypeError, ValueError, OverflowError):
            whole = False
        if not whole:
            raise ValidationError("duration_years: must be a whole number of years")
        if int(self.duration_years) < 1:
            raise ValidationError("duration_years: must be >= 1")
        object.__setattr__(self, "initial_capital", capital)
        object.__setattr__(self, "duration_years", int(self.duration_years))
        object.__setattr__(self, "reinvest_gains", bool(self.reinvest_gains))
