"""
Records passed through the projection engine.

InputParameters and Option are rebuilt from caller values on every
recomputation; ProjectionResult is derived and never cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from core.utils import is_never


@dataclass(frozen=True)
class InputParameters:
    """
    Caller-supplied usage and tariff inputs.

    Volumes are litres per flush, unit costs are per 1000 litres (m³),
    percentages are 0-100. Defaults are the suggested form values.
    """

    baseline_flush_volume: float = 9.0
    uses_per_day: float = 120
    days_per_week: float = 7
    weeks_per_year: float = 52
    water_unit_cost: float = 2.69
    sewer_unit_cost: float = 2.34
    sewer_billed_percent: float = 90.0
    inflation_rate_percent: float = 5.0

    # user-adjustable replacement volumes for the "PAST" and "Analogue" options
    option_b_volume: float = 3.0
    option_c_volume: float = 4.0

    @property
    def total_annual_uses(self) -> float:
        return self.uses_per_day * self.days_per_week * self.weeks_per_year

    @property
    def inflation_rate(self) -> float:
        return self.inflation_rate_percent / 100


@dataclass(frozen=True)
class Option:
    label: str
    replacement_volume: float
    capital_cost: float


@dataclass(frozen=True)
class ProjectionResult:
    """Financial outcome of one option against the baseline."""

    label: str
    annual_saving: float
    payback_years: float  # core.utils.NEVER when annual_saving <= 0
    cumulative_savings_by_year: Tuple[float, ...]

    # carried from the Option for display
    replacement_volume: float = float("nan")
    capital_cost: float = float("nan")

    @property
    def pays_back(self) -> bool:
        return not is_never(self.payback_years)
