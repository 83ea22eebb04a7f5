"""
Deterministic savings math — unit cost, annual saving, escalated cumulative
savings and payback period.

Key rules:
  1. Unit cost blends the water charge with the billed share of the sewer charge
  2. Savings escalate by (1 + r) per year, r = inflation as a fraction
  3. r == 0 uses the exact undiscounted forms (a * y, capex / a)
  4. Nothing here raises for numeric input: overflow and zero division surface
     as inf / nan, which the report layer renders as a placeholder
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from core.utils import NEVER

logger = logging.getLogger(__name__)


def compute_unit_cost(
    water_unit_cost: float,
    sewer_unit_cost: float,
    sewer_billed_percent: float,
) -> float:
    """Blended marginal cost per litre; tariffs are quoted per 1000 litres."""
    return water_unit_cost / 1000 + (sewer_unit_cost / 1000) * (sewer_billed_percent / 100)


def compute_annual_saving(
    baseline_flush_volume: float,
    replacement_volume: float,
    unit_cost: float,
    total_annual_uses: float,
) -> float:
    """Negative when the replacement uses more than the baseline (a net cost)."""
    return (baseline_flush_volume - replacement_volume) * unit_cost * total_annual_uses


def compute_cumulative_savings(
    annual_saving: float,
    inflation_rate: float,
    years_shown: int = 5,
) -> Tuple[float, ...]:
    """
    Running total of escalated annual savings for years 1..years_shown.

    Year y sums a * (1+r)^(k-1) for k = 1..y, evaluated in closed form as
    a * (1 - (1+r)^y) / (1 - (1+r)).
    """
    years = np.arange(1, years_shown + 1, dtype=float)
    with np.errstate(all="ignore"):
        if inflation_rate == 0:
            values = annual_saving * years
        else:
            growth = 1.0 + inflation_rate
            values = annual_saving * ((1.0 - np.power(growth, years)) / (1.0 - growth))
    return tuple(float(v) for v in values)


def compute_payback_years(
    annual_saving: float,
    capital_cost: float,
    inflation_rate: float,
    max_years: int = 100,
) -> float:
    """
    Years (fractional) until cumulative escalated savings cover capital_cost.

    Returns NEVER when there is no saving. With escalation, whole years are
    accumulated until the total reaches capital_cost, then the final year is
    interpolated linearly. If max_years is hit first the same interpolation
    is applied to the boundary year, giving an estimate past the horizon.
    """
    if annual_saving <= 0:
        return NEVER

    with np.errstate(all="ignore"):
        if inflation_rate == 0:
            return float(np.float64(capital_cost) / annual_saving)

        growth = np.float64(1.0) + inflation_rate
        cumulative = np.float64(0.0)
        year = 0
        while cumulative < capital_cost and year < max_years:
            cumulative += annual_saving * growth ** year
            year += 1

        if cumulative == capital_cost:
            return float(year)

        if cumulative < capital_cost:
            logger.warning(
                "Payback not reached within %d years (saving=%.4f, capex=%.2f); "
                "returning boundary estimate.",
                max_years, annual_saving, capital_cost,
            )

        contribution = annual_saving * growth ** (year - 1)
        previous = cumulative - contribution
        payback = (year - 1) + (capital_cost - previous) / contribution

    return float(payback)
