"""
Projection configuration.
Input defaults live on engine.parameters.InputParameters; this only holds
the knobs that shape the projection and its display.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionConfig:
    # cumulative savings columns (Yr 1..N)
    years_shown: int = 5

    # payback search stops after this many escalated years
    max_payback_years: int = 100

    # display
    currency_symbol: str = "£"
    decimals: int = 2
