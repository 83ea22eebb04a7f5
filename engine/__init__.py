"""
Financial projection engine — savings math, option catalog, and per-option runner.
"""

from .parameters import InputParameters, Option, ProjectionResult
from .catalog import OPTION_CATALOG, OptionSpec, build_options
from .savings import (
    compute_unit_cost,
    compute_annual_saving,
    compute_cumulative_savings,
    compute_payback_years,
)
from .runner import compute_option_result, run_projection

__all__ = [
    "InputParameters",
    "Option",
    "ProjectionResult",
    "OPTION_CATALOG",
    "OptionSpec",
    "build_options",
    "compute_unit_cost",
    "compute_annual_saving",
    "compute_cumulative_savings",
    "compute_payback_years",
    "compute_option_result",
    "run_projection",
]
