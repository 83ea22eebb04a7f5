"""
Projection runner — applies the savings math uniformly to every catalog option.

Stateless: each call rebuilds options from the inputs and returns fresh
ProjectionResult records in catalog order.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from core.config import ProjectionConfig

from .catalog import build_options
from .parameters import InputParameters, Option, ProjectionResult
from .savings import (
    compute_annual_saving,
    compute_cumulative_savings,
    compute_payback_years,
    compute_unit_cost,
)

logger = logging.getLogger(__name__)


def compute_option_result(
    inputs: InputParameters,
    option: Option,
    config: Optional[ProjectionConfig] = None,
) -> ProjectionResult:
    """Annual saving, payback and cumulative savings for a single option."""
    cfg = config or ProjectionConfig()

    unit_cost = compute_unit_cost(
        inputs.water_unit_cost,
        inputs.sewer_unit_cost,
        inputs.sewer_billed_percent,
    )
    annual_saving = compute_annual_saving(
        inputs.baseline_flush_volume,
        option.replacement_volume,
        unit_cost,
        inputs.total_annual_uses,
    )
    r = inputs.inflation_rate

    result = ProjectionResult(
        label=option.label,
        annual_saving=annual_saving,
        payback_years=compute_payback_years(
            annual_saving, option.capital_cost, r, max_years=cfg.max_payback_years
        ),
        cumulative_savings_by_year=compute_cumulative_savings(
            annual_saving, r, years_shown=cfg.years_shown
        ),
        replacement_volume=option.replacement_volume,
        capital_cost=option.capital_cost,
    )
    logger.debug(
        "%s: annual_saving=%.4f payback=%s",
        result.label, result.annual_saving, result.payback_years,
    )
    return result


def run_projection(
    inputs: InputParameters,
    config: Optional[ProjectionConfig] = None,
) -> List[ProjectionResult]:
    """
    Run every catalog option against the inputs.

    Returns
    -------
    One ProjectionResult per catalog row, in catalog order.
    """
    cfg = config or ProjectionConfig()
    return [compute_option_result(inputs, option, cfg) for option in build_options(inputs)]
