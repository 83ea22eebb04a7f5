"""
Display tables for projection results.

One row per option: label, annual saving, payback and the cumulative
savings columns. Numeric frames feed charts and CSV export; formatted
frames feed the on-screen table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from core.config import ProjectionConfig
from core.schema import RESULT_COLUMNS, cumulative_column
from core.utils import fmt_currency, fmt_number
from engine.parameters import ProjectionResult


def build_results_table(
    results: Sequence[ProjectionResult],
    config: Optional[ProjectionConfig] = None,
    *,
    formatted: bool = True,
) -> pd.DataFrame:
    """
    Tabulate results in catalog order.

    With formatted=False the payback column keeps inf for "never" so the
    frame stays numeric; with formatted=True every cell is a display string.
    """
    cfg = config or ProjectionConfig()
    option_col, saving_col, payback_col = RESULT_COLUMNS
    cum_cols = [cumulative_column(y, cfg.currency_symbol) for y in range(1, cfg.years_shown + 1)]

    rows = []
    for res in results:
        row = {
            option_col: res.label,
            saving_col: res.annual_saving,
            payback_col: res.payback_years,
        }
        for col, value in zip(cum_cols, res.cumulative_savings_by_year):
            row[col] = value
        rows.append(row)

    table = pd.DataFrame(rows, columns=[option_col, saving_col, payback_col] + cum_cols)
    if not formatted:
        return table

    for c in [saving_col] + cum_cols:
        table[c] = table[c].apply(lambda v: fmt_currency(v, cfg.currency_symbol, cfg.decimals))
    table[payback_col] = table[payback_col].apply(lambda v: fmt_number(v, cfg.decimals))
    return table


def cumulative_long_frame(
    results: Sequence[ProjectionResult],
) -> pd.DataFrame:
    """Long-format (option, year, cumulative) frame for line charts."""
    frames = []
    for res in results:
        values = np.asarray(res.cumulative_savings_by_year, dtype=float)
        frames.append(pd.DataFrame({
            "option": res.label,
            "year": np.arange(1, len(values) + 1),
            "cumulative_saving": values,
        }))
    if not frames:
        return pd.DataFrame(columns=["option", "year", "cumulative_saving"])
    return pd.concat(frames, ignore_index=True)


@dataclass(frozen=True)
class HeadlineCard:
    """Per-option highlight: yearly saving and payback, as display strings."""
    label: str
    yearly_saving: str
    payback: str

    @property
    def payback_text(self) -> str:
        return f"Payback in {self.payback} yrs"


def headline_cards(
    results: Sequence[ProjectionResult],
    config: Optional[ProjectionConfig] = None,
) -> List[HeadlineCard]:
    cfg = config or ProjectionConfig()
    return [
        HeadlineCard(
            label=res.label,
            yearly_saving=fmt_currency(res.annual_saving, cfg.currency_symbol, cfg.decimals),
            payback=fmt_number(res.payback_years, cfg.decimals),
        )
        for res in results
    ]
