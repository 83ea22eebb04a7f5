from __future__ import annotations

from typing import Tuple

# Form fields in display order: (field name, label, integer step).
# Names match engine.parameters.InputParameters.
INPUT_FIELDS: Tuple[Tuple[str, str, bool], ...] = (
    ("water_unit_cost", "Metered water charge per m³", False),
    ("baseline_flush_volume", "Current flush volume (L)", False),
    ("uses_per_day", "Flushes per day", True),
    ("days_per_week", "Days per week", True),
    ("weeks_per_year", "Weeks per year", True),
    ("sewer_unit_cost", "Sewerage charge per m³", False),
    ("sewer_billed_percent", "% volume charged for sewerage", False),
    ("inflation_rate_percent", "Price inflation %/yr", False),
    ("option_b_volume", "PAST flush volume (L)", False),
    ("option_c_volume", "Analogue flush volume (L)", False),
)

# Leading columns of the results table; "Cum £ Yr N" columns follow.
RESULT_COLUMNS: Tuple[str, ...] = (
    "Option",
    "Annual £ saving",
    "Payback (yrs)",
)


def cumulative_column(year: int, currency_symbol: str = "£") -> str:
    return f"Cum {currency_symbol} Yr {year}"
