from __future__ import annotations

import math

PLACEHOLDER = "—"

# Payback sentinel when the capital cost is never recovered.
NEVER: float = math.inf


def is_never(payback_years: float) -> bool:
    return payback_years == NEVER


def fmt_number(value: float, decimals: int = 2) -> str:
    """Fixed-point formatting; non-finite values render as the placeholder."""
    if value is None or not math.isfinite(value):
        return PLACEHOLDER
    return f"{value:.{decimals}f}"


def fmt_currency(value: float, symbol: str = "£", decimals: int = 2) -> str:
    text = fmt_number(value, decimals)
    if text == PLACEHOLDER:
        return text
    return f"{symbol}{text}"
