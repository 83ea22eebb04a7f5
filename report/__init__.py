"""
Report outputs — results tables, chart frames, and headline cards.
"""

from .tables import (
    HeadlineCard,
    build_results_table,
    cumulative_long_frame,
    headline_cards,
)

__all__ = [
    "HeadlineCard",
    "build_results_table",
    "cumulative_long_frame",
    "headline_cards",
]
