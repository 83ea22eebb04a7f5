"""
Core package — configuration, form schema, and shared display utilities.
No business logic lives here.
"""

from .schema import INPUT_FIELDS, RESULT_COLUMNS, cumulative_column
from .config import ProjectionConfig
from .utils import NEVER, PLACEHOLDER, is_never, fmt_number, fmt_currency

__all__ = [
    "INPUT_FIELDS",
    "RESULT_COLUMNS",
    "cumulative_column",
    "ProjectionConfig",
    "NEVER",
    "PLACEHOLDER",
    "is_never",
    "fmt_number",
    "fmt_currency",
]
