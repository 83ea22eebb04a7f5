"""
Input checks applied by the caller before values reach the engine.

The engine accepts any real number; the form is where physically
meaningless values get flagged:
- Negative volumes, counts, tariffs or rates
- Sewer share above 100%
- Zero usage (every saving collapses to zero)
- Replacement options that use more water than the baseline
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import List

from engine.catalog import OPTION_CATALOG
from engine.parameters import InputParameters


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a parameter set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


USAGE_FIELDS = ("uses_per_day", "days_per_week", "weeks_per_year")


def validate_inputs(inputs: InputParameters) -> ValidationResult:
    """
    Run all checks on a parameter set.
    Errors mark values the form should reject; warnings are informational.
    """
    result = ValidationResult()

    # --- Finite, non-negative ---
    for f in fields(inputs):
        value = getattr(inputs, f.name)
        if not math.isfinite(value):
            result.errors.append(f"{f.name} is not a finite number.")
        elif value < 0:
            result.errors.append(f"{f.name} is negative ({value}).")
    if result.errors:
        return result  # remaining checks assume clean numbers

    # --- Percent bounds ---
    if inputs.sewer_billed_percent > 100:
        result.errors.append(
            f"sewer_billed_percent is above 100 ({inputs.sewer_billed_percent})."
        )

    # --- Usage ---
    for name in USAGE_FIELDS:
        value = getattr(inputs, name)
        if value != int(value):
            result.warnings.append(f"{name} is not a whole number ({value}).")
    if inputs.days_per_week > 7:
        result.warnings.append(f"days_per_week exceeds 7 ({inputs.days_per_week}).")
    if inputs.weeks_per_year > 53:
        result.warnings.append(f"weeks_per_year exceeds 53 ({inputs.weeks_per_year}).")
    if inputs.total_annual_uses == 0:
        result.warnings.append("Total annual flushes is zero — all savings will be zero.")

    # --- Options vs baseline ---
    for spec in OPTION_CATALOG:
        option = spec.resolve(inputs)
        if option.replacement_volume >= inputs.baseline_flush_volume:
            result.warnings.append(
                f"{option.label} uses {option.replacement_volume} L per flush, not less than "
                f"the {inputs.baseline_flush_volume} L baseline — it will never pay back."
            )

    return result
