"""
Fixed hardware catalog — the three options compared against the baseline.

Each row either pins its replacement volume or names the InputParameters
field that supplies it, so per-option math is written once in the runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .parameters import InputParameters, Option


@dataclass(frozen=True)
class OptionSpec:
    label: str
    capital_cost: float
    fixed_volume: Optional[float] = None
    volume_field: Optional[str] = None

    def resolve(self, inputs: InputParameters) -> Option:
        if self.fixed_volume is not None:
            volume = self.fixed_volume
        else:
            volume = getattr(inputs, self.volume_field)
        return Option(
            label=self.label,
            replacement_volume=float(volume),
            capital_cost=float(self.capital_cost),
        )


OPTION_CATALOG: Tuple[OptionSpec, ...] = (
    OptionSpec(label="Propelair 135", capital_cost=1000.0, fixed_volume=1.35),
    OptionSpec(label="PAST", capital_cost=600.0, volume_field="option_b_volume"),
    OptionSpec(label="Analogue", capital_cost=450.0, volume_field="option_c_volume"),
)


def build_options(
    inputs: InputParameters,
    catalog: Tuple[OptionSpec, ...] = OPTION_CATALOG,
) -> List[Option]:
    """Resolve catalog rows against the current inputs, preserving order."""
    return [spec.resolve(inputs) for spec in catalog]
