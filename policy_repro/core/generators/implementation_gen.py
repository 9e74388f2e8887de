from __future__ import annotations

from typing import List

from policy_repro.core.config import is_us_region, resolve_year
from policy_repro.core.models import SimulationType


def get_implementation_code(type: SimulationType | str, region: str, year) -> List[str]:
    """Baseline vs reformed microsimulations and the per-person net income difference."""
    if SimulationType.coerce(type) is not SimulationType.POLICY:
        return []

    baseline_args = "reform=baseline_reform" if is_us_region(region) else ""
    period = resolve_year(year)

    return [
        f"baseline = Microsimulation({baseline_args})",
        "reformed = Microsimulation(reform=reform)",
        'baseline_person = baseline.calc("household_net_income",',
        f'    period={period}, map_to="person")',
        'reformed_person = reformed.calc("household_net_income",',
        f'    period={period}, map_to="person")',
        "difference_person = reformed_person - baseline_person",
    ]
