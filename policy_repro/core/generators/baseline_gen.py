from __future__ import annotations

from typing import List

from policy_repro.core.config import is_us_region
from policy_repro.core.dates import get_start_end_dates
from policy_repro.core.models import Policy, SimulationType


def reported_state_tax_update(start: str | None, end: str | None) -> List[str]:
    """Parameter update switching to reported state income tax (function-body indent)."""
    return [
        "    parameters.simulation.reported_state_income_tax.update(",
        f'        start=instant("{start}"), stop=instant("{end}"),',
        "        value=True)",
    ]


def _baseline_block(start: str | None, end: str | None) -> List[str]:
    # No reform-emptiness check here: None dates render as instant("None").
    return [
        "",
        "",
        '"""',
        "In US nationwide simulations,",
        "use reported state income tax liabilities",
        '"""',
        "def modify_baseline(parameters):",
        *reported_state_tax_update(start, end),
        "    return parameters",
        "",
        "",
        "class baseline_reform(Reform):",
        "    def apply(self):",
        "        self.modify_parameters(modify_baseline)",
    ]


def get_baseline_code(type: SimulationType | str, policy: Policy, region: str) -> List[str]:
    """
    Baseline reform for US population-scale runs.

    The baseline reads reported state income tax over the span the reform
    is active. Household runs, non-US regions and empty reforms get nothing.
    """
    sim_type = SimulationType.coerce(type)
    if sim_type is SimulationType.HOUSEHOLD or not is_us_region(region):
        return []
    if not policy.reform.has_parameters():
        return []

    dates = get_start_end_dates(policy)
    return _baseline_block(dates["earliest_start"], dates["latest_end"])
