from __future__ import annotations

from typing import List

from policy_repro.core.config import is_us_region
from policy_repro.core.dates import get_start_end_dates, iter_periods
from policy_repro.core.generators.baseline_gen import reported_state_tax_update
from policy_repro.core.literals import python_value
from policy_repro.core.models import Policy, SimulationType


def get_reform_code(type: SimulationType | str, policy: Policy, region: str) -> List[str]:
    """
    ``modify_parameters`` function plus the ``reform`` class installing it.

    One three-line ``update`` call per (parameter, period), in the order the
    reform lists them. US population-scale runs also get the reported state
    income tax switch at the top of the function.
    """
    if not policy.reform.has_parameters():
        return []

    sim_type = SimulationType.coerce(type)
    lines = ["", "", "def modify_parameters(parameters):"]

    if sim_type is SimulationType.POLICY and is_us_region(region):
        dates = get_start_end_dates(policy)
        lines += reported_state_tax_update(dates["earliest_start"], dates["latest_end"])

    for parameter_name, start, end, value in iter_periods(policy):
        lines += [
            f"    parameters.{parameter_name}.update(",
            f'        start=instant("{start}"), stop=instant("{end}"),',
            f"        value={python_value(value)})",
        ]

    lines += [
        "    return parameters",
        "",
        "",
        "class reform(Reform):",
        "    def apply(self):",
        "        self.modify_parameters(modify_parameters)",
    ]
    return lines
