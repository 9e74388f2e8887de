from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from policy_repro.core.config import resolve_year
from policy_repro.core.household import HouseholdOptimiser, optimise_household
from policy_repro.core.literals import situation_literal
from policy_repro.core.models import Metadata, Policy, SimulationType

EARNINGS_VARIABLE = "employment_income"
EARNINGS_AXIS = {"name": EARNINGS_VARIABLE, "count": 200, "min": 0, "max": 200_000}

_MISSING = object()


def _value_for_year(values: Dict[Any, Any], year) -> Any:
    value = values.get(str(year), _MISSING)
    if value is _MISSING:
        value = values.get(year, _MISSING)
    return value


def prune_situation(situation: Dict[str, Any], year, earning_variation: bool = False) -> Dict[str, Any]:
    """
    Drop variables with no value for ``year`` (and employment income when it
    is swept along an axis). Mutates and returns ``situation``.
    """
    for instances in situation.values():
        if not isinstance(instances, dict):
            continue
        for instance in instances.values():
            if not isinstance(instance, dict):
                continue
            for variable in list(instance.keys()):
                if variable != "members":
                    values = instance[variable]
                    if isinstance(values, dict) and _value_for_year(values, year) is None:
                        instance.pop(variable, None)
                if earning_variation and variable == EARNINGS_VARIABLE:
                    instance.pop(variable, None)

    if earning_variation:
        situation["axes"] = [[dict(EARNINGS_AXIS)]]
    return situation


def get_situation_code(
    type: SimulationType | str,
    metadata: Metadata,
    policy: Policy,
    year,
    household_input: Optional[Dict[str, Any]],
    earning_variation: Optional[bool],
    *,
    optimiser: HouseholdOptimiser = optimise_household,
) -> List[str]:
    if SimulationType.coerce(type) is not SimulationType.HOUSEHOLD:
        return []

    period = resolve_year(year)
    situation = copy.deepcopy(optimiser(household_input or {}, metadata, True))
    prune_situation(situation, period, bool(earning_variation))

    lines = [
        "",
        "",
        "situation = " + situation_literal(situation),
        "",
        "simulation = Simulation(",
    ]
    if policy.reform.has_parameters():
        lines.append("    reform=reform,")
    lines += [
        "    situation=situation,",
        ")",
        "",
        f'output = simulation.calculate("household_net_income", {period})',
        "print(output)",
    ]
    return lines
