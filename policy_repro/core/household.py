from __future__ import annotations

import copy
from typing import Any, Callable, Dict

from policy_repro.core.models import Metadata

Household = Dict[str, Any]
HouseholdOptimiser = Callable[[Household, Metadata, bool], Household]


def optimise_household(household: Household, metadata: Metadata, minimal: bool = False) -> Household:
    """
    Normalise a household situation against the country metadata.

    - Undeclared variables are left as they are.
    - Computed (non-input) variables are dropped in minimal mode, otherwise
      their per-year values are reset to None so the engine computes them.
    - In minimal mode, input variables that only hold their default are dropped.

    Always returns a fresh structure; ``household`` is not modified.
    """
    result = copy.deepcopy(household or {})

    for instances in result.values():
        if not isinstance(instances, dict):
            continue
        for instance in instances.values():
            if not isinstance(instance, dict):
                continue
            for variable in list(instance.keys()):
                if variable == "members":
                    continue
                meta = metadata.variables.get(variable)
                if meta is None:
                    continue
                values = instance[variable]
                if not isinstance(values, dict):
                    continue

                if not meta.is_input_variable:
                    if minimal:
                        del instance[variable]
                    else:
                        instance[variable] = {period: None for period in values}
                    continue

                if minimal and values and all(v == meta.default_value for v in values.values()):
                    del instance[variable]

    return result
