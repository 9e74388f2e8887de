from __future__ import annotations

from typing import List

from policy_repro.core.models import Metadata, Policy, SimulationType


def get_header_code(type: SimulationType | str, metadata: Metadata, policy: Policy) -> List[str]:
    """Import lines: the engine entry class, plus reform machinery when needed."""
    sim_type = SimulationType.coerce(type)

    if sim_type is SimulationType.HOUSEHOLD:
        lines = [f"from {metadata.package} import Simulation"]
    else:
        lines = [f"from {metadata.package} import Microsimulation"]

    if policy.reform.has_parameters():
        lines += [
            "from policyengine_core.reforms import Reform",
            "from policyengine_core.periods import instant",
        ]

    return lines
