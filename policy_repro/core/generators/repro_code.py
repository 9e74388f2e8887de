from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from policy_repro.core.config import resolve_year
from policy_repro.core.generators.baseline_gen import get_baseline_code
from policy_repro.core.generators.header_gen import get_header_code
from policy_repro.core.generators.implementation_gen import get_implementation_code
from policy_repro.core.generators.reform_gen import get_reform_code
from policy_repro.core.generators.situation_gen import get_situation_code
from policy_repro.core.household import HouseholdOptimiser, optimise_household
from policy_repro.core.errors import EmptyReformError
from policy_repro.core.models import Metadata, Policy, SimulationType
from policy_repro.core.validation import check_region, check_year

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = PACKAGE_ROOT / "templates"

log = logging.getLogger("repro.codegen")


def get_reproducibility_code_block(
    type: SimulationType | str,
    metadata: Metadata,
    policy: Policy,
    region: str,
    year=None,
    household_input: Optional[Dict[str, Any]] = None,
    earning_variation: Optional[bool] = None,
    *,
    optimiser: HouseholdOptimiser = optimise_household,
) -> List[str]:
    """
    Python script lines reproducing a simulation run in the host application.

    Sections are emitted in a fixed order (imports, baseline reform, reform,
    household situation, population comparison); each one decides on its own
    whether it applies. Consumers must keep the lines as returned.

    Raises EmptyReformError for a population-wide run without reform
    parameters: the comparison would reference undefined reform classes.
    """
    sim_type = SimulationType.coerce(type)
    check_region(region)
    check_year(year)
    if sim_type is SimulationType.POLICY and not policy.reform.has_parameters():
        raise EmptyReformError()

    lines = [
        *get_header_code(sim_type, metadata, policy),
        *get_baseline_code(sim_type, policy, region),
        *get_reform_code(sim_type, policy, region),
        *get_situation_code(
            sim_type,
            metadata,
            policy,
            year,
            household_input,
            earning_variation,
            optimiser=optimiser,
        ),
        *get_implementation_code(sim_type, region, year),
    ]

    log.debug(
        "generated reproducibility code type=%s region=%s parameters=%d lines=%d",
        sim_type.value,
        region,
        len(policy.reform.data),
        len(lines),
    )
    return lines


def _template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=()),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_script(
    lines: List[str],
    *,
    type: SimulationType | str,
    region: str,
    year=None,
    header: bool = True,
) -> str:
    """Join generated lines into a downloadable script, optionally with a provenance docstring."""
    check_region(region)
    check_year(year)
    body = "\n".join(lines)
    if not header:
        return body + "\n"

    template = _template_env().get_template("repro_script.py.j2")
    rendered = template.render(
        simulation_type=SimulationType.coerce(type).value,
        region=region,
        year=resolve_year(year),
        body=body,
    )
    return rendered + "\n"
