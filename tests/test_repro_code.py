"""
End-to-end reproducibility script tests.
"""
from __future__ import annotations

import ast

import pytest

from policy_repro.core.errors import EmptyReformError, InvalidFieldError
from policy_repro.core.generators import get_reproducibility_code_block, render_script
from policy_repro.core.models import Metadata, Policy


def test_us_policy_scenario():
    metadata = Metadata(package="policyengine_us")
    policy = Policy.from_reform_data({"gov.a.b": {"2023-01-01.2023-12-31": True}})

    lines = get_reproducibility_code_block("policy", metadata, policy, "us", 2023)

    assert lines == [
        "from policyengine_us import Microsimulation",
        "from policyengine_core.reforms import Reform",
        "from policyengine_core.periods import instant",
        "",
        "",
        '"""',
        "In US nationwide simulations,",
        "use reported state income tax liabilities",
        '"""',
        "def modify_baseline(parameters):",
        "    parameters.simulation.reported_state_income_tax.update(",
        '        start=instant("2023-01-01"), stop=instant("2023-12-31"),',
        "        value=True)",
        "    return parameters",
        "",
        "",
        "class baseline_reform(Reform):",
        "    def apply(self):",
        "        self.modify_parameters(modify_baseline)",
        "",
        "",
        "def modify_parameters(parameters):",
        "    parameters.simulation.reported_state_income_tax.update(",
        '        start=instant("2023-01-01"), stop=instant("2023-12-31"),',
        "        value=True)",
        "    parameters.gov.a.b.update(",
        '        start=instant("2023-01-01"), stop=instant("2023-12-31"),',
        "        value=True)",
        "    return parameters",
        "",
        "",
        "class reform(Reform):",
        "    def apply(self):",
        "        self.modify_parameters(modify_parameters)",
        "baseline = Microsimulation(reform=baseline_reform)",
        "reformed = Microsimulation(reform=reform)",
        'baseline_person = baseline.calc("household_net_income",',
        '    period=2023, map_to="person")',
        'reformed_person = reformed.calc("household_net_income",',
        '    period=2023, map_to="person")',
        "difference_person = reformed_person - baseline_person",
    ]
    ast.parse("\n".join(lines))


def test_uk_policy_script_parses(uk_metadata, reform_policy):
    lines = get_reproducibility_code_block("policy", uk_metadata, reform_policy, "uk", 2024)
    assert lines[0] == "from policyengine_uk import Microsimulation"
    assert "baseline = Microsimulation()" in lines
    assert not any("modify_baseline" in line for line in lines)
    ast.parse("\n".join(lines))


@pytest.mark.parametrize("earning_variation", [False, True])
def test_household_script_parses(us_metadata, reform_policy, household, earning_variation):
    lines = get_reproducibility_code_block(
        "household", us_metadata, reform_policy, "us", 2024, household, earning_variation
    )
    assert lines[0] == "from policyengine_us import Simulation"
    assert not any("modify_baseline" in line for line in lines)
    assert not any("reported_state_income_tax" in line for line in lines)
    assert not any(line.startswith("baseline = ") for line in lines)
    assert lines[-1] == "print(output)"
    ast.parse("\n".join(lines))


def test_household_without_reform_has_no_reform_machinery(us_metadata, empty_policy, household):
    lines = get_reproducibility_code_block("household", us_metadata, empty_policy, "uk", 2024, household)
    assert lines[0] == "from policyengine_us import Simulation"
    assert lines[1:3] == ["", ""]
    assert lines[3].startswith("situation = {")
    ast.parse("\n".join(lines))


def test_generation_is_deterministic(us_metadata, reform_policy, household):
    a = get_reproducibility_code_block("household", us_metadata, reform_policy, "us", 2024, household, True)
    b = get_reproducibility_code_block("household", us_metadata, reform_policy, "us", 2024, household, True)
    assert a == b


def test_render_script_with_header(reform_policy, uk_metadata):
    lines = get_reproducibility_code_block("policy", uk_metadata, reform_policy, "uk", 2024)
    script = render_script(lines, type="policy", region="uk", year=2024)
    assert script.startswith('"""\nReproduce a policy simulation.\n')
    assert "region: uk" in script
    assert "year: 2024" in script
    assert script.endswith("difference_person = reformed_person - baseline_person\n")
    ast.parse(script)


def test_render_script_without_header():
    lines = ["from policyengine_uk import Microsimulation", "x = 1"]
    assert render_script(lines, type="policy", region="uk", header=False) == "\n".join(lines) + "\n"


def test_policy_without_reform_is_rejected(uk_metadata, empty_policy):
    with pytest.raises(EmptyReformError) as exc:
        get_reproducibility_code_block("policy", uk_metadata, empty_policy, "uk", 2024)
    assert exc.value.code == "empty_reform"


@pytest.mark.parametrize("region", ["uk\\N", 'uk"""', "UK", "u k"])
def test_unsafe_region_is_rejected(uk_metadata, reform_policy, region):
    with pytest.raises(InvalidFieldError):
        get_reproducibility_code_block("policy", uk_metadata, reform_policy, region, 2024)
    with pytest.raises(InvalidFieldError):
        render_script(["x = 1"], type="policy", region=region, year=2024)


@pytest.mark.parametrize("year", ["2024)", "24", 20245, True])
def test_malformed_year_is_rejected(uk_metadata, reform_policy, year):
    with pytest.raises(InvalidFieldError):
        get_reproducibility_code_block("policy", uk_metadata, reform_policy, "uk", year)
    with pytest.raises(InvalidFieldError):
        render_script(["x = 1"], type="policy", region="uk", year=year)


def test_string_year_is_accepted(uk_metadata, reform_policy):
    lines = get_reproducibility_code_block("policy", uk_metadata, reform_policy, "enhanced_us", "2026")
    script = render_script(lines, type="policy", region="enhanced_us", year="2026")
    assert "year: 2026" in script
    ast.parse(script)
