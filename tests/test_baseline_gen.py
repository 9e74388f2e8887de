"""
US baseline reform generator tests.
"""
from __future__ import annotations

import ast

import pytest

from policy_repro.core.generators.baseline_gen import _baseline_block, get_baseline_code
from policy_repro.core.models import Policy


@pytest.fixture()
def policy():
    return Policy.from_reform_data(
        {
            "gov.a.b": {"2023-01-01.2023-12-31": True},
            "gov.c": {"2021-01-01.2022-06-30": 5, "2024-01-01.2026-12-31": 6},
        }
    )


def test_household_gets_no_baseline(policy):
    assert get_baseline_code("household", policy, "us") == []


@pytest.mark.parametrize("region", ["uk", "ca", "ny", "", None])
def test_non_us_region_gets_no_baseline(policy, region):
    assert get_baseline_code("policy", policy, region) == []


@pytest.mark.parametrize("region", ["us", "enhanced_us"])
def test_us_baseline_spans_reform_dates(policy, region):
    lines = get_baseline_code("policy", policy, region)
    assert "def modify_baseline(parameters):" in lines
    assert "    parameters.simulation.reported_state_income_tax.update(" in lines
    assert '        start=instant("2021-01-01"), stop=instant("2026-12-31"),' in lines
    assert lines[-3:] == [
        "class baseline_reform(Reform):",
        "    def apply(self):",
        "        self.modify_parameters(modify_baseline)",
    ]


def test_baseline_block_is_valid_python(policy):
    code = "\n".join(get_baseline_code("policy", policy, "us"))
    ast.parse(code)


def test_empty_reform_is_guarded():
    assert get_baseline_code("policy", Policy(), "us") == []


def test_unguarded_block_renders_missing_dates_as_none():
    lines = _baseline_block(None, None)
    assert '        start=instant("None"), stop=instant("None"),' in lines
