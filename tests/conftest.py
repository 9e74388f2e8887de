import os

import pytest
from fastapi.testclient import TestClient

from policy_repro.api.main import app
from policy_repro.core.models import Metadata, Policy
from policy_repro.core.observability.metrics import reset_metrics


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    os.environ.setdefault("REPRO_ENV", "dev")


@pytest.fixture(autouse=True)
def _reset_named_metrics():
    reset_metrics()
    yield


@pytest.fixture(autouse=True)
def _pin_default_year(monkeypatch):
    monkeypatch.setenv("REPRO_DEFAULT_YEAR", "2024")


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def us_metadata():
    return Metadata(
        package="policyengine_us",
        entities={
            "person": {"plural": "people", "is_person": True},
            "household": {"plural": "households"},
        },
        variables={
            "age": {"entity": "person", "isInputVariable": True, "defaultValue": 0},
            "employment_income": {"entity": "person", "isInputVariable": True, "defaultValue": 0},
            "income_tax": {"entity": "person", "isInputVariable": False, "defaultValue": 0},
            "state_name": {"entity": "household", "isInputVariable": True, "defaultValue": "TX"},
            "household_net_income": {"entity": "household", "isInputVariable": False, "defaultValue": 0},
        },
    )


@pytest.fixture()
def uk_metadata():
    return Metadata(package="policyengine_uk")


@pytest.fixture()
def reform_policy():
    return Policy.from_reform_data(
        {
            "gov.irs.credits.ctc.amount.base[0].amount": {"2024-01-01.2100-12-31": 3000},
            "gov.contrib.ubi_center.flat_tax.in_effect": {"2024-01-01.2024-12-31": True},
        }
    )


@pytest.fixture()
def empty_policy():
    return Policy()


@pytest.fixture()
def household():
    return {
        "people": {
            "you": {
                "age": {"2024": 40},
                "employment_income": {"2024": 30000},
                "income_tax": {"2024": None},
                "is_blind": {"2024": None},
                "is_disabled": {"2024": False},
            },
        },
        "households": {
            "your household": {
                "members": ["you"],
                "state_name": {"2024": "CA"},
                "household_net_income": {"2024": None},
            },
        },
    }
