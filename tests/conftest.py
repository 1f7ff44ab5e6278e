import itertools

import pytest
from click.testing import CliRunner

from cvss_sim.config.settings import ENV_VARS
from cvss_sim.core.metrics import METRICS
from cvss_sim.core.models import CVSSFactors


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any .env file"""
    for var in ENV_VARS:
        # setenv first so the variable is removed again even if a .env load sets it
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def runner():
    return CliRunner()


def all_factor_combinations():
    """Every CVSSFactors value allowed by the metric tables"""
    weights = [[option.weight for option in metric.options] for metric in METRICS]
    keys = [metric.key for metric in METRICS]
    for combination in itertools.product(*weights):
        yield CVSSFactors(**dict(zip(keys, combination)))
